from collections.abc import Sequence
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from brewtuner.core.database import get_db
from brewtuner.models.grind_log import GrinderLog, GrindLog
from brewtuner.schemas.grind_log import (
    GrinderLogCreate,
    GrinderLogRead,
    GrindLogCreate,
    GrindLogCreated,
    GrindLogRead,
    GrindLogUpdate,
)
from brewtuner.services import grind_log_ledger

router = APIRouter(tags=["grind-logs"])


@router.post("/profiles/{profile_id}/grind-logs", response_model=GrindLogCreated, status_code=status.HTTP_201_CREATED)
def create_grind_log(profile_id: UUID, payload: GrindLogCreate, db: Session = Depends(get_db)) -> GrindLog:
    return grind_log_ledger.log_grind(
        db,
        profile_id,
        setting=payload.setting,
        outcome=payload.outcome,
        adjustment=payload.adjustment,
        tamped=payload.tamped,
        grams=payload.grams,
    )


@router.get("/profiles/{profile_id}/grind-logs", response_model=list[GrindLogRead])
def list_grind_logs(profile_id: UUID, db: Session = Depends(get_db)) -> Sequence[GrindLog]:
    return grind_log_ledger.get_grind_logs(db, profile_id)


@router.patch("/grind-logs/{log_id}", response_model=GrindLogRead)
def patch_grind_log(log_id: UUID, payload: GrindLogUpdate, db: Session = Depends(get_db)) -> GrindLog:
    return grind_log_ledger.update_grinder_log(db, log_id, payload)


@router.delete("/grind-logs/{log_id}")
def delete_grind_log(log_id: UUID, db: Session = Depends(get_db)) -> dict[str, UUID]:
    return {"id": grind_log_ledger.delete_grind_log(db, log_id)}


@router.post("/grinders/{grinder_id}/logs", response_model=GrinderLogRead, status_code=status.HTTP_201_CREATED)
def create_grinder_log(grinder_id: UUID, payload: GrinderLogCreate, db: Session = Depends(get_db)) -> GrinderLog:
    return grind_log_ledger.log_grinder_log(
        db,
        grinder_id,
        setting=payload.setting,
        outcome=payload.outcome,
        adjustment=payload.adjustment,
        tamped=payload.tamped,
        grams=payload.grams,
    )


@router.get("/grinders/{grinder_id}/logs", response_model=list[GrinderLogRead])
def list_grinder_logs(grinder_id: UUID, db: Session = Depends(get_db)) -> Sequence[GrinderLog]:
    return grind_log_ledger.get_grinder_logs(db, grinder_id)
