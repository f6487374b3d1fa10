from collections.abc import Sequence
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from brewtuner.core.database import get_db
from brewtuner.models.catalog import Bean, BrewMethod, Grinder, Roaster
from brewtuner.schemas.catalog import (
    BeanCreate,
    BeanRead,
    BrewMethodCreate,
    BrewMethodRead,
    GrinderCreate,
    GrinderRead,
    RoasterCreate,
    RoasterRead,
)
from brewtuner.services import catalog

router = APIRouter(tags=["catalog"])


@router.get("/roasters", response_model=list[RoasterRead])
def list_roasters(db: Session = Depends(get_db)) -> Sequence[Roaster]:
    return catalog.list_roasters(db)


@router.post("/roasters", response_model=RoasterRead, status_code=status.HTTP_201_CREATED)
def create_roaster(payload: RoasterCreate, db: Session = Depends(get_db)) -> Roaster:
    return catalog.create_roaster(db, payload.name)


@router.get("/roasters/{roaster_id}/beans", response_model=list[BeanRead])
def list_beans(roaster_id: UUID, db: Session = Depends(get_db)) -> Sequence[Bean]:
    return catalog.list_beans(db, roaster_id)


@router.post("/roasters/{roaster_id}/beans", response_model=BeanRead, status_code=status.HTTP_201_CREATED)
def create_bean(roaster_id: UUID, payload: BeanCreate, db: Session = Depends(get_db)) -> Bean:
    return catalog.create_bean(db, roaster_id, payload.name)


@router.get("/grinders", response_model=list[GrinderRead])
def list_grinders(db: Session = Depends(get_db)) -> Sequence[Grinder]:
    return catalog.list_grinders(db)


@router.post("/grinders", response_model=GrinderRead, status_code=status.HTTP_201_CREATED)
def create_grinder(payload: GrinderCreate, db: Session = Depends(get_db)) -> Grinder:
    return catalog.create_grinder(db, payload.name)


@router.get("/brew-methods", response_model=list[BrewMethodRead])
def list_brew_methods(db: Session = Depends(get_db)) -> Sequence[BrewMethod]:
    return catalog.list_brew_methods(db)


@router.post("/brew-methods", response_model=BrewMethodRead, status_code=status.HTTP_201_CREATED)
def create_brew_method(payload: BrewMethodCreate, db: Session = Depends(get_db)) -> BrewMethod:
    return catalog.create_brew_method(db, payload.name)
