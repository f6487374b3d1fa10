from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from brewtuner.core.database import get_db
from brewtuner.models.profile import Profile
from brewtuner.schemas.profile import ProfileRead, ProfileUpsert
from brewtuner.services.profile_registry import LookupAbsent, LookupFailed, get_profile, upsert_profile

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get("/lookup", response_model=ProfileRead)
def lookup_profile(
    bean_id: UUID = Query(),
    grinder_id: UUID = Query(),
    brew_method_id: UUID = Query(),
    db: Session = Depends(get_db),
) -> Profile:
    lookup = get_profile(db, bean_id, grinder_id, brew_method_id)
    if isinstance(lookup, LookupAbsent):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    if isinstance(lookup, LookupFailed):
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Backing store unavailable")
    return lookup.profile


@router.put("", response_model=ProfileRead)
def put_profile(payload: ProfileUpsert, db: Session = Depends(get_db)) -> Profile:
    return upsert_profile(
        db,
        bean_id=payload.bean_id,
        grinder_id=payload.grinder_id,
        brew_method_id=payload.brew_method_id,
        setting=payload.setting,
        grams=payload.grams,
        tamped=payload.tamped,
    )
