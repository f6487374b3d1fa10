"""One tuning profile per (bean, grinder, brew method).

Uniqueness of the key is owned by the store's unique constraint. Writes go
through a single ``INSERT .. ON CONFLICT DO UPDATE`` so two callers upserting
the same key never race into duplicate rows.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from brewtuner.models.profile import PROFILE_KEY_COLUMNS, Profile
from brewtuner.services.store import require_row, upsert_insert, write_one

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProfileFound:
    profile: Profile


@dataclass(frozen=True)
class LookupAbsent:
    """No profile exists yet for the key."""


@dataclass(frozen=True)
class LookupFailed:
    cause: Exception


ProfileLookup = ProfileFound | LookupAbsent | LookupFailed


def get_profile(db: Session, bean_id: UUID, grinder_id: UUID, brew_method_id: UUID) -> ProfileLookup:
    """Look a profile up by its composite key without raising for store errors."""
    statement = (
        select(Profile)
        .where(
            Profile.bean_id == bean_id,
            Profile.grinder_id == grinder_id,
            Profile.brew_method_id == brew_method_id,
        )
        .limit(1)
    )
    try:
        profile = db.execute(statement).scalars().first()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.warning("Profile lookup failed for bean=%s grinder=%s method=%s: %s", bean_id, grinder_id, brew_method_id, exc)
        return LookupFailed(cause=exc)

    if profile is None:
        return LookupAbsent()
    return ProfileFound(profile=profile)


def upsert_profile(
    db: Session,
    bean_id: UUID,
    grinder_id: UUID,
    brew_method_id: UUID,
    setting: float,
    grams: float,
    tamped: bool = False,
) -> Profile:
    statement = upsert_insert(db, Profile).values(
        bean_id=bean_id,
        grinder_id=grinder_id,
        brew_method_id=brew_method_id,
        profile_setting=setting,
        grams=grams,
        tamped=tamped,
    )
    statement = statement.on_conflict_do_update(
        index_elements=list(PROFILE_KEY_COLUMNS),
        set_={
            "profile_setting": statement.excluded.profile_setting,
            "grams": statement.excluded.grams,
            "tamped": statement.excluded.tamped,
        },
    ).returning(Profile)

    return require_row("upsert_profile", write_one(db, "upsert_profile", statement))
