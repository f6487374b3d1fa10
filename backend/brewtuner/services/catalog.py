from __future__ import annotations

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import insert, select
from sqlalchemy.orm import Session

from brewtuner.models.catalog import Bean, BrewMethod, Grinder, Roaster
from brewtuner.services.store import read_all, require_row, write_one


def _require_name(name: str) -> str:
    cleaned = name.strip()
    if not cleaned:
        raise ValueError("Name must not be empty.")
    return cleaned


def list_roasters(db: Session) -> Sequence[Roaster]:
    return read_all(db, "list_roasters", select(Roaster).order_by(Roaster.name.asc()))


def list_beans(db: Session, roaster_id: UUID) -> Sequence[Bean]:
    statement = select(Bean).where(Bean.roaster_id == roaster_id).order_by(Bean.name.asc())
    return read_all(db, "list_beans", statement)


def list_grinders(db: Session) -> Sequence[Grinder]:
    return read_all(db, "list_grinders", select(Grinder).order_by(Grinder.name.asc()))


def list_brew_methods(db: Session) -> Sequence[BrewMethod]:
    return read_all(db, "list_brew_methods", select(BrewMethod).order_by(BrewMethod.name.asc()))


def create_roaster(db: Session, name: str) -> Roaster:
    statement = insert(Roaster).values(name=_require_name(name)).returning(Roaster)
    return require_row("create_roaster", write_one(db, "create_roaster", statement))


def create_bean(db: Session, roaster_id: UUID, name: str) -> Bean:
    # The store's foreign key rejects an unknown roaster_id.
    statement = insert(Bean).values(roaster_id=roaster_id, name=_require_name(name)).returning(Bean)
    return require_row("create_bean", write_one(db, "create_bean", statement))


def create_grinder(db: Session, name: str) -> Grinder:
    statement = insert(Grinder).values(name=_require_name(name)).returning(Grinder)
    return require_row("create_grinder", write_one(db, "create_grinder", statement))


def create_brew_method(db: Session, name: str) -> BrewMethod:
    statement = insert(BrewMethod).values(name=_require_name(name)).returning(BrewMethod)
    return require_row("create_brew_method", write_one(db, "create_brew_method", statement))
