"""Helpers shared by the services that talk to the backing store.

A SQLAlchemy ``Session`` is the transport: each service builds one
parameterized statement, runs it here, and gets typed rows back. Store
failures are translated into ``brewtuner.core.errors`` at this seam.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, TypeVar

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql.expression import Executable

from brewtuner.core.errors import BrewTunerStoreError, NoDataReturned, RemoteReadError, RemoteWriteError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def upsert_insert(db: Session, entity: Any) -> Any:
    """Return the dialect ``INSERT`` construct that supports ``ON CONFLICT``."""
    dialect = db.get_bind().dialect.name
    try:
        return _UPSERT_DIALECTS[dialect](entity)
    except KeyError:
        raise NotImplementedError(f"Backing store dialect {dialect!r} has no ON CONFLICT upsert") from None


def write_one(db: Session, operation: str, statement: Executable) -> Any | None:
    """Run a ``RETURNING`` write and commit it.

    Returns the single returned row or ``None`` when the store matched
    nothing. Callers decide whether ``None`` is a defect or a miss.
    """
    try:
        row = db.execute(statement, execution_options={"populate_existing": True}).scalar_one_or_none()
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.warning("%s rejected by store: %s", operation, exc)
        raise RemoteWriteError(operation, "write rejected by store", cause=exc) from exc

    logger.info("%s committed", operation)
    return row


def require_row(operation: str, row: T | None) -> T:
    if row is None:
        logger.error("%s returned no data", operation)
        raise NoDataReturned(operation, "write succeeded but returned no row")
    return row


def read_all(db: Session, operation: str, statement: Executable) -> Sequence[Any]:
    try:
        result = db.execute(statement)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.warning("%s failed: %s", operation, exc)
        raise RemoteReadError(operation, "read failed", cause=exc) from exc
    return result.scalars().all()


def read_one(
    db: Session,
    operation: str,
    statement: Executable,
    error: type[BrewTunerStoreError] = RemoteReadError,
) -> Any | None:
    """Fetch at most one row; ``error`` is the kind raised on transport failure."""
    try:
        return db.execute(statement).scalars().first()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.warning("%s failed: %s", operation, exc)
        raise error(operation, "read failed", cause=exc) from exc
