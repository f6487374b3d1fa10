"""History of grind attempts.

Entries are appended per profile (``grind_logs``) or per grinder
(``grinder_logs``). Grind logs can also be corrected in place or removed,
so the ledger is mutable; ``created_at`` is the one column no operation
rewrites.
"""

from __future__ import annotations

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import delete, insert, select, update
from sqlalchemy.orm import Session

from brewtuner.core.errors import RemoteWriteError, UpdateNotFound
from brewtuner.models.grind_log import GrinderLog, GrindLog
from brewtuner.schemas.grind_log import Adjustment, GrindLogUpdate
from brewtuner.services.store import read_all, read_one, require_row, write_one


def log_grind(
    db: Session,
    profile_id: UUID,
    setting: float,
    outcome: str,
    adjustment: Adjustment,
    tamped: bool = False,
    *,
    grams: float,
) -> GrindLog:
    statement = (
        insert(GrindLog)
        .values(
            profile_id=profile_id,
            setting=setting,
            outcome=outcome,
            adjustment=Adjustment(adjustment).value,
            tamped=tamped,
            grams=grams,
        )
        .returning(GrindLog)
    )
    return require_row("log_grind", write_one(db, "log_grind", statement))


def log_grinder_log(
    db: Session,
    grinder_id: UUID,
    setting: float,
    outcome: str,
    adjustment: Adjustment,
    tamped: bool = False,
    *,
    grams: float,
) -> GrinderLog:
    statement = (
        insert(GrinderLog)
        .values(
            grinder_id=grinder_id,
            setting=setting,
            outcome=outcome,
            adjustment=Adjustment(adjustment).value,
            tamped=tamped,
            grams=grams,
        )
        .returning(GrinderLog)
    )
    return require_row("log_grinder_log", write_one(db, "log_grinder_log", statement))


def get_grind_logs(db: Session, profile_id: UUID) -> Sequence[GrindLog]:
    """Return a profile's grind logs, most recent first."""
    statement = select(GrindLog).where(GrindLog.profile_id == profile_id).order_by(GrindLog.created_at.desc())
    return read_all(db, "get_grind_logs", statement)


def get_grinder_logs(db: Session, grinder_id: UUID) -> Sequence[GrinderLog]:
    statement = select(GrinderLog).where(GrinderLog.grinder_id == grinder_id).order_by(GrinderLog.created_at.desc())
    return read_all(db, "get_grinder_logs", statement)


def update_grinder_log(db: Session, log_id: UUID, updates: GrindLogUpdate) -> GrindLog:
    """Apply a sparse update to one grind log.

    Only the fields set on ``updates`` are written. The row is always
    addressed by ``log_id``. With nothing to change the current row is
    returned as-is.
    """
    changes = updates.changes()
    changes.pop("id", None)

    if not changes:
        current = select(GrindLog).where(GrindLog.id == log_id)
        log = read_one(db, "update_grinder_log", current, error=RemoteWriteError)
        if log is None:
            raise UpdateNotFound("update_grinder_log", f"grind log {log_id} not found")
        return log

    statement = update(GrindLog).where(GrindLog.id == log_id).values(**changes).returning(GrindLog)
    log = write_one(db, "update_grinder_log", statement)
    if log is None:
        raise UpdateNotFound("update_grinder_log", f"grind log {log_id} not found")
    return log


def delete_grind_log(db: Session, log_id: UUID) -> UUID:
    """Delete one grind log and return its id.

    Deleting an id that does not exist raises ``UpdateNotFound``.
    """
    statement = delete(GrindLog).where(GrindLog.id == log_id).returning(GrindLog.id)
    deleted_id = write_one(db, "delete_grind_log", statement)
    if deleted_id is None:
        raise UpdateNotFound("delete_grind_log", f"grind log {log_id} not found")
    return deleted_id
