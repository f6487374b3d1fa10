from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from brewtuner.core.errors import BrewTunerStoreError, RemoteWriteError, UpdateNotFound
from brewtuner.models.grind_log import GrindLog
from brewtuner.schemas.grind_log import Adjustment, GrindLogUpdate
from brewtuner.services import grind_log_ledger
from brewtuner.services.profile_registry import upsert_profile


@pytest.fixture
def profile(db: Session, equipment):
    return upsert_profile(
        db,
        equipment.bean.id,
        equipment.grinder.id,
        equipment.brew_method.id,
        setting=14,
        grams=18,
        tamped=True,
    )


def test_log_grind_returns_id_and_timestamp(db: Session, profile) -> None:
    log = grind_log_ledger.log_grind(db, profile.id, 14, "too fast", Adjustment.FINER, grams=18)

    assert log.id is not None
    assert log.created_at is not None

    logs = grind_log_ledger.get_grind_logs(db, profile.id)
    assert logs[0].id == log.id
    assert logs[0].outcome == "too fast"
    assert logs[0].adjustment == "finer"
    assert logs[0].tamped is False


def test_log_grind_never_deduplicates(db: Session, profile) -> None:
    grind_log_ledger.log_grind(db, profile.id, 14, "same", "good", grams=18)
    grind_log_ledger.log_grind(db, profile.id, 14, "same", "good", grams=18)

    assert len(grind_log_ledger.get_grind_logs(db, profile.id)) == 2


def test_get_grind_logs_orders_newest_first(db: Session, profile) -> None:
    started = datetime(2026, 10, 1, 8, 0, tzinfo=timezone.utc)
    logs = [
        GrindLog(
            profile_id=profile.id,
            setting=10 + offset,
            outcome=f"attempt {offset}",
            adjustment="finer",
            grams=18,
            tamped=False,
            created_at=started + timedelta(minutes=offset),
        )
        for offset in (1, 3, 2)
    ]
    db.add_all(logs)
    db.commit()

    ordered = grind_log_ledger.get_grind_logs(db, profile.id)

    assert [log.outcome for log in ordered] == ["attempt 3", "attempt 2", "attempt 1"]


def test_get_grind_logs_for_profile_without_history_is_empty(db: Session, profile) -> None:
    assert grind_log_ledger.get_grind_logs(db, profile.id) == []


def test_log_grind_for_unknown_profile_is_rejected(db: Session, profile) -> None:
    with pytest.raises(RemoteWriteError):
        grind_log_ledger.log_grind(db, uuid4(), 14, "nope", "good", grams=18)


def test_partial_update_preserves_untouched_fields(db: Session, profile) -> None:
    log = grind_log_ledger.log_grind(db, profile.id, 14, "sour", Adjustment.FINER, True, grams=18)
    created_at = log.created_at

    updated = grind_log_ledger.update_grinder_log(db, log.id, GrindLogUpdate(outcome="better"))

    assert updated.outcome == "better"
    assert updated.setting == 14
    assert updated.grams == 18
    assert updated.adjustment == "finer"
    assert updated.tamped is True
    assert updated.created_at == created_at


def test_update_ignores_id_in_payload(db: Session, profile) -> None:
    target = grind_log_ledger.log_grind(db, profile.id, 14, "target", "good", grams=18)
    bystander = grind_log_ledger.log_grind(db, profile.id, 15, "bystander", "good", grams=18)

    updates = GrindLogUpdate.model_validate({"id": str(bystander.id), "setting": 13.5})
    updated = grind_log_ledger.update_grinder_log(db, target.id, updates)

    assert updated.id == target.id
    assert updated.setting == 13.5
    db.expire_all()
    assert db.get(GrindLog, bystander.id).setting == 15


def test_update_without_changes_returns_current_row(db: Session, profile) -> None:
    log = grind_log_ledger.log_grind(db, profile.id, 14, "fine", "good", grams=18)

    unchanged = grind_log_ledger.update_grinder_log(db, log.id, GrindLogUpdate())

    assert unchanged.id == log.id
    assert unchanged.outcome == "fine"


def test_update_missing_log_raises_update_not_found(db: Session, profile) -> None:
    with pytest.raises(UpdateNotFound):
        grind_log_ledger.update_grinder_log(db, uuid4(), GrindLogUpdate(outcome="ghost"))

    with pytest.raises(UpdateNotFound):
        grind_log_ledger.update_grinder_log(db, uuid4(), GrindLogUpdate())


def test_update_rejects_explicit_null() -> None:
    with pytest.raises(ValidationError):
        GrindLogUpdate.model_validate({"outcome": None})


def test_delete_returns_id_and_removes_row(db: Session, profile) -> None:
    keep = grind_log_ledger.log_grind(db, profile.id, 14, "keep", "good", grams=18)
    drop = grind_log_ledger.log_grind(db, profile.id, 15, "drop", "coarser", grams=18)
    drop_id = drop.id

    assert grind_log_ledger.delete_grind_log(db, drop_id) == drop_id
    assert [log.id for log in grind_log_ledger.get_grind_logs(db, profile.id)] == [keep.id]

    with pytest.raises(UpdateNotFound):
        grind_log_ledger.delete_grind_log(db, drop_id)


def test_grinder_logs_are_keyed_to_grinder(db: Session, equipment) -> None:
    first = grind_log_ledger.log_grinder_log(db, equipment.grinder.id, 20, "burrs seasoned", "good", grams=20)

    logs = grind_log_ledger.get_grinder_logs(db, equipment.grinder.id)

    assert [log.id for log in logs] == [first.id]
    assert logs[0].grinder_id == equipment.grinder.id
    assert grind_log_ledger.get_grinder_logs(db, uuid4()) == []


def test_update_without_changes_translates_store_failure(db: Session, profile, monkeypatch) -> None:
    log = grind_log_ledger.log_grind(db, profile.id, 14, "fine", "good", grams=18)
    log_id = log.id

    def _unreachable(*args, **kwargs):
        raise OperationalError("SELECT grind_logs", {}, Exception("connection refused"))

    monkeypatch.setattr(db, "execute", _unreachable)
    monkeypatch.setattr(db, "get", _unreachable)

    with pytest.raises(RemoteWriteError) as exc_info:
        grind_log_ledger.update_grinder_log(db, log_id, GrindLogUpdate())

    assert isinstance(exc_info.value, BrewTunerStoreError)
    assert exc_info.value.operation == "update_grinder_log"
    assert isinstance(exc_info.value.cause, OperationalError)
