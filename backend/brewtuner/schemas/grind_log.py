from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Adjustment(str, Enum):
    COARSER = "coarser"
    FINER = "finer"
    GOOD = "good"


class GrindAttempt(BaseModel):
    setting: float
    outcome: str = Field(max_length=2000)
    adjustment: Adjustment
    grams: float = Field(gt=0)
    tamped: bool = False


class GrindLogCreate(GrindAttempt):
    pass


class GrinderLogCreate(GrindAttempt):
    pass


class GrindLogCreated(BaseModel):
    id: UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class GrindLogRead(GrindAttempt):
    id: UUID
    profile_id: UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class GrinderLogRead(GrindAttempt):
    id: UUID
    grinder_id: UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class GrindLogUpdate(BaseModel):
    """Sparse update for a grind log.

    Only fields the caller sets are written; ``model_fields_set`` tells an
    omitted field apart from one sent with a value. Ledger columns are not
    nullable, so an explicit ``null`` is rejected instead of clearing the
    column. Unknown keys, ``id`` included, are ignored.
    """

    setting: float | None = None
    outcome: str | None = Field(default=None, max_length=2000)
    adjustment: Adjustment | None = None
    tamped: bool | None = None
    grams: float | None = Field(default=None, gt=0)

    model_config = ConfigDict(extra="ignore")

    @field_validator("*")
    @classmethod
    def _reject_explicit_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("field cannot be cleared; omit it to keep the current value")
        return value

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True, mode="json")
