from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from brewtuner.schemas.grind_log import Adjustment


class ProfileUpsert(BaseModel):
    bean_id: UUID
    grinder_id: UUID
    brew_method_id: UUID
    setting: float
    grams: float = Field(gt=0)
    tamped: bool = False


class ProfileRead(BaseModel):
    id: UUID
    bean_id: UUID
    grinder_id: UUID
    brew_method_id: UUID
    profile_setting: float
    grams: float
    tamped: bool
    adjustment: Adjustment | None = None

    model_config = ConfigDict(from_attributes=True)
