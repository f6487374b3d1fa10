from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CatalogEntryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=140)


class CatalogEntryRead(BaseModel):
    id: UUID
    name: str

    model_config = ConfigDict(from_attributes=True)


class RoasterCreate(CatalogEntryCreate):
    pass


class RoasterRead(CatalogEntryRead):
    pass


class BeanCreate(CatalogEntryCreate):
    pass


class BeanRead(CatalogEntryRead):
    roaster_id: UUID


class GrinderCreate(CatalogEntryCreate):
    pass


class GrinderRead(CatalogEntryRead):
    pass


class BrewMethodCreate(CatalogEntryCreate):
    pass


class BrewMethodRead(CatalogEntryRead):
    pass
