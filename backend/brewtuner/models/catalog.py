from __future__ import annotations

import uuid

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from brewtuner.core.database import Base


class Roaster(Base):
    __tablename__ = "roasters"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(140), nullable=False)

    beans: Mapped[list[Bean]] = relationship(back_populates="roaster")


class Bean(Base):
    __tablename__ = "beans"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(140), nullable=False)
    roaster_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("roasters.id"), nullable=False, index=True)

    roaster: Mapped[Roaster] = relationship(back_populates="beans")


class Grinder(Base):
    __tablename__ = "grinders"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(140), nullable=False)


class BrewMethod(Base):
    __tablename__ = "brew_methods"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(140), nullable=False)
