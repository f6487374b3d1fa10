import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from brewtuner.core.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GrindLog(Base):
    __tablename__ = "grind_logs"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    profile_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)

    setting: Mapped[float] = mapped_column(Float, nullable=False)
    outcome: Mapped[str] = mapped_column(Text, nullable=False)
    adjustment: Mapped[str] = mapped_column(String(10), nullable=False)
    grams: Mapped[float] = mapped_column(Float, nullable=False)
    tamped: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)


class GrinderLog(Base):
    __tablename__ = "grinder_logs"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    grinder_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("grinders.id", ondelete="CASCADE"), nullable=False, index=True)

    setting: Mapped[float] = mapped_column(Float, nullable=False)
    outcome: Mapped[str] = mapped_column(Text, nullable=False)
    adjustment: Mapped[str] = mapped_column(String(10), nullable=False)
    grams: Mapped[float] = mapped_column(Float, nullable=False)
    tamped: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
