import uuid

from sqlalchemy import Boolean, Float, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from brewtuner.core.database import Base

PROFILE_KEY_CONSTRAINT = "profiles_bean_id_grinder_id_brew_method_id_key"
PROFILE_KEY_COLUMNS = ("bean_id", "grinder_id", "brew_method_id")


class Profile(Base):
    __tablename__ = "profiles"
    __table_args__ = (UniqueConstraint(*PROFILE_KEY_COLUMNS, name=PROFILE_KEY_CONSTRAINT),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    bean_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("beans.id"), nullable=False)
    grinder_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("grinders.id"), nullable=False)
    brew_method_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("brew_methods.id"), nullable=False)

    profile_setting: Mapped[float] = mapped_column(Float, nullable=False)
    grams: Mapped[float] = mapped_column(Float, nullable=False)
    tamped: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Adjustment feedback lives on the logs; profiles only expose it on the read type.
    adjustment = None
