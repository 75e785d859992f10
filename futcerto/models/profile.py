from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from futcerto.core.database import Base

if TYPE_CHECKING:  # pragma: no cover
    from futcerto.models.identity import Identity

USER_TYPES = ("player", "manager")


class Profile(Base):
    __tablename__ = "profiles"
    __table_args__ = (
        CheckConstraint(
            "user_type IN (" + ", ".join(f"'{value}'" for value in USER_TYPES) + ")",
            name="ck_profiles_user_type",
        ),
    )

    id: Mapped[str] = mapped_column(
        String(36), ForeignKey("identities.id", ondelete="CASCADE"), primary_key=True
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    user_type: Mapped[str] = mapped_column(String(20), nullable=False, default="player")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    identity: Mapped["Identity"] = relationship("Identity", back_populates="profile")

    @property
    def is_manager(self) -> bool:
        return self.user_type == "manager"
