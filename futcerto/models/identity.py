from __future__ import annotations

import uuid
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from futcerto.core.database import Base

if TYPE_CHECKING:  # pragma: no cover
    from futcerto.models.profile import Profile


def _new_uuid() -> str:
    return str(uuid.uuid4())


class Identity(Base):
    """Credentials issued by the session provider."""

    __tablename__ = "identities"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_uuid)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    profile: Mapped[Optional["Profile"]] = relationship(
        "Profile", back_populates="identity", uselist=False
    )

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<Identity(id={self.id}, email={self.email})>"
