from __future__ import annotations

import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from futcerto.core.database import Base

if TYPE_CHECKING:  # pragma: no cover
    from futcerto.models.court import Court

RESERVATION_STATUSES = ("pending", "confirmed", "cancelled")


class Reservation(Base):
    __tablename__ = "reservations"
    __table_args__ = (
        UniqueConstraint(
            "court_id", "booking_date", "start_time", name="uq_reservations_court_slot"
        ),
        CheckConstraint(
            "status IN (" + ", ".join(f"'{value}'" for value in RESERVATION_STATUSES) + ")",
            name="ck_reservations_status",
        ),
    )

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    court_id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        ForeignKey("courts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    player_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    booking_date: Mapped[date] = mapped_column(Date, nullable=False)
    start_time: Mapped[str] = mapped_column(String(5), nullable=False)
    end_time: Mapped[str] = mapped_column(String(5), nullable=False)
    status: Mapped[str] = mapped_column(String(30), nullable=False, default="pending")
    total_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    court: Mapped[Optional["Court"]] = relationship("Court", lazy="joined")

    def __repr__(self) -> str:
        return (
            f"<Reservation(id={self.id}, court_id={self.court_id}, "
            f"booking_date={self.booking_date}, start_time={self.start_time}, "
            f"status={self.status})>"
        )
