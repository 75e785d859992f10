"""Reservation persistence and the booking store adapter.

Store errors are decoded here, once, into ``Inserted`` / ``Conflict`` /
``StoreFailure``. Nothing above this module looks at driver errors.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Union

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from futcerto.core.database import is_unique_violation
from futcerto.models.reservation import Reservation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Inserted:
    reservation: Reservation


@dataclass(frozen=True)
class Conflict:
    pass


@dataclass(frozen=True)
class StoreFailure:
    message: str


InsertResult = Union[Inserted, Conflict, StoreFailure]


def _store_message(exc: SQLAlchemyError) -> str:
    original = getattr(exc, "orig", None)
    return str(original) if original is not None else str(exc)


def insert_reservation(db: Session, values: Dict[str, Any]) -> InsertResult:
    reservation = Reservation(**values)
    try:
        db.add(reservation)
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if is_unique_violation(exc):
            return Conflict()
        return StoreFailure(_store_message(exc))
    except SQLAlchemyError as exc:
        db.rollback()
        logger.warning("Reservation insert failed: %s", exc)
        return StoreFailure(_store_message(exc))

    db.refresh(reservation)
    return Inserted(reservation)


def list_reservations_by_player(db: Session, player_id: str) -> List[Reservation]:
    return (
        db.query(Reservation)
        .options(joinedload(Reservation.court))
        .filter(Reservation.player_id == player_id)
        .order_by(Reservation.booking_date.desc(), Reservation.start_time.desc())
        .all()
    )


def list_taken_start_times(db: Session, court_id: int, booking_date: date) -> List[str]:
    rows = (
        db.query(Reservation.start_time)
        .filter(
            Reservation.court_id == court_id,
            Reservation.booking_date == booking_date,
        )
        .all()
    )
    return [row[0] for row in rows]


class ReservationStore:
    """Booking store bound to one database session."""

    def __init__(self, db: Session):
        self.db = db

    def insert(self, values: Dict[str, Any]) -> InsertResult:
        row = dict(values)
        if isinstance(row.get("booking_date"), str):
            row["booking_date"] = date.fromisoformat(row["booking_date"])
        return insert_reservation(self.db, row)


__all__ = [
    "Inserted",
    "Conflict",
    "StoreFailure",
    "InsertResult",
    "ReservationStore",
    "insert_reservation",
    "list_reservations_by_player",
    "list_taken_start_times",
]
