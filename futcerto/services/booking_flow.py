"""Booking flow controller.

Orchestrates one court reservation: gathering the candidate slot, checking
preconditions, submitting to the booking store and turning the outcome into a
confirmation or a domain error. The controller owns no transport; the store,
clipboard, event bus, clock and link origin are injected.

Slot arbitration between users is left to the store's uniqueness constraint.
The controller never reads before writing and treats a conflict from the
store as final.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable, Dict, Optional, Protocol, Union

from futcerto.core.errors import (
    AuthRequired,
    BookingInProgress,
    IncompleteSelection,
    InvalidSelection,
    SlotConflict,
    SubmissionFailed,
)
from futcerto.core.events import RESERVATIONS_CHANGED, EventBus
from futcerto.repository.reservation_repository import (
    Conflict,
    InsertResult,
    Inserted,
    StoreFailure,
)
from futcerto.services.slots import (
    end_time_for,
    format_booking_date,
    local_date,
    normalize_start_time,
)

logger = logging.getLogger(__name__)

SUCCESS_TITLE = "Reserva confirmada!"
LINK_COPIED_DESCRIPTION = "Link de convite copiado para a área de transferência"


class BookingStore(Protocol):
    def insert(self, values: Dict[str, Any]) -> InsertResult: ...


class Actor(Protocol):
    id: str


@dataclass(frozen=True)
class CourtRef:
    id: int
    name: str
    price: Optional[Decimal] = None


@dataclass(frozen=True)
class BookingConfirmation:
    reservation: Any
    link: str
    copied: bool
    title: str
    description: str


def reservation_link(origin: str, reservation_id: Any) -> str:
    return f"{origin.rstrip('/')}/reserva/{reservation_id}"


class BookingFlowController:
    def __init__(
        self,
        store: BookingStore,
        *,
        origin: str,
        actor: Optional[Actor] = None,
        initial_status: str = "pending",
        events: Optional[EventBus] = None,
        clipboard: Optional[Callable[[str], None]] = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._store = store
        self._origin = origin
        self._initial_status = initial_status
        self._events = events
        self._clipboard = clipboard
        self._today = today

        self.actor = actor
        self.court: Optional[CourtRef] = None
        self.date: Optional[Union[date, datetime]] = None
        self.start_time: Optional[str] = None
        self.busy = False
        self.is_open = False

    def open(self, court: CourtRef) -> None:
        self.court = court
        self._reset_candidate()
        self.is_open = True

    def cancel(self) -> None:
        self._reset_candidate()
        self.is_open = False

    def select_date(self, value: Optional[Union[date, datetime]]) -> None:
        self.date = value

    def select_start_time(self, value: Optional[str]) -> None:
        self.start_time = value

    def submit(self) -> BookingConfirmation:
        if self.busy:
            raise BookingInProgress()
        if self.actor is None:
            raise AuthRequired()
        if not self.date or not self.start_time:
            raise IncompleteSelection()
        if self.court is None:
            raise InvalidSelection("Nenhuma quadra selecionada.")

        booking_day = local_date(self.date)
        if booking_day < self._today():
            raise InvalidSelection("Escolha a data de hoje ou uma data futura.")
        start_time = normalize_start_time(self.start_time)

        values: Dict[str, Any] = {
            "court_id": self.court.id,
            "player_id": self.actor.id,
            "booking_date": format_booking_date(booking_day),
            "start_time": start_time,
            "end_time": end_time_for(start_time),
            "status": self._initial_status,
        }
        if self.court.price is not None:
            values["total_price"] = self.court.price

        self.busy = True
        try:
            logger.info(
                "Submitting reservation for court %s on %s at %s",
                self.court.id,
                values["booking_date"],
                start_time,
            )
            result = self._store.insert(values)
            return self._settle(result)
        finally:
            self.busy = False

    def _settle(self, result: InsertResult) -> BookingConfirmation:
        if isinstance(result, Conflict):
            logger.info("Slot already taken for court %s", self.court.id if self.court else None)
            raise SlotConflict()
        if isinstance(result, StoreFailure):
            logger.warning("Reservation store rejected submission: %s", result.message)
            raise SubmissionFailed(result.message)
        if not isinstance(result, Inserted):
            raise SubmissionFailed("Ocorreu um erro ao criar a reserva")

        reservation = result.reservation
        link = reservation_link(self._origin, reservation.id)
        copied = self._copy_to_clipboard(link)
        description = (
            LINK_COPIED_DESCRIPTION if copied else f"Compartilhe o link do convite: {link}"
        )

        logger.info("Reservation %s created", reservation.id)
        if self._events is not None:
            self._events.emit(RESERVATIONS_CHANGED, reservation)

        self.cancel()
        return BookingConfirmation(
            reservation=reservation,
            link=link,
            copied=copied,
            title=SUCCESS_TITLE,
            description=description,
        )

    def _copy_to_clipboard(self, link: str) -> bool:
        if self._clipboard is None:
            return False
        try:
            self._clipboard(link)
        except Exception as exc:
            logger.warning("Could not copy reservation link to clipboard: %s", exc)
            return False
        return True

    def _reset_candidate(self) -> None:
        self.date = None
        self.start_time = None


__all__ = [
    "BookingFlowController",
    "BookingConfirmation",
    "BookingStore",
    "CourtRef",
    "reservation_link",
]
