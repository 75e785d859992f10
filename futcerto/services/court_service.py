from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from futcerto.core.errors import InvalidSelection, NotFound
from futcerto.models.court import Court
from futcerto.repository import court_repository, reservation_repository
from futcerto.services.slots import (
    available_slots,
    end_time_for,
    is_ascii_number,
    slot_label,
)

ANY = ("", "all")

PRICE_BRACKETS = {
    "0-50": "Até R$50",
    "50-100": "R$50 - R$100",
    "100+": "Acima de R$100",
}
CAPACITY_BRACKETS = {
    "10": "5v5 (até 10 jogadores)",
    "14": "7v7 (até 14 jogadores)",
    "22": "11v11 (até 22 jogadores)",
}


@dataclass(frozen=True)
class CourtFilters:
    search_term: str = ""
    price_filter: str = ""
    capacity_filter: str = ""


def parse_price_filter(value: str) -> Tuple[Optional[Decimal], Optional[Decimal]]:
    """Turn ``"0-50"`` or ``"100+"`` into inclusive bounds; ``None`` is unbounded."""

    value = (value or "").strip().lower()
    if value in ANY:
        return None, None
    try:
        if value.endswith("+"):
            lower = Decimal(value[:-1])
            if not lower.is_finite():
                raise InvalidOperation
            return lower, None
        low, sep, high = value.partition("-")
        if not sep:
            raise InvalidOperation
        lower, upper = Decimal(low), Decimal(high)
    except InvalidOperation as exc:
        raise InvalidSelection(f"Faixa de preço inválida: {value!r}") from exc
    if not (lower.is_finite() and upper.is_finite()) or lower > upper:
        raise InvalidSelection(f"Faixa de preço inválida: {value!r}")
    return lower, upper


def parse_capacity_filter(value: str) -> Optional[int]:
    value = (value or "").strip().lower()
    if value in ANY:
        return None
    if not is_ascii_number(value) or int(value) <= 0:
        raise InvalidSelection(f"Capacidade inválida: {value!r}")
    return int(value)


class CourtService:
    def __init__(self, db: Session):
        self.db = db

    def list_courts(self, filters: Optional[CourtFilters] = None) -> List[Court]:
        """Return courts matching every filter, ordered by name.

        Capacity matches ``max_players`` exactly, not as a minimum or maximum.
        """

        filters = filters or CourtFilters()
        min_price, max_price = parse_price_filter(filters.price_filter)
        max_players = parse_capacity_filter(filters.capacity_filter)
        return court_repository.list_courts(
            self.db,
            search_term=(filters.search_term or "").strip() or None,
            min_price=min_price,
            max_price=max_price,
            max_players=max_players,
        )

    def get_court(self, court_id: int) -> Court:
        court = court_repository.get_court(self.db, court_id)
        if court is None:
            raise NotFound("Quadra não encontrada.")
        return court

    def list_free_slots(self, court_id: int, booking_date: date) -> List[dict]:
        self.get_court(court_id)
        taken = reservation_repository.list_taken_start_times(
            self.db, court_id, booking_date
        )
        return [
            {
                "start_time": start_time,
                "end_time": end_time_for(start_time),
                "label": slot_label(start_time),
            }
            for start_time in available_slots(taken)
        ]


__all__ = [
    "CourtService",
    "CourtFilters",
    "PRICE_BRACKETS",
    "CAPACITY_BRACKETS",
    "parse_price_filter",
    "parse_capacity_filter",
]
