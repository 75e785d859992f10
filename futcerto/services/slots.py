"""Time-slot arithmetic for one-hour court bookings."""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, List, Optional, Union

from futcerto.core.errors import InvalidSelection

FIRST_SLOT_HOUR = 8
LAST_SLOT_HOUR = 19
SLOT_DURATION_HOURS = 1

SLOT_HOURS = tuple(range(FIRST_SLOT_HOUR, LAST_SLOT_HOUR + 1))
SLOT_START_TIMES = tuple(f"{hour:02d}:00" for hour in SLOT_HOURS)


def is_ascii_number(value: str) -> bool:
    # str.isdigit() also accepts superscripts that int() rejects
    return value.isascii() and value.isdecimal()


def _parse_hour(value: str) -> int:
    hour_text, sep, minute_text = value.strip().partition(":")
    if not sep or minute_text != "00" or not is_ascii_number(hour_text):
        raise InvalidSelection(f"Horário inválido: {value!r}")
    return int(hour_text)


def normalize_start_time(value: str) -> str:
    """Return ``value`` as a zero-padded slot start (``"9:00"`` -> ``"09:00"``)."""

    hour = _parse_hour(value)
    if hour not in SLOT_HOURS:
        raise InvalidSelection(
            f"Horário inválido: {value!r}. Escolha um horário entre "
            f"{SLOT_START_TIMES[0]} e {SLOT_START_TIMES[-1]}."
        )
    return f"{hour:02d}:00"


def end_time_for(start_time: str) -> str:
    hour = _parse_hour(normalize_start_time(start_time))
    return f"{hour + SLOT_DURATION_HOURS:02d}:00"


def slot_label(start_time: str) -> str:
    return f"{normalize_start_time(start_time)} - {end_time_for(start_time)}"


def local_date(value: Union[date, datetime]) -> date:
    """Calendar day of ``value`` in the local zone.

    Aware datetimes are converted to local time first; naive ones are taken
    as already local. The date is never derived from a UTC rendering.
    """

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return date(value.year, value.month, value.day)
    return value


def format_booking_date(value: Union[date, datetime]) -> str:
    day = local_date(value)
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def reference_day(client_day: Optional[date], server_day: date) -> date:
    """The day bookings are checked against.

    A client in another zone may already (or still) be on a neighbouring
    calendar day. Its own day is trusted only within one day of the server's.
    """

    if client_day is not None and abs((client_day - server_day).days) <= 1:
        return client_day
    return server_day


def available_slots(taken: Iterable[str]) -> List[str]:
    taken_normalized = set()
    for start_time in taken:
        try:
            taken_normalized.add(normalize_start_time(start_time))
        except InvalidSelection:
            continue
    return [slot for slot in SLOT_START_TIMES if slot not in taken_normalized]


__all__ = [
    "SLOT_START_TIMES",
    "normalize_start_time",
    "end_time_for",
    "slot_label",
    "local_date",
    "format_booking_date",
    "is_ascii_number",
    "available_slots",
    "reference_day",
]
