from datetime import date, datetime, timedelta, timezone

import pytest

from futcerto.core.errors import InvalidSelection
from futcerto.services.slots import (
    SLOT_START_TIMES,
    available_slots,
    end_time_for,
    format_booking_date,
    local_date,
    normalize_start_time,
    reference_day,
    slot_label,
)


def test_slot_enumeration():
    assert SLOT_START_TIMES[0] == "08:00"
    assert SLOT_START_TIMES[-1] == "19:00"
    assert len(SLOT_START_TIMES) == 12
    assert all(len(value) == 5 for value in SLOT_START_TIMES)


@pytest.mark.parametrize(
    "start, end",
    [("08:00", "09:00"), ("09:00", "10:00"), ("9:00", "10:00"), ("19:00", "20:00")],
)
def test_end_time_is_zero_padded(start, end):
    assert end_time_for(start) == end


def test_normalize_pads_single_digit_hour():
    assert normalize_start_time("8:00") == "08:00"


@pytest.mark.parametrize("value", ["07:00", "20:00", "12:30", "12", "", "meio-dia", "²:00", "１０:00"])
def test_normalize_rejects_values_outside_enumeration(value):
    with pytest.raises(InvalidSelection):
        normalize_start_time(value)


def test_slot_label():
    assert slot_label("9:00") == "09:00 - 10:00"


def test_local_date_keeps_naive_calendar_day():
    assert local_date(datetime(2026, 3, 1, 23, 59)) == date(2026, 3, 1)
    assert local_date(date(2026, 3, 1)) == date(2026, 3, 1)


def test_local_date_converts_aware_datetime_to_local_zone():
    moment = datetime(2026, 3, 1, 12, 0, tzinfo=timezone(timedelta(hours=5)))
    assert local_date(moment) == moment.astimezone().date()


def test_format_booking_date():
    assert format_booking_date(date(2026, 1, 5)) == "2026-01-05"
    assert format_booking_date(datetime(2026, 12, 31, 22, 0)) == "2026-12-31"


def test_available_slots_skips_taken_in_either_format():
    free = available_slots(["08:00", "9:00", "bogus"])
    assert "08:00" not in free
    assert "09:00" not in free
    assert free[0] == "10:00"
    assert len(free) == 10


def test_reference_day_trusts_neighbouring_client_day():
    server = date(2026, 10, 19)
    assert reference_day(date(2026, 10, 18), server) == date(2026, 10, 18)
    assert reference_day(date(2026, 10, 20), server) == date(2026, 10, 20)
    assert reference_day(None, server) == server


def test_reference_day_ignores_client_day_far_from_server():
    server = date(2026, 10, 19)
    assert reference_day(date(2026, 1, 1), server) == server
