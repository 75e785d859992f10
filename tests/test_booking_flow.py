"""Unit tests for BookingFlowController.

The store is a fake so these tests cover ordering of preconditions, slot
arithmetic, outcome mapping and the busy flag without a database.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest

from futcerto.core.errors import (
    AuthRequired,
    BookingInProgress,
    IncompleteSelection,
    InvalidSelection,
    SlotConflict,
    SubmissionFailed,
)
from futcerto.core.events import RESERVATIONS_CHANGED, EventBus
from futcerto.repository.reservation_repository import Conflict, Inserted, StoreFailure
from futcerto.services.booking_flow import BookingFlowController, CourtRef
from futcerto.services.slots import SLOT_START_TIMES

TODAY = date(2026, 10, 19)


@dataclass
class Actor:
    id: str


@dataclass
class Row:
    id: str


class FakeStore:
    def __init__(self, result=None):
        self.result = result if result is not None else Inserted(Row(id="abc"))
        self.calls = []
        self.busy_during_insert = []
        self.flow = None

    def insert(self, values):
        self.calls.append(values)
        if self.flow is not None:
            self.busy_during_insert.append(self.flow.busy)
        return self.result


def make_flow(store=None, *, actor=Actor(id="player-1"), **kwargs):
    store = store or FakeStore()
    flow = BookingFlowController(
        store,
        origin="https://example.com",
        actor=actor,
        today=lambda: TODAY,
        **kwargs,
    )
    store.flow = flow
    flow.open(CourtRef(id=7, name="Quadra Central", price=Decimal("60")))
    return flow, store


class TestOpen:
    def test_open_resets_candidate(self):
        flow, _ = make_flow()
        flow.select_date(TODAY)
        flow.select_start_time("10:00")

        flow.open(CourtRef(id=8, name="Outra"))

        assert flow.court.id == 8
        assert flow.date is None
        assert flow.start_time is None
        assert flow.is_open

    def test_cancel_discards_candidate_and_closes(self):
        flow, _ = make_flow()
        flow.select_date(TODAY)
        flow.cancel()
        assert flow.date is None
        assert not flow.is_open


class TestPreconditions:
    def test_without_profile_requires_auth(self):
        flow, store = make_flow(actor=None)
        flow.select_date(TODAY)
        flow.select_start_time("10:00")

        with pytest.raises(AuthRequired):
            flow.submit()
        assert store.calls == []

    def test_auth_is_checked_before_selection(self):
        flow, store = make_flow(actor=None)
        with pytest.raises(AuthRequired):
            flow.submit()
        assert store.calls == []

    @pytest.mark.parametrize(
        "selected_date, start_time",
        [(None, "10:00"), (TODAY, None), (None, None), (TODAY, "")],
    )
    def test_incomplete_selection_never_calls_store(self, selected_date, start_time):
        flow, store = make_flow()
        flow.select_date(selected_date)
        flow.select_start_time(start_time)

        with pytest.raises(IncompleteSelection) as exc_info:
            flow.submit()

        assert exc_info.value.message == "Por favor selecione data e horário"
        assert store.calls == []
        assert flow.busy is False

    def test_past_date_is_rejected_at_submit(self):
        flow, store = make_flow()
        flow.select_date(TODAY - timedelta(days=1))
        flow.select_start_time("10:00")

        with pytest.raises(InvalidSelection):
            flow.submit()
        assert store.calls == []

    @pytest.mark.parametrize("start_time", ["07:00", "20:00", "10:30", "dez"])
    def test_start_time_outside_enumeration_is_rejected(self, start_time):
        flow, store = make_flow()
        flow.select_date(TODAY)
        flow.select_start_time(start_time)

        with pytest.raises(InvalidSelection):
            flow.submit()
        assert store.calls == []


class TestSubmission:
    @pytest.mark.parametrize("start_time", SLOT_START_TIMES)
    def test_end_time_is_one_hour_later_zero_padded(self, start_time):
        flow, store = make_flow()
        flow.select_date(TODAY)
        flow.select_start_time(start_time)

        flow.submit()

        hour = int(start_time[:2])
        assert store.calls[0]["start_time"] == start_time
        assert store.calls[0]["end_time"] == f"{hour + 1:02d}:00"

    def test_legacy_unpadded_start_time_is_normalized(self):
        flow, store = make_flow()
        flow.select_date(TODAY)
        flow.select_start_time("9:00")

        flow.submit()

        assert store.calls[0]["start_time"] == "09:00"
        assert store.calls[0]["end_time"] == "10:00"

    def test_insert_values(self):
        flow, store = make_flow()
        flow.select_date(date(2026, 10, 25))
        flow.select_start_time("18:00")

        flow.submit()

        assert store.calls == [
            {
                "court_id": 7,
                "player_id": "player-1",
                "booking_date": "2026-10-25",
                "start_time": "18:00",
                "end_time": "19:00",
                "status": "pending",
                "total_price": Decimal("60"),
            }
        ]

    def test_status_follows_configured_policy(self):
        flow, store = make_flow(initial_status="confirmed")
        flow.select_date(TODAY)
        flow.select_start_time("10:00")
        flow.submit()
        assert store.calls[0]["status"] == "confirmed"

    def test_booking_date_uses_local_calendar_day(self):
        flow, store = make_flow()
        flow.select_date(datetime(2026, 10, 20, 23, 30))
        flow.select_start_time("10:00")
        flow.submit()
        assert store.calls[0]["booking_date"] == "2026-10-20"


class TestOutcomes:
    def test_success_builds_link_and_closes_flow(self):
        copied = []
        flow, _ = make_flow(clipboard=copied.append)
        flow.select_date(TODAY)
        flow.select_start_time("10:00")

        confirmation = flow.submit()

        assert confirmation.link == "https://example.com/reserva/abc"
        assert confirmation.copied is True
        assert copied == ["https://example.com/reserva/abc"]
        assert confirmation.title == "Reserva confirmada!"
        assert "copiado" in confirmation.description
        assert not flow.is_open
        assert flow.date is None and flow.start_time is None

    def test_clipboard_failure_does_not_fail_booking(self):
        def broken_clipboard(link):
            raise OSError("no clipboard")

        flow, _ = make_flow(clipboard=broken_clipboard)
        flow.select_date(TODAY)
        flow.select_start_time("10:00")

        confirmation = flow.submit()

        assert confirmation.copied is False
        assert confirmation.link in confirmation.description

    def test_success_emits_reservations_changed(self):
        events = EventBus()
        seen = []
        events.subscribe(RESERVATIONS_CHANGED, seen.append)
        flow, _ = make_flow(events=events)
        flow.select_date(TODAY)
        flow.select_start_time("10:00")

        confirmation = flow.submit()

        assert seen == [confirmation.reservation]

    def test_conflict_keeps_flow_open_and_candidate(self):
        events = EventBus()
        seen = []
        events.subscribe(RESERVATIONS_CHANGED, seen.append)
        flow, _ = make_flow(FakeStore(Conflict()), events=events)
        flow.select_date(TODAY)
        flow.select_start_time("11:00")

        with pytest.raises(SlotConflict) as exc_info:
            flow.submit()

        assert exc_info.value.message == "Este horário já está reservado. Escolha outro horário."
        assert flow.is_open
        assert flow.date == TODAY
        assert flow.start_time == "11:00"
        assert seen == []

    def test_other_store_error_keeps_message_verbatim(self):
        flow, _ = make_flow(FakeStore(StoreFailure("A different kind of booking error")))
        flow.select_date(TODAY)
        flow.select_start_time("11:00")

        with pytest.raises(SubmissionFailed) as exc_info:
            flow.submit()

        assert exc_info.value.message == "A different kind of booking error"
        assert flow.is_open


class TestBusyFlag:
    @pytest.mark.parametrize(
        "result, expected",
        [
            (Inserted(Row(id="abc")), None),
            (Conflict(), SlotConflict),
            (StoreFailure("boom"), SubmissionFailed),
        ],
    )
    def test_busy_only_while_store_call_in_flight(self, result, expected):
        flow, store = make_flow(FakeStore(result))
        flow.select_date(TODAY)
        flow.select_start_time("10:00")
        assert flow.busy is False

        if expected is None:
            flow.submit()
        else:
            with pytest.raises(expected):
                flow.submit()

        assert store.busy_during_insert == [True]
        assert flow.busy is False

    def test_busy_cleared_when_store_raises(self):
        class ExplodingStore(FakeStore):
            def insert(self, values):
                raise RuntimeError("transport down")

        flow, _ = make_flow(ExplodingStore())
        flow.select_date(TODAY)
        flow.select_start_time("10:00")

        with pytest.raises(RuntimeError):
            flow.submit()
        assert flow.busy is False

    def test_second_submit_while_busy_is_rejected(self):
        class ReentrantStore(FakeStore):
            def insert(self, values):
                self.calls.append(values)
                with pytest.raises(BookingInProgress):
                    self.flow.submit()
                return Inserted(Row(id="abc"))

        flow, store = make_flow(ReentrantStore())
        flow.select_date(TODAY)
        flow.select_start_time("10:00")

        flow.submit()

        assert len(store.calls) == 1
