from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field as PydanticField


class ReservationCreate(BaseModel):
    """Candidate reservation sent by the client.

    Date and start time are optional here so that an incomplete selection
    reaches the booking flow and is reported with its own message.
    """

    court_id: int = PydanticField(..., gt=0)
    booking_date: Optional[date] = None
    start_time: Optional[str] = PydanticField(None, max_length=5)
    # the client's own calendar day, used for the "not in the past" check
    client_date: Optional[date] = None


class ReservationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    court_id: int
    player_id: str
    booking_date: date
    start_time: str
    end_time: str
    status: str
    total_price: Optional[float] = None


class BookingConfirmationResponse(BaseModel):
    reservation: ReservationResponse
    link: str
    copied: bool
    title: str
    description: str


class PlayerReservationResponse(BaseModel):
    id: str
    court_id: int
    court_name: str
    booking_date: date
    start_time: str
    end_time: str
    status: str
    status_label: str
