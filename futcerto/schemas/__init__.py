"""Pydantic schemas for the FutCerto API."""

from futcerto.schemas.auth import (
    CurrentSessionResponse,
    IdentityResponse,
    ProfileResponse,
    SessionResponse,
    SignInRequest,
    SignUpRequest,
    SignUpResponse,
)
from futcerto.schemas.court import (
    CourtResponse,
    CourtSlotsResponse,
    CourtUpdate,
    ManagedCourtSummary,
    SlotResponse,
)
from futcerto.schemas.profile import ProfileOverviewResponse
from futcerto.schemas.reservation import (
    BookingConfirmationResponse,
    PlayerReservationResponse,
    ReservationCreate,
    ReservationResponse,
)

__all__ = [
    "CurrentSessionResponse",
    "IdentityResponse",
    "ProfileResponse",
    "SessionResponse",
    "SignInRequest",
    "SignUpRequest",
    "SignUpResponse",
    "CourtResponse",
    "CourtSlotsResponse",
    "CourtUpdate",
    "ManagedCourtSummary",
    "SlotResponse",
    "ProfileOverviewResponse",
    "BookingConfirmationResponse",
    "PlayerReservationResponse",
    "ReservationCreate",
    "ReservationResponse",
]
