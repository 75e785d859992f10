from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from futcerto.core.config import Settings
from futcerto.core.errors import AuthRequired
from futcerto.core.events import EventBus
from futcerto.dependencies import get_app_settings, get_current_profile, get_db, get_events
from futcerto.models.profile import Profile
from futcerto.repository.reservation_repository import ReservationStore
from futcerto.schemas.reservation import (
    BookingConfirmationResponse,
    PlayerReservationResponse,
    ReservationCreate,
)
from futcerto.services.booking_flow import BookingFlowController, CourtRef
from futcerto.services.court_service import CourtService
from futcerto.services.profile_service import ProfileService
from futcerto.services.slots import reference_day

router = APIRouter(prefix="/reservations", tags=["reservations"])


@router.post(
    "/",
    response_model=BookingConfirmationResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_reservation(
    payload: ReservationCreate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    events: EventBus = Depends(get_events),
    profile: Optional[Profile] = Depends(get_current_profile),
):
    if profile is None:
        raise AuthRequired()

    court = CourtService(db).get_court(payload.court_id)
    flow = BookingFlowController(
        ReservationStore(db),
        origin=settings.APP_ORIGIN,
        actor=profile,
        initial_status=settings.BOOKING_INITIAL_STATUS,
        events=events,
        today=lambda: reference_day(payload.client_date, date.today()),
    )
    flow.open(CourtRef(id=court.id, name=court.name, price=court.price_per_hour))
    flow.select_date(payload.booking_date)
    flow.select_start_time(payload.start_time)
    confirmation = flow.submit()
    return {
        "reservation": confirmation.reservation,
        "link": confirmation.link,
        "copied": confirmation.copied,
        "title": confirmation.title,
        "description": confirmation.description,
    }


@router.get("/me", response_model=List[PlayerReservationResponse])
def list_my_reservations(
    db: Session = Depends(get_db),
    profile: Optional[Profile] = Depends(get_current_profile),
):
    if profile is None:
        raise AuthRequired()
    return ProfileService(db).list_player_reservations(profile.id)
