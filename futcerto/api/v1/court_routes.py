from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from futcerto.dependencies import get_db
from futcerto.schemas.court import CourtResponse, CourtSlotsResponse
from futcerto.services.court_service import CourtFilters, CourtService

router = APIRouter(prefix="/courts", tags=["courts"])


@router.get("/", response_model=List[CourtResponse])
def list_courts(
    *,
    db: Session = Depends(get_db),
    search: str = Query("", description="Case-insensitive match on name or location"),
    price: str = Query("", description="Price bracket such as 0-50, 50-100 or 100+"),
    capacity: str = Query("", description="Exact max_players value"),
):
    service = CourtService(db)
    return service.list_courts(
        CourtFilters(search_term=search, price_filter=price, capacity_filter=capacity)
    )


@router.get("/{court_id}", response_model=CourtResponse)
def get_court(court_id: int, db: Session = Depends(get_db)):
    service = CourtService(db)
    return service.get_court(court_id)


@router.get("/{court_id}/slots", response_model=CourtSlotsResponse)
def list_free_slots(
    court_id: int,
    booking_date: date = Query(..., alias="date"),
    db: Session = Depends(get_db),
):
    """Start times still free on ``date`` for this court."""

    service = CourtService(db)
    return {
        "court_id": court_id,
        "booking_date": booking_date,
        "slots": service.list_free_slots(court_id, booking_date),
    }
