from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from futcerto.dependencies import get_current_profile, get_db
from futcerto.models.profile import Profile
from futcerto.schemas.court import CourtResponse, CourtUpdate, ManagedCourtSummary
from futcerto.services.manager_service import ManagerService

router = APIRouter(prefix="/manager", tags=["manager"])


@router.get("/courts", response_model=List[ManagedCourtSummary])
def list_managed_courts(
    db: Session = Depends(get_db),
    profile: Optional[Profile] = Depends(get_current_profile),
):
    return ManagerService(db).list_managed_courts(profile)


@router.get("/courts/{court_id}", response_model=CourtResponse)
def get_managed_court(
    court_id: int,
    db: Session = Depends(get_db),
    profile: Optional[Profile] = Depends(get_current_profile),
):
    return ManagerService(db).get_managed_court(court_id, profile)


@router.put("/courts/{court_id}", response_model=CourtResponse)
def update_managed_court(
    court_id: int,
    patch: CourtUpdate,
    db: Session = Depends(get_db),
    profile: Optional[Profile] = Depends(get_current_profile),
):
    return ManagerService(db).update_court(court_id, patch, profile)
