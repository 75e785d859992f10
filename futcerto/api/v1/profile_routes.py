from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from futcerto.dependencies import get_current_session, get_db
from futcerto.schemas.profile import ProfileOverviewResponse
from futcerto.services.auth_service import CurrentSession
from futcerto.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("/me", response_model=ProfileOverviewResponse)
def get_my_profile(
    db: Session = Depends(get_db),
    current: Optional[CurrentSession] = Depends(get_current_session),
):
    identity = current.identity if current is not None else None
    return ProfileService(db).get_profile_overview(identity)
