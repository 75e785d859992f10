from pydantic import BaseModel

from futcerto.schemas.auth import ProfileResponse
from futcerto.schemas.reservation import PlayerReservationResponse


class ProfileOverviewResponse(BaseModel):
    profile: ProfileResponse
    user_type_label: str
    reservations: list[PlayerReservationResponse]
