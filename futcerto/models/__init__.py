"""SQLAlchemy models for the FutCerto service."""
from futcerto.models.identity import Identity
from futcerto.models.profile import USER_TYPES, Profile
from futcerto.models.session import UserSession
from futcerto.models.court import Court
from futcerto.models.reservation import RESERVATION_STATUSES, Reservation

__all__ = [
    "Identity",
    "Profile",
    "UserSession",
    "Court",
    "Reservation",
    "USER_TYPES",
    "RESERVATION_STATUSES",
]
