"""Domain services for the FutCerto service."""

from futcerto.services.auth_service import AuthService, CurrentSession
from futcerto.services.booking_flow import (
    BookingConfirmation,
    BookingFlowController,
    CourtRef,
)
from futcerto.services.court_service import CourtFilters, CourtService
from futcerto.services.manager_service import ManagerService
from futcerto.services.profile_service import ProfileService

__all__ = [
    "AuthService",
    "CurrentSession",
    "BookingConfirmation",
    "BookingFlowController",
    "CourtRef",
    "CourtFilters",
    "CourtService",
    "ManagerService",
    "ProfileService",
]
