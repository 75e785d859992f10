"""Shared dependencies for the FutCerto API.

Everything is resolved from ``request.app.state``; the application factory
puts the settings, the session factory and the event bus there.
"""

from typing import Iterator, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from futcerto.core.config import Settings
from futcerto.core.events import EventBus
from futcerto.models.profile import Profile
from futcerto.services.auth_service import AuthService, CurrentSession

bearer_scheme = HTTPBearer(auto_error=False)


def get_db(request: Request) -> Iterator[Session]:
    """Provide a session scoped to one request."""

    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_events(request: Request) -> EventBus:
    return request.app.state.events


def get_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    if credentials is None or (credentials.scheme or "").lower() != "bearer":
        return None
    return credentials.credentials


def get_auth_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    events: EventBus = Depends(get_events),
) -> AuthService:
    return AuthService(db, settings, events)


def get_current_session(
    token: Optional[str] = Depends(get_token),
    auth_service: AuthService = Depends(get_auth_service),
) -> Optional[CurrentSession]:
    return auth_service.get_current_session(token)


def get_current_profile(
    current: Optional[CurrentSession] = Depends(get_current_session),
) -> Optional[Profile]:
    return current.profile if current is not None else None


__all__ = [
    "bearer_scheme",
    "get_db",
    "get_app_settings",
    "get_events",
    "get_token",
    "get_auth_service",
    "get_current_session",
    "get_current_profile",
]
