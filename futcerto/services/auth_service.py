"""Session and identity provider.

Issues identities and their profiles, opens and closes sessions, and tells
subscribers about every session transition.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Tuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from futcerto.core.config import Settings
from futcerto.core.database import is_unique_violation
from futcerto.core.errors import EmailAlreadyRegistered, InvalidCredentials, SubmissionFailed
from futcerto.core.events import SESSION_CHANGED, EventBus
from futcerto.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from futcerto.models.identity import Identity
from futcerto.models.profile import Profile
from futcerto.models.session import UserSession
from futcerto.repository import (
    identity_repository,
    profile_repository,
    session_repository,
)

logger = logging.getLogger(__name__)

SIGN_UP_MESSAGES = {
    "manager": (
        "Cadastro em análise",
        "Entraremos em contato em breve para confirmar seu cadastro.",
    ),
    "player": (
        "Cadastro realizado com sucesso!",
        "Você já pode fazer login no sistema.",
    ),
}


@dataclass(frozen=True)
class CurrentSession:
    session_id: int
    identity: Identity
    profile: Optional[Profile]
    expires_at: Optional[datetime]


def _as_aware(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


class AuthService:
    def __init__(self, db: Session, settings: Settings, events: EventBus):
        self.db = db
        self.settings = settings
        self.events = events

    def sign_up(
        self,
        email: str,
        password: str,
        *,
        name: str,
        phone: Optional[str],
        user_type: str,
    ) -> Tuple[Identity, Profile]:
        if identity_repository.get_identity_by_email(self.db, email):
            raise EmailAlreadyRegistered()

        identity = Identity(email=email, password_hash=hash_password(password))
        try:
            identity_repository.create_identity(self.db, identity)
            profile = profile_repository.create_profile(
                self.db,
                Profile(
                    id=identity.id,
                    name=name,
                    email=email,
                    phone=phone,
                    user_type=user_type,
                ),
            )
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            # A concurrent sign-up took the email after the lookup above.
            if is_unique_violation(exc):
                raise EmailAlreadyRegistered() from exc
            logger.exception("Sign-up failed for %s", email)
            raise SubmissionFailed("Ocorreu um erro ao criar o cadastro.") from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Sign-up failed for %s", email)
            raise SubmissionFailed("Ocorreu um erro ao criar o cadastro.") from exc

        self.db.refresh(identity)
        self.db.refresh(profile)
        logger.info("Identity %s signed up as %s", identity.id, user_type)
        return identity, profile

    def sign_in(self, email: str, password: str) -> Tuple[str, CurrentSession]:
        identity = identity_repository.get_identity_by_email(self.db, email)
        if not identity or not verify_password(password, identity.password_hash):
            raise InvalidCredentials()

        expires_at = datetime.now(timezone.utc) + timedelta(
            minutes=self.settings.ACCESS_TOKEN_EXPIRE_MINUTES
        )
        user_session = session_repository.create_session(
            self.db,
            UserSession(identity_id=identity.id, is_active=True, expires_at=expires_at),
        )
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise SubmissionFailed("Não foi possível concluir o login.") from exc

        token = create_access_token(
            self.settings,
            {"sub": identity.id, "sid": str(user_session.id), "email": identity.email},
            expires_at=expires_at,
        )
        current = CurrentSession(
            session_id=user_session.id,
            identity=identity,
            profile=profile_repository.get_profile(self.db, identity.id),
            expires_at=expires_at,
        )
        logger.info("Identity %s signed in", identity.id)
        self.events.emit(SESSION_CHANGED, current)
        return token, current

    def sign_out(self, token: Optional[str]) -> None:
        current = self.get_current_session(token)
        if current is None:
            return

        session_repository.deactivate_session(self.db, current.session_id)
        self.db.commit()
        logger.info("Identity %s signed out", current.identity.id)
        self.events.emit(SESSION_CHANGED, None)

    def get_current_session(self, token: Optional[str]) -> Optional[CurrentSession]:
        if not token:
            return None

        payload = decode_access_token(self.settings, token)
        if payload is None:
            return None

        identity_id = payload.get("sub")
        try:
            session_id = int(payload.get("sid"))
        except (TypeError, ValueError):
            return None

        user_session = session_repository.get_session(self.db, session_id)
        if (
            user_session is None
            or not user_session.is_active
            or user_session.identity_id != identity_id
        ):
            return None
        if user_session.expires_at is not None and _as_aware(
            user_session.expires_at
        ) <= datetime.now(timezone.utc):
            return None

        identity = identity_repository.get_identity(self.db, identity_id)
        if identity is None:
            return None

        return CurrentSession(
            session_id=user_session.id,
            identity=identity,
            profile=profile_repository.get_profile(self.db, identity.id),
            expires_at=user_session.expires_at,
        )

    def on_session_change(
        self, callback: Callable[[Optional[CurrentSession]], None]
    ) -> Callable[[], None]:
        return self.events.subscribe(SESSION_CHANGED, callback)


__all__ = ["AuthService", "CurrentSession", "SIGN_UP_MESSAGES"]
