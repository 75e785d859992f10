from typing import Optional

from sqlalchemy.orm import Session

from futcerto.models.session import UserSession


def create_session(db: Session, session: UserSession) -> UserSession:
    db.add(session)
    db.flush()
    return session


def get_session(db: Session, session_id: int) -> Optional[UserSession]:
    return db.query(UserSession).filter(UserSession.id == session_id).first()


def deactivate_session(db: Session, session_id: int) -> Optional[UserSession]:
    session = get_session(db, session_id)
    if session:
        session.is_active = False
        db.flush()
    return session
