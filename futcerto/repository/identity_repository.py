from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from futcerto.models.identity import Identity


def get_identity_by_email(db: Session, email: str) -> Optional[Identity]:
    return db.query(Identity).filter(func.lower(Identity.email) == email.lower()).first()


def get_identity(db: Session, identity_id: str) -> Optional[Identity]:
    return db.query(Identity).filter(Identity.id == identity_id).first()


def create_identity(db: Session, identity: Identity) -> Identity:
    db.add(identity)
    db.flush()
    return identity
