from typing import Optional

from sqlalchemy.orm import Session

from futcerto.models.profile import Profile


def get_profile(db: Session, profile_id: str) -> Optional[Profile]:
    return db.query(Profile).filter(Profile.id == profile_id).first()


def create_profile(db: Session, profile: Profile) -> Profile:
    db.add(profile)
    db.flush()
    return profile
