from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from futcerto.models.court import Court


def list_courts(
    db: Session,
    *,
    search_term: Optional[str] = None,
    min_price: Optional[Decimal] = None,
    max_price: Optional[Decimal] = None,
    max_players: Optional[int] = None,
    manager_id: Optional[str] = None,
) -> List[Court]:
    query = db.query(Court)

    if search_term:
        # SQLite's lower() folds ASCII only, so "SÃO" in a row does not match
        # "são" there; Postgres folds the full Unicode range.
        needle = search_term.lower()
        query = query.filter(
            or_(
                func.lower(Court.name).contains(needle, autoescape=True),
                func.lower(Court.location).contains(needle, autoescape=True),
            )
        )
    if min_price is not None:
        query = query.filter(Court.price_per_hour >= min_price)
    if max_price is not None:
        query = query.filter(Court.price_per_hour <= max_price)
    if max_players is not None:
        query = query.filter(Court.max_players == max_players)
    if manager_id is not None:
        query = query.filter(Court.manager_id == manager_id)

    return query.order_by(Court.name.asc()).all()


def get_court(db: Session, court_id: int) -> Optional[Court]:
    return db.query(Court).filter(Court.id == court_id).first()


def update_court(db: Session, court: Court, changes: Dict[str, Any]) -> Court:
    for attr, value in changes.items():
        setattr(court, attr, value)
    db.flush()
    db.commit()
    db.refresh(court)
    return court
