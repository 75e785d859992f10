"""Manager-scoped court access.

A manager only ever reads or edits courts whose ``manager_id`` is their own
identity. A court that exists but belongs to someone else is reported as
``AccessDenied``; a missing court is ``NotFound``.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from futcerto.core.errors import AccessDenied, AuthRequired, NotFound, SubmissionFailed
from futcerto.models.court import Court
from futcerto.models.profile import Profile
from futcerto.repository import court_repository
from futcerto.schemas.court import CourtUpdate

logger = logging.getLogger(__name__)

MANAGERS_ONLY = (
    "Você não tem permissão para visualizar esta página. "
    "Esta área é reservada para gestores de quadras."
)
NOT_YOUR_COURT = "Acesso Negado: Você não gerencia esta quadra."


class ManagerService:
    def __init__(self, db: Session):
        self.db = db

    @staticmethod
    def _ensure_manager(requester: Optional[Profile]) -> Profile:
        if requester is None:
            raise AuthRequired()
        if not requester.is_manager:
            raise AccessDenied(MANAGERS_ONLY)
        return requester

    def list_managed_courts(self, requester: Optional[Profile]) -> List[Court]:
        manager = self._ensure_manager(requester)
        return court_repository.list_courts(self.db, manager_id=manager.id)

    def get_managed_court(self, court_id: int, requester: Optional[Profile]) -> Court:
        manager = self._ensure_manager(requester)
        court = court_repository.get_court(self.db, court_id)
        if court is None:
            raise NotFound("Quadra não encontrada.")
        if court.manager_id != manager.id:
            logger.warning(
                "Manager %s tried to access court %s owned by %s",
                manager.id,
                court_id,
                court.manager_id,
            )
            raise AccessDenied(NOT_YOUR_COURT)
        return court

    def update_court(
        self, court_id: int, patch: CourtUpdate, requester: Optional[Profile]
    ) -> Court:
        court = self.get_managed_court(court_id, requester)

        changes = patch.model_dump(exclude_unset=True)
        for key in ("name", "location", "price_per_hour", "max_players"):
            if key in changes and changes[key] is None:
                changes.pop(key)
        if "price_per_hour" in changes:
            changes["price_per_hour"] = Decimal(str(changes["price_per_hour"]))
        if "image_url" in changes:
            changes["image_url"] = changes["image_url"] or None

        try:
            return court_repository.update_court(self.db, court, changes)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to update court %s", court_id)
            raise SubmissionFailed(
                "Não foi possível atualizar os dados da quadra. Tente novamente."
            ) from exc


__all__ = ["ManagerService", "MANAGERS_ONLY", "NOT_YOUR_COURT"]
