from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from futcerto.core.errors import AuthRequired, NotFound
from futcerto.models.identity import Identity
from futcerto.models.profile import Profile
from futcerto.repository import profile_repository, reservation_repository

USER_TYPE_LABELS = {
    "player": "Jogador",
    "manager": "Gestor de Quadra",
}
STATUS_LABELS = {
    "confirmed": "Confirmada",
    "pending": "Pendente",
    "cancelled": "Cancelada",
}
UNKNOWN_COURT = "Quadra desconhecida"


class ProfileService:
    def __init__(self, db: Session):
        self.db = db

    def get_profile(self, identity: Optional[Identity]) -> Profile:
        if identity is None:
            raise AuthRequired("Por favor, faça login para visualizar seu perfil e reservas.")
        profile = profile_repository.get_profile(self.db, identity.id)
        if profile is None:
            raise NotFound("Não foi possível encontrar dados do seu perfil.")
        return profile

    def list_player_reservations(self, player_id: str) -> List[Dict[str, Any]]:
        """Reservations of one player, newest date and start time first."""

        reservations = reservation_repository.list_reservations_by_player(self.db, player_id)
        return [
            {
                "id": reservation.id,
                "court_id": reservation.court_id,
                "court_name": reservation.court.name if reservation.court else UNKNOWN_COURT,
                "booking_date": reservation.booking_date,
                "start_time": reservation.start_time,
                "end_time": reservation.end_time,
                "status": reservation.status,
                "status_label": STATUS_LABELS.get(reservation.status, reservation.status),
            }
            for reservation in reservations
        ]

    def get_profile_overview(self, identity: Optional[Identity]) -> Dict[str, Any]:
        profile = self.get_profile(identity)
        return {
            "profile": profile,
            "user_type_label": USER_TYPE_LABELS.get(profile.user_type, profile.user_type),
            "reservations": self.list_player_reservations(profile.id),
        }


__all__ = ["ProfileService", "STATUS_LABELS", "USER_TYPE_LABELS"]
