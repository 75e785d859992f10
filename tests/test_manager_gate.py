from decimal import Decimal

import pytest
from pydantic import ValidationError

from futcerto.core.errors import AccessDenied, AuthRequired, NotFound
from futcerto.schemas.court import CourtUpdate
from futcerto.services.manager_service import MANAGERS_ONLY, NOT_YOUR_COURT, ManagerService


def test_lists_only_own_courts(db, courts, manager):
    result = ManagerService(db).list_managed_courts(manager)
    assert [court.name for court in result] == ["Quadra Bairro Novo", "Quadra Central"]


def test_player_is_turned_away(db, courts, player):
    with pytest.raises(AccessDenied) as exc_info:
        ManagerService(db).list_managed_courts(player)
    assert exc_info.value.message == MANAGERS_ONLY
    assert exc_info.value.title == "Acesso Negado"


def test_anonymous_must_sign_in(db, courts):
    with pytest.raises(AuthRequired):
        ManagerService(db).list_managed_courts(None)


def test_foreign_court_is_denied(db, courts, manager):
    foreign = courts[2]
    with pytest.raises(AccessDenied) as exc_info:
        ManagerService(db).get_managed_court(foreign.id, manager)
    assert exc_info.value.message == NOT_YOUR_COURT


def test_unowned_court_is_denied(db, courts, manager):
    with pytest.raises(AccessDenied):
        ManagerService(db).get_managed_court(courts[3].id, manager)


def test_missing_court(db, courts, manager):
    with pytest.raises(NotFound):
        ManagerService(db).get_managed_court(9999, manager)


def test_update_own_court(db, courts, manager):
    court = courts[0]
    patch = CourtUpdate(name="Quadra Central Reformada", price_per_hour=75.5, image_url="")

    updated = ManagerService(db).update_court(court.id, patch, manager)

    assert updated.name == "Quadra Central Reformada"
    assert updated.price_per_hour == Decimal("75.50")
    assert updated.image_url is None
    assert updated.location == "Centro"


def test_update_foreign_court_changes_nothing(db, courts, manager):
    foreign = courts[2]
    with pytest.raises(AccessDenied):
        ManagerService(db).update_court(foreign.id, CourtUpdate(name="Sequestrada"), manager)

    db.expire_all()
    assert foreign.name == "Grande Quadra Society"


@pytest.mark.parametrize(
    "field, value",
    [
        ("name", "ab"),
        ("location", "Rua"),
        ("price_per_hour", 0),
        ("max_players", -1),
        ("image_url", "not a url"),
    ],
)
def test_update_payload_validation(field, value):
    with pytest.raises(ValidationError):
        CourtUpdate(**{field: value})
