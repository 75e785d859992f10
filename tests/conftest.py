"""Shared test fixtures.

Provides an application wired to an in-memory SQLite database, a
``TestClient`` for it, a database session on the same engine and a small
seeded catalogue of courts, managers and a player.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from futcerto.core.config import Settings
from futcerto.core.security import hash_password
from futcerto.main import API_PREFIX, create_app
from futcerto.models import Court, Identity, Profile

PASSWORD = "segredo123"
API = API_PREFIX


@pytest.fixture()
def password() -> str:
    return PASSWORD


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        DATABASE_URL="sqlite://",
        SECRET_KEY="test-secret",
        MAP_ACCESS_TOKEN="pk.test-token",
        APP_ORIGIN="https://example.com",
        BOOKING_INITIAL_STATUS="pending",
        CORS_ORIGINS=[],
    )


@pytest.fixture()
def app(settings: Settings):
    application = create_app(settings)
    yield application
    application.state.engine.dispose()


@pytest.fixture()
def client(app) -> TestClient:
    with TestClient(app) as tc:
        yield tc


@pytest.fixture()
def db(app):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


def _add_person(db, email: str, name: str, user_type: str) -> Profile:
    identity = Identity(email=email, password_hash=hash_password(PASSWORD))
    db.add(identity)
    db.flush()
    profile = Profile(id=identity.id, name=name, email=email, phone="41999990000", user_type=user_type)
    db.add(profile)
    db.commit()
    return profile


@pytest.fixture()
def manager(db) -> Profile:
    return _add_person(db, "gestor@futcerto.com", "Gestor Um", "manager")


@pytest.fixture()
def other_manager(db) -> Profile:
    return _add_person(db, "outro@futcerto.com", "Gestor Dois", "manager")


@pytest.fixture()
def player(db) -> Profile:
    return _add_person(db, "jogador@futcerto.com", "Jogador", "player")


@pytest.fixture()
def courts(db, manager, other_manager) -> list[Court]:
    rows = [
        Court(name="Quadra Central", location="Centro", price_per_hour=Decimal("60"),
              max_players=10, latitude=-25.43, longitude=-49.27, manager_id=manager.id),
        Court(name="Quadra Bairro Novo", location="Bairro X", price_per_hour=Decimal("40"),
              max_players=10, latitude=-25.50, longitude=-49.30, manager_id=manager.id),
        Court(name="Grande Quadra Society", location="Centro", price_per_hour=Decimal("120"),
              max_players=22, latitude=-25.44, longitude=-49.28, manager_id=other_manager.id),
        Court(name="Quadra Pequena 7v7", location="Bairro Y", price_per_hour=Decimal("80"),
              max_players=14, latitude=-25.41, longitude=-49.25, manager_id=None),
    ]
    db.add_all(rows)
    db.commit()
    for row in rows:
        db.refresh(row)
    return rows


@pytest.fixture()
def auth_headers(client):
    """Return a function that signs in ``email`` and builds its bearer header."""

    def _headers(email: str, password: str = PASSWORD) -> dict:
        response = client.post(
            f"{API}/auth/sign-in", json={"email": email, "password": password}
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _headers
