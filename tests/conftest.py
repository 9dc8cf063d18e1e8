"""
Configuration et fixtures pytest.
"""

import sys
from pathlib import Path
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

# Ajouter le repertoire racine au path
sys.path.insert(0, str(Path(__file__).parent.parent))

from six_cities.domain.entities import Comment, Offer, User
from six_cities.domain.value_objects import Coordinates
from six_cities.infrastructure.container import Container
from six_cities.infrastructure.persistence import DatabaseManager
from six_cities.presentation.api.config import APISettings
from six_cities.presentation.api.main import create_app

# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def settings(tmp_path) -> APISettings:
    """Configuration isolee: SQLite et upload dans tmp_path."""
    return APISettings(
        _env_file=None,
        env="test",
        jwt_secret_key="test-secret-key",
        database_url=f"sqlite:///{tmp_path / 'six_cities.db'}",
        upload_dir=str(tmp_path / "upload"),
    )


@pytest.fixture
def db(settings):
    """DatabaseManager SQLite avec tables creees."""
    manager = DatabaseManager(settings.sqlalchemy_url)
    manager.create_tables()
    yield manager
    manager.dispose()


@pytest.fixture
def container(settings, db) -> Container:
    """Container cable sur la base de test."""
    return Container.create(settings, database=db)


@pytest.fixture
def app(settings, container):
    """Application FastAPI de test."""
    return create_app(settings=settings, container=container)


@pytest.fixture
def client(app) -> TestClient:
    """Client HTTP de test."""
    return TestClient(app)


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - ENTITES
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def sample_user() -> User:
    """Utilisateur valide (mot de passe: secret1)."""
    return User.create(
        name="Keks",
        email="Keks@Example.com",
        password="secret1",
        user_type="pro",
    )


@pytest.fixture
def sample_offer(sample_user) -> Offer:
    """Offre valide publiee par sample_user."""
    return Offer.create(
        title="Nice, cozy, warm big bed apartment",
        description="A quiet cozy and picturesque place that hides behind a river.",
        city="Amsterdam",
        preview="https://example.com/preview.jpg",
        images=[f"https://example.com/{i}.jpg" for i in range(1, 7)],
        is_premium=True,
        type="apartment",
        bedrooms=3,
        guests=4,
        price=120,
        amenities=["Breakfast", "Washer"],
        coordinates=Coordinates(latitude=52.370216, longitude=4.895168),
        author_id=sample_user.id,
    )


@pytest.fixture
def sample_comment(sample_user, sample_offer) -> Comment:
    """Commentaire valide."""
    return Comment.create(
        text="Great place to stay",
        rating=5,
        author_id=sample_user.id,
        offer_id=sample_offer.id,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# HELPERS HTTP
# ═══════════════════════════════════════════════════════════════════════════════

def _offer_payload(**overrides) -> dict:
    payload = {
        "title": "Nice, cozy, warm big bed apartment",
        "description": "A quiet cozy and picturesque place that hides behind a river.",
        "city": "Amsterdam",
        "preview": "https://example.com/preview.jpg",
        "images": [f"https://example.com/{i}.jpg" for i in range(1, 7)],
        "isPremium": False,
        "type": "apartment",
        "bedrooms": 3,
        "guests": 4,
        "price": 120,
        "amenities": ["Breakfast", "Washer"],
        "coordinates": {"latitude": 52.370216, "longitude": 4.895168},
    }
    payload.update(overrides)
    return payload


def _register(client: TestClient, email: str | None = None, **overrides) -> dict:
    """Inscrit un utilisateur et retourne son DTO."""
    body = {
        "name": "Keks",
        "email": email or f"user-{uuid4().hex[:8]}@example.com",
        "password": "secret1",
        "type": "normal",
    }
    body.update(overrides)
    response = client.post("/users", json=body)
    assert response.status_code == 201, response.text
    return response.json()


def _login(client: TestClient, email: str, password: str = "secret1") -> dict:
    """Retourne les headers Authorization pour un utilisateur."""
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def author(client) -> tuple[dict, dict]:
    """Utilisateur inscrit et ses headers d'authentification."""
    user = _register(client)
    return user, _login(client, user["email"])


@pytest.fixture
def created_offer(client, author) -> dict:
    """Offre publiee par author."""
    _, headers = author
    response = client.post("/offers", json=_offer_payload(), headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def offer_payload():
    """Factory de corps JSON valide pour POST /offers."""
    return _offer_payload


@pytest.fixture
def register_user(client):
    """Factory: inscrit un utilisateur, retourne son DTO."""
    return lambda email=None, **overrides: _register(client, email, **overrides)


@pytest.fixture
def login_as(client):
    """Factory: headers Authorization pour un email."""
    return lambda email, password="secret1": _login(client, email, password)
