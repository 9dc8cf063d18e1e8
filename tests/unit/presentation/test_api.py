"""
Tests unitaires pour la couche API: configuration, JWT, erreurs, schemas.
"""

from uuid import uuid4

import pytest
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from six_cities.domain.exceptions import (
    DomainException,
    EmailAlreadyExistsError,
    EntityNotFoundError,
    InvalidEntityError,
)
from six_cities.presentation.api.auth.jwt_service import JWTService
from six_cities.presentation.api.config import APISettings
from six_cities.presentation.api.errors import (
    BadRequestError,
    ConflictError,
    NotFoundError,
    UnauthorizedError,
    validation_error,
)
from six_cities.presentation.api.exception_handlers import (
    translate_domain_exception,
    translate_integrity_error,
)
from six_cities.presentation.api.offers.schemas import (
    CreateOfferRequest,
    OfferResponse,
    UpdateOfferRequest,
)
from six_cities.presentation.api.users.schemas import CreateUserRequest, UserResponse


# ═══════════════════════════════════════════════════════════════════════════════
# CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════

class TestAPISettings:
    """Tests pour APISettings."""

    def test_defaults(self):
        """Valeurs par defaut."""
        settings = APISettings(_env_file=None)
        assert settings.port == 4000
        assert settings.jwt_algorithm == "HS256"
        assert settings.max_upload_size_bytes == 5 * 1024 * 1024
        assert not settings.is_production

    def test_sqlalchemy_url_from_parts(self):
        """Sans DATABASE_URL, l'URL est construite depuis DB_*."""
        settings = APISettings(
            _env_file=None,
            database_url="",
            db_host="db",
            db_port=5433,
            db_user="admin",
            db_password="pw",
            db_name="rentals",
        )
        assert settings.sqlalchemy_url == "postgresql+psycopg2://admin:pw@db:5433/rentals"

    def test_sqlalchemy_url_explicit(self):
        """DATABASE_URL prime sur DB_*."""
        settings = APISettings(_env_file=None, database_url="sqlite:///x.db")
        assert settings.sqlalchemy_url == "sqlite:///x.db"

    def test_reads_environment(self, monkeypatch):
        """Les variables d'environnement sont lues."""
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("JWT_SECRET_KEY", "from-env")
        settings = APISettings(_env_file=None)
        assert settings.port == 8080
        assert settings.jwt_secret_key == "from-env"


# ═══════════════════════════════════════════════════════════════════════════════
# JWT
# ═══════════════════════════════════════════════════════════════════════════════

class TestJWTService:
    """Tests pour JWTService."""

    def test_round_trip(self, settings, sample_user):
        """Un token emis est verifie avec id et email."""
        service = JWTService(settings)

        payload = service.verify_token(service.create_token(sample_user))

        assert payload.id == sample_user.id
        assert payload.email == sample_user.email

    def test_expired_token(self, settings, sample_user):
        """Token expire: None."""
        expired = settings.model_copy(update={"jwt_expire_minutes": -1})
        token = JWTService(expired).create_token(sample_user)

        assert JWTService(settings).verify_token(token) is None

    def test_wrong_secret(self, settings, sample_user):
        """Signature avec une autre cle: None."""
        other = settings.model_copy(update={"jwt_secret_key": "another-secret"})
        token = JWTService(other).create_token(sample_user)

        assert JWTService(settings).verify_token(token) is None

    def test_tampered_token(self, settings, sample_user):
        """Token modifie: None."""
        service = JWTService(settings)
        header, payload, signature = service.create_token(sample_user).split(".")
        tampered = ".".join([header, payload[:-2] + "AA", signature])

        assert service.verify_token(tampered) is None

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
    def test_malformed_token(self, settings, token):
        """Token mal forme: None, jamais d'exception."""
        assert JWTService(settings).verify_token(token) is None


# ═══════════════════════════════════════════════════════════════════════════════
# ERREURS
# ═══════════════════════════════════════════════════════════════════════════════

class TestErrors:
    """Tests pour la taxonomie d'erreurs et leur traduction."""

    def test_to_dict_without_details(self):
        """Sans details, seul "error" est present."""
        assert NotFoundError("gone").to_dict() == {"error": "gone"}
        assert UnauthorizedError().to_dict() == {"error": "Unauthorized"}

    def test_validation_error_groups_by_field(self):
        """Les erreurs sont groupees par champ, sans le prefixe body."""
        error = validation_error([
            {"loc": ("body", "email"), "msg": "bad format"},
            {"loc": ("body", "email"), "msg": "too long"},
            {"loc": ("body", "coordinates", "latitude"), "msg": "too big"},
            {"loc": ("body",), "msg": "Field required"},
        ])

        assert isinstance(error, BadRequestError)
        assert error.details == [
            {"field": "email", "messages": ["bad format", "too long"]},
            {"field": "coordinates.latitude", "messages": ["too big"]},
            {"field": "body", "messages": ["Field required"]},
        ]

    def test_translate_not_found(self):
        """EntityNotFoundError -> 404."""
        error = translate_domain_exception(EntityNotFoundError("Offer", uuid4()))
        assert error.status_code == 404

    def test_translate_email_conflict(self):
        """EmailAlreadyExistsError -> 409."""
        error = translate_domain_exception(EmailAlreadyExistsError("a@b.com"))
        assert isinstance(error, ConflictError)
        assert error.message == "User with email a@b.com already exists"

    def test_translate_invalid_entity(self):
        """InvalidEntityError -> 400 avec le champ en detail."""
        error = translate_domain_exception(InvalidEntityError("too short", field="name"))
        assert error.status_code == 400
        assert error.details == [{"field": "name", "messages": ["too short"]}]

    def test_translate_other_domain_error(self):
        """Autre exception metier -> 400."""
        error = translate_domain_exception(DomainException("nope"))
        assert error.status_code == 400
        assert error.details is None

    def test_translate_unique_violation(self):
        """Violation d'unicite -> 409."""
        exc = IntegrityError(
            "INSERT", {}, Exception("UNIQUE constraint failed: users.email")
        )
        assert translate_integrity_error(exc).status_code == 409

    def test_translate_other_integrity_error(self):
        """Autre violation -> 400."""
        exc = IntegrityError("INSERT", {}, Exception("NOT NULL constraint failed"))
        assert translate_integrity_error(exc).status_code == 400


# ═══════════════════════════════════════════════════════════════════════════════
# SCHEMAS
# ═══════════════════════════════════════════════════════════════════════════════

class TestSchemas:
    """Tests pour les DTO."""

    def test_create_user_request_rules(self):
        """Mot de passe 6-12, type obligatoire, email valide."""
        CreateUserRequest(name="Keks", email="k@mail.com", password="secret1", type="pro")

        for body in (
            {"name": "Keks", "email": "k@mail.com", "password": "12345", "type": "pro"},
            {"name": "Keks", "email": "k@mail.com", "password": "x" * 13, "type": "pro"},
            {"name": "Keks", "email": "not-an-email", "password": "secret1", "type": "pro"},
            {"name": "Keks", "email": "k@mail.com", "password": "secret1"},
        ):
            with pytest.raises(ValidationError):
                CreateUserRequest.model_validate(body)

    def test_user_response_hides_password(self, sample_user):
        """Le hash n'est jamais serialise."""
        body = UserResponse.from_entity(sample_user).model_dump(by_alias=True, mode="json")
        assert "passwordHash" not in body
        assert "password_hash" not in body
        assert body["type"] == "pro"

    def test_create_offer_accepts_camel_case(self, offer_payload):
        """isPremium est accepte en camelCase."""
        request = CreateOfferRequest.model_validate(offer_payload(isPremium=True))
        data = request.to_domain()

        assert data["is_premium"] is True
        assert data["coordinates"].latitude == 52.370216

    def test_create_offer_rejects_duplicate_amenities(self, offer_payload):
        """Equipements dupliques: erreur de validation."""
        with pytest.raises(ValidationError):
            CreateOfferRequest.model_validate(offer_payload(amenities=["Washer", "Washer"]))

    def test_create_offer_rejects_unknown_city(self, offer_payload):
        """Ville hors des six: erreur de validation."""
        with pytest.raises(ValidationError):
            CreateOfferRequest.model_validate(offer_payload(city="London"))

    def test_create_offer_ignores_stats(self, offer_payload):
        """rating et commentCount envoyes par le client sont ignores."""
        request = CreateOfferRequest.model_validate(offer_payload(rating=5, commentCount=9))
        assert "rating" not in request.to_domain()

    def test_update_offer_only_sent_fields(self):
        """to_changes ne contient que les champs envoyes."""
        request = UpdateOfferRequest.model_validate({"price": 500, "isPremium": True})
        assert request.to_changes() == {"price": 500, "is_premium": True}

    def test_offer_response_camel_case(self, sample_offer):
        """La reponse expose isFavorite, commentCount, authorId."""
        body = OfferResponse.from_entity(sample_offer, is_favorite=True).model_dump(
            by_alias=True, mode="json"
        )
        assert body["isFavorite"] is True
        assert body["commentCount"] == 0
        assert body["authorId"] == str(sample_offer.author_id)
        assert body["city"] == "Amsterdam"
