"""
JWTService - Gestion des tokens JWT.

Responsabilite unique:
----------------------
Emettre et verifier les tokens d'authentification (HS256).
Le token embarque l'ID et l'email de l'utilisateur.

Usage:
------
    service = JWTService(settings)
    token = service.create_token(user)
    payload = service.verify_token(token)  # None si invalide ou expire
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

import jwt
from jwt.exceptions import PyJWTError

from six_cities.domain.entities.user import User
from six_cities.presentation.api.config import APISettings


@dataclass
class TokenPayload:
    """
    Claims d'un token verifie.

    Attributes:
        id: ID de l'utilisateur.
        email: Email de l'utilisateur a l'emission.
        exp: Date d'expiration.
    """

    id: UUID
    email: str
    exp: datetime


class JWTService:
    """
    Service de gestion JWT.

    verify_token ne leve jamais: tout echec (signature, expiration,
    claims manquants) est represente par None.
    """

    def __init__(self, settings: APISettings):
        """
        Initialise le service.

        Args:
            settings: Configuration API.
        """
        self._secret = settings.jwt_secret_key
        self._algorithm = settings.jwt_algorithm
        self._expire_minutes = settings.jwt_expire_minutes

    def create_token(self, user: User) -> str:
        """
        Emet un token signe pour un utilisateur.

        Args:
            user: Utilisateur authentifie.

        Returns:
            Token JWT encode.
        """
        now = datetime.now(timezone.utc)
        return self._encode({
            "id": str(user.id),
            "email": user.email,
            "iat": now,
            "exp": now + timedelta(minutes=self._expire_minutes),
        })

    def verify_token(self, token: str) -> Optional[TokenPayload]:
        """
        Verifie un token.

        Args:
            token: Token JWT.

        Returns:
            TokenPayload si valide, None sinon.
        """
        data = self._decode(token)
        if not data:
            return None

        try:
            return TokenPayload(
                id=UUID(data["id"]),
                email=data["email"],
                exp=datetime.fromtimestamp(data["exp"], tz=timezone.utc),
            )
        except (KeyError, TypeError, ValueError):
            return None

    def _encode(self, payload: dict) -> str:
        """Encode un payload en JWT."""
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def _decode(self, token: str) -> Optional[dict]:
        """Decode un JWT, retourne None si invalide."""
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp"]},
            )
        except PyJWTError:
            return None
