"""
Users Schemas - Modeles Pydantic pour les utilisateurs.

Responsabilite unique:
----------------------
Definir les schemas de requete/reponse pour les endpoints users.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from six_cities.domain.entities.user import User
from six_cities.domain.value_objects.user_type import UserType
from six_cities.presentation.api.schemas import CamelModel


EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class CreateUserRequest(CamelModel):
    """
    Requete d'inscription.

    Example:
        {"name": "Keks", "email": "keks@mail.com",
         "password": "secret1", "type": "pro"}
    """

    name: str = Field(..., min_length=1, max_length=15)
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=6, max_length=12)
    type: UserType


class UserResponse(CamelModel):
    """
    Profil public d'un utilisateur.

    Le hash du mot de passe et les favoris ne sont jamais exposes.
    """

    id: UUID
    name: str
    email: str
    avatar: Optional[str] = None
    type: UserType
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        """Convertit une entite User."""
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            avatar=user.avatar,
            type=user.type,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
