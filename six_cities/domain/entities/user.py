"""
Entite User - Utilisateur de la plateforme.

Represente un compte (loueur ou voyageur) capable de publier
des offres, de commenter et de gerer ses favoris.

Attributes:
-----------
- id: Identifiant unique UUID
- name: Nom affiche (1 a 15 caracteres)
- email: Adresse email unique (stockee en minuscules)
- password_hash: Hash bcrypt du mot de passe
- type: pro ou normal
- avatar: Chemin public de l'avatar (optionnel)
- favorite_offer_ids: Ensemble des offres favorites

Securite:
---------
- Mots de passe hashes avec bcrypt (work factor 12)
- Le hash n'est jamais expose par l'API
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

import bcrypt

from six_cities.domain.exceptions import InvalidEntityError
from six_cities.domain.value_objects.user_type import UserType


@dataclass
class User:
    """
    Utilisateur de la plateforme.

    Attributes:
        id: Identifiant unique UUID.
        name: Nom affiche.
        email: Adresse email (unique, minuscules).
        password_hash: Hash du mot de passe (bcrypt).
        type: Type de compte.
        avatar: Chemin public de l'avatar.
        favorite_offer_ids: Offres ajoutees aux favoris.
        created_at: Date de creation du compte.
        updated_at: Date de derniere modification.

    Example:
        >>> user = User.create(
        ...     name="Keks",
        ...     email="keks@example.com",
        ...     password="secret1",
        ...     user_type="pro"
        ... )
        >>> user.verify_password("secret1")
        True
    """

    id: UUID
    name: str
    email: str
    password_hash: str
    type: UserType
    avatar: Optional[str] = None
    favorite_offer_ids: set[UUID] = field(default_factory=set)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    # Contraintes
    NAME_MIN_LENGTH = 1
    NAME_MAX_LENGTH = 15

    @classmethod
    def create(
        cls,
        name: str,
        email: str,
        password: str,
        user_type: str | UserType = UserType.NORMAL,
    ) -> "User":
        """
        Factory pour creer un nouvel utilisateur.

        Args:
            name: Nom affiche.
            email: Adresse email.
            password: Mot de passe en clair (sera hashe).
            user_type: pro ou normal.

        Returns:
            Nouvelle instance User avec mot de passe hashe.

        Raises:
            InvalidEntityError: Si le nom ou le type est invalide.
        """
        name = name.strip()
        if not cls.NAME_MIN_LENGTH <= len(name) <= cls.NAME_MAX_LENGTH:
            raise InvalidEntityError(
                f"name must be between {cls.NAME_MIN_LENGTH} and "
                f"{cls.NAME_MAX_LENGTH} characters",
                field="name",
            )
        if not isinstance(user_type, UserType):
            user_type = UserType.from_string(user_type)

        return cls(
            id=uuid4(),
            name=name,
            email=email.strip().lower(),
            password_hash=cls._hash_password(password),
            type=user_type,
        )

    @staticmethod
    def _hash_password(password: str) -> str:
        """Hash un mot de passe avec bcrypt."""
        salt = bcrypt.gensalt(rounds=12)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, password: str) -> bool:
        """
        Verifie un mot de passe contre le hash stocke.

        Args:
            password: Mot de passe a verifier.

        Returns:
            True si le mot de passe est correct.
        """
        return bcrypt.checkpw(
            password.encode("utf-8"),
            self.password_hash.encode("utf-8"),
        )

    def set_avatar(self, avatar_path: str) -> None:
        """Met a jour le chemin de l'avatar."""
        self.avatar = avatar_path
        self.updated_at = datetime.now()

    def has_favorite(self, offer_id: UUID) -> bool:
        """True si l'offre fait partie des favoris."""
        return offer_id in self.favorite_offer_ids

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"User({self.email}, {self.type})"
