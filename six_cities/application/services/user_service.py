"""
UserService - Operations sur les utilisateurs.

Responsabilite unique:
----------------------
Inscription, verification des credentials, avatar et favoris.

Dependances:
------------
- UserRepository: Persistance des utilisateurs et de leurs favoris
"""

from typing import Iterable, List, Optional
from uuid import UUID

from six_cities.domain.entities.user import User
from six_cities.domain.exceptions import EmailAlreadyExistsError, EntityNotFoundError
from six_cities.domain.ports.user_repository import UserRepository
from six_cities.domain.value_objects.user_type import UserType


class UserService:
    """
    Service applicatif des utilisateurs.

    Example:
        >>> service = UserService(user_repo)
        >>> user = service.create("Keks", "keks@mail.com", "secret1", "pro")
        >>> service.verify_credentials("keks@mail.com", "secret1") == user
        True
    """

    def __init__(self, user_repo: UserRepository):
        self._users = user_repo

    def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Recupere un utilisateur par ID."""
        return self._users.get_by_id(user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        """Recupere un utilisateur par email (insensible a la casse)."""
        return self._users.get_by_email(email.strip().lower())

    def find_by_ids(self, user_ids: Iterable[UUID]) -> List[User]:
        """Recupere plusieurs utilisateurs."""
        return self._users.find_by_ids(set(user_ids))

    def exists(self, document_id: UUID) -> bool:
        """Verifie l'existence d'un utilisateur."""
        return self._users.exists(document_id)

    def create(
        self,
        name: str,
        email: str,
        password: str,
        user_type: str | UserType = UserType.NORMAL,
    ) -> User:
        """
        Inscrit un nouvel utilisateur.

        Raises:
            EmailAlreadyExistsError: Si l'email est deja utilise.
            InvalidEntityError: Si les donnees sont invalides.
        """
        if self.find_by_email(email):
            raise EmailAlreadyExistsError(email.strip().lower())

        user = User.create(
            name=name,
            email=email,
            password=password,
            user_type=user_type,
        )
        return self._users.save(user)

    def verify_credentials(self, email: str, password: str) -> Optional[User]:
        """
        Verifie un couple email / mot de passe.

        Returns:
            User si les credentials sont valides, None sinon.
        """
        user = self.find_by_email(email)
        if not user or not user.verify_password(password):
            return None
        return user

    def update_avatar(self, user_id: UUID, avatar_path: str) -> User:
        """
        Met a jour l'avatar d'un utilisateur.

        Raises:
            EntityNotFoundError: Si l'utilisateur n'existe pas.
        """
        user = self._users.get_by_id(user_id)
        if not user:
            raise EntityNotFoundError("User", user_id)

        user.set_avatar(avatar_path)
        return self._users.save(user)

    def add_to_favorites(self, user_id: UUID, offer_id: UUID) -> bool:
        """
        Ajoute une offre aux favoris (idempotent).

        Returns:
            True si l'offre a ete ajoutee, False si deja presente.
        """
        return self._users.add_favorite(user_id, offer_id)

    def remove_from_favorites(self, user_id: UUID, offer_id: UUID) -> bool:
        """
        Retire une offre des favoris (sans erreur si absente).

        Returns:
            True si l'offre a ete retiree, False si elle n'y etait pas.
        """
        return self._users.remove_favorite(user_id, offer_id)

    def get_favorite_offers(self, user_id: UUID) -> set[UUID]:
        """Retourne les IDs des offres favorites."""
        return self._users.get_favorite_ids(user_id)
