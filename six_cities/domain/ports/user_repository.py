"""
Port UserRepository - Interface pour la persistance des utilisateurs.

Responsabilite unique:
----------------------
Definir les operations de persistance de l'entite User,
y compris l'ensemble des offres favorites de chaque utilisateur.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from uuid import UUID

from six_cities.domain.entities.user import User


class UserRepository(ABC):
    """
    Interface Repository pour les utilisateurs.

    Implementee par SqlAlchemyUserRepository.
    """

    @abstractmethod
    def save(self, user: User) -> User:
        """Persiste un utilisateur (create ou update)."""
        ...

    @abstractmethod
    def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Recupere un utilisateur par son ID (favoris inclus)."""
        ...

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """Recupere un utilisateur par son email."""
        ...

    @abstractmethod
    def find_by_ids(self, user_ids: Iterable[UUID]) -> List[User]:
        """Recupere plusieurs utilisateurs en une requete."""
        ...

    @abstractmethod
    def exists(self, user_id: UUID) -> bool:
        """Verifie si un utilisateur existe."""
        ...

    @abstractmethod
    def add_favorite(self, user_id: UUID, offer_id: UUID) -> bool:
        """
        Ajoute une offre aux favoris.

        Returns:
            True si ajoutee, False si deja presente.
        """
        ...

    @abstractmethod
    def remove_favorite(self, user_id: UUID, offer_id: UUID) -> bool:
        """
        Retire une offre des favoris.

        Returns:
            True si retiree, False si absente.
        """
        ...

    @abstractmethod
    def get_favorite_ids(self, user_id: UUID) -> set[UUID]:
        """Retourne les IDs des offres favorites."""
        ...
