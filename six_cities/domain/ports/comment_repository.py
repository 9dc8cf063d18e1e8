"""
Port CommentRepository - Interface pour la persistance des commentaires.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from six_cities.domain.entities.comment import Comment


class CommentRepository(ABC):
    """Interface Repository pour les commentaires."""

    @abstractmethod
    def save(self, comment: Comment) -> Comment:
        """Persiste un nouveau commentaire."""
        ...

    @abstractmethod
    def find_by_offer(self, offer_id: UUID, limit: int) -> List[Comment]:
        """Liste les commentaires d'une offre, plus recents en premier."""
        ...

    @abstractmethod
    def count_by_offer(self, offer_id: UUID) -> int:
        """Compte les commentaires d'une offre."""
        ...

    @abstractmethod
    def average_rating(self, offer_id: UUID) -> Optional[float]:
        """Moyenne brute des notes d'une offre, None si aucun commentaire."""
        ...

    @abstractmethod
    def delete_by_offer(self, offer_id: UUID) -> int:
        """Supprime les commentaires d'une offre, retourne le nombre supprime."""
        ...
