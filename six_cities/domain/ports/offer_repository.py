"""
Port OfferRepository - Interface pour la persistance des offres.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from six_cities.domain.entities.offer import Offer
from six_cities.domain.value_objects.city import City


class OfferRepository(ABC):
    """
    Interface Repository pour les offres.

    Les listes sont toujours triees par date de publication
    decroissante (plus recentes en premier).
    """

    @abstractmethod
    def save(self, offer: Offer) -> Offer:
        """Persiste une offre (create ou update)."""
        ...

    @abstractmethod
    def get_by_id(self, offer_id: UUID) -> Optional[Offer]:
        """Recupere une offre par son ID."""
        ...

    @abstractmethod
    def exists(self, offer_id: UUID) -> bool:
        """Verifie si une offre existe."""
        ...

    @abstractmethod
    def find_latest(self, limit: int) -> List[Offer]:
        """Liste les offres les plus recentes."""
        ...

    @abstractmethod
    def find_premium_by_city(self, city: City, limit: int) -> List[Offer]:
        """Liste les offres premium d'une ville."""
        ...

    @abstractmethod
    def find_favorites_of(self, user_id: UUID) -> List[Offer]:
        """Liste les offres favorites d'un utilisateur."""
        ...

    @abstractmethod
    def update_stats(self, offer_id: UUID, comment_count: int, rating: float) -> None:
        """Ecrit les champs derives rating et comment_count."""
        ...

    @abstractmethod
    def delete(self, offer_id: UUID) -> bool:
        """
        Supprime une offre et ses references dans les favoris.

        Returns:
            True si supprimee, False si inexistante.
        """
        ...
