"""
OfferService - Operations sur les offres de location.

Responsabilite unique:
----------------------
Publication, consultation, modification et suppression des offres,
ainsi que l'ecriture des statistiques derivees des commentaires.

Dependances:
------------
- OfferRepository: Persistance des offres
- CommentRepository: Suppression en cascade des commentaires
"""

from typing import Any, List, Optional
from uuid import UUID

from six_cities.domain.entities.offer import Offer
from six_cities.domain.exceptions import EntityNotFoundError
from six_cities.domain.ports.comment_repository import CommentRepository
from six_cities.domain.ports.offer_repository import OfferRepository
from six_cities.domain.value_objects.city import City


class OfferService:
    """
    Service applicatif des offres.

    Example:
        >>> service = OfferService(offer_repo, comment_repo)
        >>> offers = service.find_many(limit=10)
    """

    DEFAULT_OFFER_COUNT = 60
    PREMIUM_OFFER_COUNT = 3

    def __init__(self, offer_repo: OfferRepository, comment_repo: CommentRepository):
        self._offers = offer_repo
        self._comments = comment_repo

    def find_by_id(self, offer_id: UUID) -> Optional[Offer]:
        """Recupere une offre par ID."""
        return self._offers.get_by_id(offer_id)

    def exists(self, document_id: UUID) -> bool:
        """Verifie l'existence d'une offre."""
        return self._offers.exists(document_id)

    def find_many(self, limit: int = DEFAULT_OFFER_COUNT) -> List[Offer]:
        """Liste les offres, plus recentes en premier."""
        return self._offers.find_latest(limit)

    def find_premium_by_city(
        self,
        city: City | str,
        limit: int = PREMIUM_OFFER_COUNT,
    ) -> List[Offer]:
        """Liste les offres premium d'une ville, plus recentes en premier."""
        if not isinstance(city, City):
            city = City.from_string(city)
        return self._offers.find_premium_by_city(city, limit)

    def find_favorites(self, user_id: UUID) -> List[Offer]:
        """Liste les offres favorites d'un utilisateur."""
        return self._offers.find_favorites_of(user_id)

    def create(self, data: dict[str, Any], author_id: UUID) -> Offer:
        """
        Publie une nouvelle offre.

        Args:
            data: Attributs de l'offre (noms snake_case).
            author_id: Utilisateur authentifie qui publie.

        Returns:
            Offre persistee avec rating 0 et comment_count 0.
        """
        offer = Offer.create(author_id=author_id, **data)
        return self._offers.save(offer)

    def update(self, offer_id: UUID, changes: dict[str, Any]) -> Offer:
        """
        Met a jour partiellement une offre.

        Raises:
            EntityNotFoundError: Si l'offre n'existe pas.
        """
        offer = self._offers.get_by_id(offer_id)
        if not offer:
            raise EntityNotFoundError("Offer", offer_id)

        offer.apply_changes(changes)
        return self._offers.save(offer)

    def delete(self, offer_id: UUID) -> bool:
        """
        Supprime une offre, ses commentaires et ses references favoris.

        Returns:
            True si l'offre existait.
        """
        self._comments.delete_by_offer(offer_id)
        return self._offers.delete(offer_id)

    def update_stats(self, offer_id: UUID, comment_count: int, rating: float) -> None:
        """Ecrit les statistiques recalculees d'une offre."""
        self._offers.update_stats(offer_id, comment_count, rating)

    def is_owner(self, offer_id: UUID, user_id: UUID) -> bool:
        """True si l'utilisateur est l'auteur de l'offre."""
        offer = self._offers.get_by_id(offer_id)
        return offer is not None and offer.is_owned_by(user_id)
