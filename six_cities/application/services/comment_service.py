"""
CommentService - Commentaires et statistiques des offres.

Responsabilite unique:
----------------------
Creer les commentaires et maintenir les champs derives de l'offre
commentee (rating, comment_count).

Consistance:
------------
La creation du commentaire et l'ecriture des statistiques sont
deux ecritures distinctes, sans transaction commune. Si la seconde
echoue, les statistiques restent perimees jusqu'au prochain
commentaire sur la meme offre, qui recalcule tout depuis la base.
"""

from typing import List
from uuid import UUID

from six_cities.application.services.offer_service import OfferService
from six_cities.domain.entities.comment import Comment
from six_cities.domain.ports.comment_repository import CommentRepository
from six_cities.domain.services.offer_stats_calculator import (
    OfferStats,
    OfferStatsCalculator,
)


class CommentService:
    """
    Service applicatif des commentaires.

    Example:
        >>> service = CommentService(comment_repo, offer_service)
        >>> service.create("Great place to stay", 5, author_id, offer_id)
    """

    DEFAULT_COMMENT_COUNT = 50

    def __init__(self, comment_repo: CommentRepository, offer_service: OfferService):
        self._comments = comment_repo
        self._offers = offer_service

    def create(
        self,
        text: str,
        rating: int,
        author_id: UUID,
        offer_id: UUID,
    ) -> Comment:
        """
        Cree un commentaire puis recalcule les stats de l'offre.

        Returns:
            Commentaire persiste.
        """
        comment = Comment.create(
            text=text,
            rating=rating,
            author_id=author_id,
            offer_id=offer_id,
        )
        saved = self._comments.save(comment)
        self.recalculate_offer_stats(offer_id)
        return saved

    def recalculate_offer_stats(self, offer_id: UUID) -> OfferStats:
        """Recalcule depuis la base et ecrit rating / comment_count."""
        stats = OfferStatsCalculator.from_aggregates(
            self.count_by_offer_id(offer_id),
            self.calculate_average_rating(offer_id),
        )
        self._offers.update_stats(offer_id, stats.comment_count, stats.rating)
        return stats

    def find_by_offer_id(
        self,
        offer_id: UUID,
        limit: int = DEFAULT_COMMENT_COUNT,
    ) -> List[Comment]:
        """Liste les commentaires d'une offre, plus recents en premier."""
        return self._comments.find_by_offer(offer_id, limit)

    def count_by_offer_id(self, offer_id: UUID) -> int:
        """Nombre de commentaires d'une offre."""
        return self._comments.count_by_offer(offer_id)

    def calculate_average_rating(self, offer_id: UUID) -> float | None:
        """Moyenne brute des notes, None si aucun commentaire."""
        return self._comments.average_rating(offer_id)

    def delete_by_offer_id(self, offer_id: UUID) -> int:
        """Supprime les commentaires d'une offre."""
        return self._comments.delete_by_offer(offer_id)
