"""
Service de calcul des statistiques d'une offre.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional


@dataclass(frozen=True)
class OfferStats:
    """
    Agregats derives des commentaires d'une offre.

    Attributes:
        comment_count: Nombre de commentaires.
        rating: Moyenne des notes arrondie a une decimale (0 si aucun).
    """

    comment_count: int
    rating: float


class OfferStatsCalculator:
    """
    Calcule rating et comment_count d'une offre.

    L'arrondi est fait au dixieme, demi vers le haut
    (4.25 -> 4.3), sur la representation decimale de la moyenne.

    Example:
        >>> OfferStatsCalculator.from_aggregates(3, 4.666)
        OfferStats(comment_count=3, rating=4.7)
    """

    @staticmethod
    def round_rating(average: Optional[float]) -> float:
        """Arrondit une moyenne a une decimale, 0.0 si absente."""
        if average is None:
            return 0.0
        rounded = Decimal(str(average)).quantize(
            Decimal("0.1"), rounding=ROUND_HALF_UP
        )
        return float(rounded)

    @classmethod
    def from_aggregates(
        cls,
        comment_count: int,
        average: Optional[float],
    ) -> OfferStats:
        """Construit les stats depuis un count et une moyenne SQL."""
        if comment_count == 0:
            return OfferStats(comment_count=0, rating=0.0)
        return OfferStats(
            comment_count=comment_count,
            rating=cls.round_rating(average),
        )
