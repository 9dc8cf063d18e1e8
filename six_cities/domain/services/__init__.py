"""
Services du domaine.

Logique metier pure, sans dependance d'infrastructure.
"""

from six_cities.domain.services.offer_stats_calculator import (
    OfferStats,
    OfferStatsCalculator,
)

__all__ = ["OfferStats", "OfferStatsCalculator"]
