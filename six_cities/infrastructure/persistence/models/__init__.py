"""
Modeles SQLAlchemy - exports centralises.

Organisation par domaine:
- base: Base declarative
- user_models: Utilisateurs et favoris
- offer_models: Offres et commentaires
"""

from six_cities.infrastructure.persistence.models.base import Base
from six_cities.infrastructure.persistence.models.offer_models import (
    CommentModel,
    OfferModel,
)
from six_cities.infrastructure.persistence.models.user_models import (
    FavoriteModel,
    UserModel,
)

__all__ = [
    "Base",
    "CommentModel",
    "FavoriteModel",
    "OfferModel",
    "UserModel",
]
