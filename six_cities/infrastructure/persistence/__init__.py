"""
Persistence SQLAlchemy.

Adapters implementant les ports repository du domaine.
"""

from six_cities.infrastructure.persistence.database import DatabaseManager
from six_cities.infrastructure.persistence.sqlalchemy_comment_repository import (
    SqlAlchemyCommentRepository,
)
from six_cities.infrastructure.persistence.sqlalchemy_offer_repository import (
    SqlAlchemyOfferRepository,
)
from six_cities.infrastructure.persistence.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)

__all__ = [
    "DatabaseManager",
    "SqlAlchemyCommentRepository",
    "SqlAlchemyOfferRepository",
    "SqlAlchemyUserRepository",
]
