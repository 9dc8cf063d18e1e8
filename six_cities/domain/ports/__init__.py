"""
Ports du domaine (interfaces).

Les ports definissent les contrats implementes par
la couche infrastructure.
"""

from six_cities.domain.ports.comment_repository import CommentRepository
from six_cities.domain.ports.file_storage import FileStorage, StoredFile
from six_cities.domain.ports.offer_repository import OfferRepository
from six_cities.domain.ports.user_repository import UserRepository

__all__ = [
    "CommentRepository",
    "FileStorage",
    "OfferRepository",
    "StoredFile",
    "UserRepository",
]
