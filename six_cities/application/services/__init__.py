"""
Services applicatifs.

Un service par entite, construits explicitement par le Container.
"""

from six_cities.application.services.comment_service import CommentService
from six_cities.application.services.offer_service import OfferService
from six_cities.application.services.user_service import UserService

__all__ = ["CommentService", "OfferService", "UserService"]
