"""
Entites du domaine.

Les entites ont une identite propre (UUID) et un cycle de vie.
"""

from six_cities.domain.entities.comment import Comment
from six_cities.domain.entities.offer import Offer
from six_cities.domain.entities.user import User

__all__ = ["Comment", "Offer", "User"]
