"""
Value Objects du domaine.

Les Value Objects sont des objets immuables qui encapsulent
des valeurs avec leur logique de validation.
"""

from six_cities.domain.value_objects.amenity import Amenity
from six_cities.domain.value_objects.city import City
from six_cities.domain.value_objects.coordinates import Coordinates
from six_cities.domain.value_objects.offer_type import OfferType
from six_cities.domain.value_objects.user_type import UserType

__all__ = [
    "Amenity",
    "City",
    "Coordinates",
    "OfferType",
    "UserType",
]
