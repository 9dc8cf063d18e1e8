"""
Value Object Amenity - Equipements d'un logement.

Une offre declare un sous-ensemble non vide de ces equipements,
sans doublon.
"""

from enum import Enum
from typing import Iterable

from six_cities.domain.exceptions import InvalidEntityError, InvalidEnumValueError


class Amenity(Enum):
    """Equipement disponible dans un logement."""

    BREAKFAST = "Breakfast"
    AIR_CONDITIONING = "Air conditioning"
    LAPTOP_FRIENDLY_WORKSPACE = "Laptop friendly workspace"
    BABY_SEAT = "Baby seat"
    WASHER = "Washer"
    TOWELS = "Towels"
    FRIDGE = "Fridge"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, value: str) -> "Amenity":
        """Cree un Amenity depuis son libelle."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidEnumValueError(
                "amenities", value, tuple(a.value for a in cls)
            ) from None

    @classmethod
    def parse_many(cls, values: Iterable["Amenity | str"]) -> list["Amenity"]:
        """
        Convertit une liste de libelles en equipements.

        L'ordre est conserve, les doublons sont refuses.

        Raises:
            InvalidEntityError: Si la liste est vide ou contient un doublon.
        """
        amenities = [
            v if isinstance(v, cls) else cls.from_string(v) for v in values
        ]
        if not amenities:
            raise InvalidEntityError(
                "amenities must contain at least one item", field="amenities"
            )
        if len(set(amenities)) != len(amenities):
            raise InvalidEntityError(
                "amenities must not contain duplicates", field="amenities"
            )
        return amenities
