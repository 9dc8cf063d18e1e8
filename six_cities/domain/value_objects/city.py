"""
Value Object City - Villes couvertes par la plateforme.

Seules six villes europeennes sont proposees a la location.
"""

from enum import Enum

from six_cities.domain.exceptions import InvalidEnumValueError


class City(Enum):
    """Ville d'une offre de location."""

    PARIS = "Paris"
    COLOGNE = "Cologne"
    BRUSSELS = "Brussels"
    AMSTERDAM = "Amsterdam"
    HAMBURG = "Hamburg"
    DUSSELDORF = "Dusseldorf"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, value: str) -> "City":
        """
        Cree une City depuis son nom.

        Raises:
            InvalidEnumValueError: Si la ville n'est pas couverte.
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidEnumValueError(
                "city", value, tuple(c.value for c in cls)
            ) from None
