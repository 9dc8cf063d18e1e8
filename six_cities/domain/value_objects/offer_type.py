"""Value Object OfferType - Type de logement propose."""

from enum import Enum

from six_cities.domain.exceptions import InvalidEnumValueError


class OfferType(Enum):
    """Type de logement."""

    APARTMENT = "apartment"
    HOUSE = "house"
    ROOM = "room"
    HOTEL = "hotel"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, value: str) -> "OfferType":
        """Cree un OfferType depuis une chaine."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidEnumValueError(
                "type", value, tuple(t.value for t in cls)
            ) from None
