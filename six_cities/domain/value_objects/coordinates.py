"""
Value Object Coordinates - Position GPS d'un logement.
"""

from dataclasses import dataclass

from six_cities.domain.exceptions import InvalidCoordinatesError


@dataclass(frozen=True, slots=True)
class Coordinates:
    """
    Coordonnees GPS (WGS84).

    Attributes:
        latitude: Latitude en degres, entre -90 et 90.
        longitude: Longitude en degres, entre -180 et 180.

    Example:
        >>> Coordinates(latitude=48.85661, longitude=2.351499)
        Coordinates(latitude=48.85661, longitude=2.351499)
    """

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Valide les bornes."""
        if not -90 <= self.latitude <= 90 or not -180 <= self.longitude <= 180:
            raise InvalidCoordinatesError(self.latitude, self.longitude)

    def to_dict(self) -> dict[str, float]:
        """Retourne les coordonnees sous forme de dict."""
        return {"latitude": self.latitude, "longitude": self.longitude}
