"""
Value Object UserType - Type de compte utilisateur.

Types disponibles:
------------------
- pro: Professionnel (agence, loueur)
- normal: Particulier
"""

from enum import Enum

from six_cities.domain.exceptions import InvalidEnumValueError


class UserType(Enum):
    """Type de compte d'un utilisateur."""

    PRO = "pro"
    NORMAL = "normal"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, value: str) -> "UserType":
        """
        Cree un UserType depuis une chaine.

        Raises:
            InvalidEnumValueError: Si le type est inconnu.
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidEnumValueError(
                "type", value, tuple(t.value for t in cls)
            ) from None
