"""
Exceptions metier du domaine.

Ces exceptions representent des violations des regles metier
et sont independantes de l'infrastructure. La couche presentation
les traduit en erreurs HTTP.
"""

from typing import Any


class DomainException(Exception):
    """Exception de base pour toutes les erreurs du domaine."""

    def __init__(self, message: str, code: str | None = None) -> None:
        """
        Initialise une exception du domaine.

        Args:
            message: Message d'erreur descriptif.
            code: Code d'erreur optionnel pour identification programmatique.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidEntityError(DomainException):
    """Leve quand une entite viole un invariant metier."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="INVALID_ENTITY")
        self.field = field


class InvalidEnumValueError(InvalidEntityError):
    """Leve quand une valeur n'appartient pas a une enumeration fermee."""

    def __init__(self, field: str, value: Any, allowed: tuple[str, ...]) -> None:
        super().__init__(
            f"{field} invalide: '{value}'. "
            f"Valeurs acceptees: {', '.join(allowed)}",
            field=field,
        )
        self.invalid_value = value


class InvalidCoordinatesError(InvalidEntityError):
    """Leve quand des coordonnees GPS sont hors limites."""

    def __init__(self, latitude: float, longitude: float) -> None:
        super().__init__(
            f"Coordonnees invalides: latitude={latitude}, longitude={longitude}",
            field="coordinates",
        )
        self.latitude = latitude
        self.longitude = longitude


class EntityNotFoundError(DomainException):
    """Leve quand une entite n'est pas trouvee."""

    def __init__(self, entity: str, entity_id: Any) -> None:
        super().__init__(
            f"{entity} with id {entity_id} not found",
            code="NOT_FOUND",
        )
        self.entity = entity
        self.entity_id = entity_id


class EmailAlreadyExistsError(DomainException):
    """Leve quand un email est deja utilise par un autre compte."""

    def __init__(self, email: str) -> None:
        super().__init__(
            f"User with email {email} already exists",
            code="EMAIL_ALREADY_EXISTS",
        )
        self.email = email
