"""
Erreurs HTTP typees.

Responsabilite unique:
----------------------
Definir la taxonomie des erreurs renvoyees au client. Chaque erreur
porte son code HTTP, un message et des details optionnels. Elles
sont levees par les intercepteurs et les handlers, puis traduites
en reponse JSON par le filtre d'exceptions.

Format de reponse:
------------------
    {"error": "Offer with id ... not found"}
    {"error": "Validation failed", "details": [{"field": ..., "messages": [...]}]}
"""

from typing import Any, Optional

from fastapi import status


class HttpException(Exception):
    """Erreur HTTP de base, attendue (non fautive)."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal Server Error"

    def __init__(self, message: Optional[str] = None, details: Any = None) -> None:
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Corps JSON de la reponse."""
        body: dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class BadRequestError(HttpException):
    """400 - Entree invalide."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad Request"


class UnauthorizedError(HttpException):
    """401 - Credential absent ou invalide."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class ForbiddenError(HttpException):
    """403 - Authentifie mais non proprietaire de la ressource."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFoundError(HttpException):
    """404 - Ressource inexistante."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not Found"


class ConflictError(HttpException):
    """409 - Violation d'unicite."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


def validation_error(errors: list[dict[str, Any]]) -> BadRequestError:
    """
    Construit une erreur 400 depuis une liste d'erreurs pydantic.

    Les erreurs sont groupees par champ (chemin pointe, en camelCase
    tel que recu). Le prefixe "body" ajoute par FastAPI est retire.

    Args:
        errors: Sortie de ValidationError.errors().

    Returns:
        BadRequestError "Validation failed" avec details
        [{"field": ..., "messages": [...]}].
    """
    grouped: dict[str, list[str]] = {}
    for error in errors:
        location = [str(part) for part in error.get("loc", ())]
        if location and location[0] == "body":
            location = location[1:]
        field = ".".join(location) or "body"
        grouped.setdefault(field, []).append(error.get("msg", "Invalid value"))

    details = [
        {"field": field, "messages": messages}
        for field, messages in grouped.items()
    ]
    return BadRequestError("Validation failed", details=details)
