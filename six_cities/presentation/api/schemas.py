"""
Schemas communs - Base camelCase et reponses d'erreur.

Responsabilite unique:
----------------------
Fournir la configuration partagee des DTO: noms de champs en
camelCase sur le fil, snake_case en Python.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base des DTO exposes par l'API.

    Les champs sont serialises en camelCase (is_premium -> isPremium)
    et acceptes sous les deux formes en entree.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ErrorResponse(BaseModel):
    """
    Reponse d'erreur standardisee.

    Example:
        {"error": "Validation failed",
         "details": [{"field": "email", "messages": ["..."]}]}
    """

    error: str
    details: Optional[Any] = None
