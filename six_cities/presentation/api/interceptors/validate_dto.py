"""
ValidateDtoInterceptor - Validation explicite du corps de requete.

Valide le corps JSON brut avec un schema pydantic et range le DTO
type dans context.dto. Un corps qui n'est pas un objet echoue ici.
Echec: 400 "Validation failed" avec la liste
des erreurs par champ.
"""

from typing import Any

from pydantic import BaseModel, ValidationError

from six_cities.presentation.api.errors import validation_error
from six_cities.presentation.api.pipeline import Handler, Interceptor, RequestContext


class ValidateDtoInterceptor(Interceptor):
    """
    Valide context.body contre un schema.

    Args:
        schema: Classe pydantic du DTO attendu.
    """

    def __init__(self, schema: type[BaseModel]):
        self.schema = schema

    def handle(self, context: RequestContext, call_next: Handler) -> Any:
        try:
            body = {} if context.body is None else context.body
            context.dto = self.schema.model_validate(body)
        except ValidationError as e:
            raise validation_error(e.errors()) from None
        return call_next(context)
