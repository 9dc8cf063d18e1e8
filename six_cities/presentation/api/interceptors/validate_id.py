"""
ValidateIdInterceptor - Format des identifiants de route.

Rejette en 400 un parametre de route qui n'est pas un UUID, avant
toute requete en base. L'UUID converti est range dans context.ids.
"""

from typing import Any
from uuid import UUID

from six_cities.presentation.api.errors import BadRequestError
from six_cities.presentation.api.pipeline import Handler, Interceptor, RequestContext


class ValidateIdInterceptor(Interceptor):
    """
    Verifie qu'un parametre de route est un UUID valide.

    Args:
        param: Nom du parametre de route (ex: "offer_id").
    """

    def __init__(self, param: str):
        self.param = param

    def handle(self, context: RequestContext, call_next: Handler) -> Any:
        raw = context.path_params.get(self.param)
        if not raw:
            raise BadRequestError(f"Missing route parameter '{self.param}'")
        try:
            context.ids[self.param] = UUID(raw)
        except ValueError:
            raise BadRequestError(f"Invalid id format: '{raw}'") from None
        return call_next(context)
