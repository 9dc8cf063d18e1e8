"""
RequireOwnerInterceptor - Controle de propriete.

Place apres l'authentification: 403 si l'utilisateur authentifie
n'est pas proprietaire de la ressource designee par la route.
"""

from typing import Any, Callable
from uuid import UUID

from six_cities.domain.entities.user import User
from six_cities.presentation.api.errors import ForbiddenError
from six_cities.presentation.api.pipeline import Handler, Interceptor, RequestContext


OwnershipCheck = Callable[[UUID, User], bool]


class RequireOwnerInterceptor(Interceptor):
    """
    Verifie que l'utilisateur possede la ressource.

    Args:
        is_owner: Fonction (resource_id, user) -> bool.
        param: Parametre de route portant l'ID de la ressource.

    Example:
        RequireOwnerInterceptor(
            lambda offer_id, user: offer_service.is_owner(offer_id, user.id),
            "offer_id",
        )
    """

    def __init__(self, is_owner: OwnershipCheck, param: str):
        self.is_owner = is_owner
        self.param = param

    def handle(self, context: RequestContext, call_next: Handler) -> Any:
        user = context.require_user()
        if not self.is_owner(context.id_of(self.param), user):
            raise ForbiddenError()
        return call_next(context)
