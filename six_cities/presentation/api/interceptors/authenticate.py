"""
Intercepteurs d'authentification.

Responsabilite unique:
----------------------
Extraire le bearer token du header Authorization, le verifier,
resoudre l'utilisateur et l'attacher au contexte.

- AuthenticateInterceptor: 401 si token absent, mal forme, expire,
  ou si l'utilisateur n'existe plus.
- OptionalAuthenticateInterceptor: n'echoue jamais; la requete
  reste anonyme si le token est absent ou invalide. Utilise la ou
  l'authentification change seulement la forme de la reponse
  (calcul de isFavorite).
"""

from typing import Any, Optional

from six_cities.application.services.user_service import UserService
from six_cities.domain.entities.user import User
from six_cities.presentation.api.auth.jwt_service import JWTService
from six_cities.presentation.api.errors import UnauthorizedError
from six_cities.presentation.api.pipeline import Handler, Interceptor, RequestContext


BEARER_PREFIX = "bearer "


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Extrait le token d'un header "Bearer <token>".

    Returns:
        Token, ou None si le header est absent ou mal forme.
    """
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):].strip()
    return token or None


class AuthenticateInterceptor(Interceptor):
    """
    Exige un utilisateur authentifie.

    Args:
        jwt_service: Verification des tokens.
        user_service: Resolution de l'utilisateur.
    """

    def __init__(self, jwt_service: JWTService, user_service: UserService):
        self._jwt = jwt_service
        self._users = user_service

    def resolve_user(self, context: RequestContext) -> Optional[User]:
        """Resout l'utilisateur du token, None si impossible."""
        token = extract_bearer_token(context.headers.get("authorization"))
        if not token:
            return None

        payload = self._jwt.verify_token(token)
        if not payload:
            return None

        return self._users.find_by_id(payload.id)

    def handle(self, context: RequestContext, call_next: Handler) -> Any:
        user = self.resolve_user(context)
        if user is None:
            raise UnauthorizedError()
        context.user = user
        return call_next(context)


class OptionalAuthenticateInterceptor(AuthenticateInterceptor):
    """Attache l'utilisateur s'il est resolu, sans jamais echouer."""

    def handle(self, context: RequestContext, call_next: Handler) -> Any:
        context.user = self.resolve_user(context)
        return call_next(context)
