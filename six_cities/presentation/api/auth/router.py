"""
Auth Router - Endpoints d'authentification.

Responsabilite unique:
----------------------
Exposer login, statut de session et logout.

Endpoints:
----------
- POST /auth/login: Authentification, retourne {token, user}
- GET /auth/status: Profil de l'utilisateur du token
- POST /auth/logout: Fin de session (204)

Les tokens sont sans etat: logout ne revoque rien cote serveur,
le client oublie simplement son token.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request, Response, status

from six_cities.infrastructure.container import Container
from six_cities.infrastructure.logging import get_logger
from six_cities.presentation.api.auth.schemas import LoginRequest, LoginResponse
from six_cities.presentation.api.dependencies import get_container
from six_cities.presentation.api.errors import UnauthorizedError
from six_cities.presentation.api.interceptors import ValidateDtoInterceptor
from six_cities.presentation.api.pipeline import Pipeline, RequestContext
from six_cities.presentation.api.schemas import ErrorResponse
from six_cities.presentation.api.users.schemas import UserResponse


logger = get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
    summary="Authentification",
    description="Retourne un token bearer et le profil utilisateur.",
)
def login(
    request: Request,
    payload: Any = Body(None),
    container: Container = Depends(get_container),
):
    """
    Authentifie un utilisateur.

    Raises:
        401 si email ou mot de passe invalide.
    """
    def handler(context: RequestContext) -> LoginResponse:
        dto: LoginRequest = context.dto
        user = container.user_service.verify_credentials(dto.email, dto.password)
        if not user:
            logger.info("login_failed", email=dto.email.lower())
            raise UnauthorizedError("Invalid email or password")

        logger.info("user_logged_in", user_id=str(user.id))
        return LoginResponse(
            token=container.jwt_service.create_token(user),
            user=UserResponse.from_entity(user),
        )

    pipeline = Pipeline(ValidateDtoInterceptor(LoginRequest))
    return pipeline.run(RequestContext.from_request(request, body=payload), handler)


@router.get(
    "/status",
    response_model=UserResponse,
    responses={401: {"model": ErrorResponse}},
    summary="Statut de session",
)
def auth_status(
    request: Request,
    container: Container = Depends(get_container),
):
    """Retourne l'utilisateur associe au token."""
    pipeline = Pipeline(container.authenticate)
    return pipeline.run(
        RequestContext.from_request(request),
        lambda context: UserResponse.from_entity(context.user),
    )


@router.post(
    "/logout",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={401: {"model": ErrorResponse}},
    summary="Deconnexion",
)
def logout(
    request: Request,
    container: Container = Depends(get_container),
):
    """Termine la session (le client jette son token)."""
    def handler(context: RequestContext) -> Response:
        logger.info("user_logged_out", user_id=str(context.user.id))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    pipeline = Pipeline(container.authenticate)
    return pipeline.run(RequestContext.from_request(request), handler)
