"""
Users Router - Endpoints utilisateurs.

Responsabilite unique:
----------------------
Exposer l'inscription, la consultation d'un profil et l'upload
d'avatar.

Endpoints:
----------
- POST /users: Inscription (201, 409 si email deja pris)
- GET /users/{user_id}: Profil (404 si absent)
- POST /users/{user_id}/avatar: Upload multipart, champ "avatar"
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, File, Request, UploadFile, status

from six_cities.infrastructure.container import Container
from six_cities.infrastructure.logging import get_logger
from six_cities.presentation.api.dependencies import get_container
from six_cities.presentation.api.errors import NotFoundError
from six_cities.presentation.api.interceptors import (
    DocumentExistsInterceptor,
    RequireOwnerInterceptor,
    ValidateDtoInterceptor,
    ValidateIdInterceptor,
)
from six_cities.presentation.api.pipeline import Pipeline, RequestContext
from six_cities.presentation.api.schemas import ErrorResponse
from six_cities.presentation.api.users.schemas import CreateUserRequest, UserResponse


logger = get_logger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Inscription",
)
def create_user(
    request: Request,
    payload: Any = Body(None),
    container: Container = Depends(get_container),
):
    """
    Inscrit un nouvel utilisateur.

    Raises:
        409 si l'email est deja utilise.
    """
    def handler(context: RequestContext) -> UserResponse:
        dto: CreateUserRequest = context.dto
        user = container.user_service.create(
            name=dto.name,
            email=dto.email,
            password=dto.password,
            user_type=dto.type,
        )
        logger.info("user_created", user_id=str(user.id), user_type=str(user.type))
        return UserResponse.from_entity(user)

    pipeline = Pipeline(ValidateDtoInterceptor(CreateUserRequest))
    return pipeline.run(RequestContext.from_request(request, body=payload), handler)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Profil utilisateur",
)
def get_user(
    user_id: str,
    request: Request,
    container: Container = Depends(get_container),
):
    """Retourne le profil public d'un utilisateur."""
    def handler(context: RequestContext) -> UserResponse:
        target_id = context.id_of("user_id")
        user = container.user_service.find_by_id(target_id)
        if user is None:
            raise NotFoundError(f"User with id {target_id} not found")
        return UserResponse.from_entity(user)

    pipeline = Pipeline(
        ValidateIdInterceptor("user_id"),
        DocumentExistsInterceptor(container.user_service, "user_id", "User"),
    )
    return pipeline.run(RequestContext.from_request(request), handler)


@router.post(
    "/{user_id}/avatar",
    response_model=UserResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Upload d'avatar",
    description="Multipart, champ 'avatar', JPEG ou PNG, 5MB maximum.",
)
def upload_avatar(
    user_id: str,
    request: Request,
    avatar: Optional[UploadFile] = File(None),
    container: Container = Depends(get_container),
):
    """
    Remplace l'avatar de l'utilisateur authentifie.

    Ordre: id -> existence -> authentification -> propriete -> upload.
    """
    def handler(context: RequestContext) -> UserResponse:
        previous_avatar = context.user.avatar
        try:
            user = container.user_service.update_avatar(
                context.id_of("user_id"),
                context.stored_file.url,
            )
        except Exception:
            # Le fichier vient d'etre ecrit: pas d'orphelin sur disque
            container.file_storage.delete(context.stored_file.filename)
            raise
        _remove_previous_avatar(container, previous_avatar)
        logger.info("avatar_updated", user_id=str(user.id), avatar=user.avatar)
        return UserResponse.from_entity(user)

    pipeline = Pipeline(
        ValidateIdInterceptor("user_id"),
        DocumentExistsInterceptor(container.user_service, "user_id", "User"),
        container.authenticate,
        RequireOwnerInterceptor(lambda target_id, user: user.id == target_id, "user_id"),
        container.upload_avatar,
    )
    context = RequestContext.from_request(request, files={"avatar": avatar})
    return pipeline.run(context, handler)


def _remove_previous_avatar(container: Container, avatar: Optional[str]) -> None:
    """Supprime l'ancien fichier s'il a ete servi par notre stockage."""
    prefix = container.settings.upload_url_prefix.rstrip("/") + "/"
    if avatar and avatar.startswith(prefix):
        container.file_storage.delete(avatar[len(prefix):])
