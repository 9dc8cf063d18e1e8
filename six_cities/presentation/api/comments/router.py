"""
Comments Router - Endpoints des commentaires d'une offre.

Endpoints:
----------
- GET /offers/{offer_id}/comments: 50 derniers commentaires
- POST /offers/{offer_id}/comments: Nouveau commentaire (authentifie)

La creation recalcule rating et commentCount de l'offre avant
de repondre.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request, status

from six_cities.infrastructure.container import Container
from six_cities.infrastructure.logging import get_logger
from six_cities.presentation.api.comments.schemas import (
    CommentResponse,
    CreateCommentRequest,
)
from six_cities.presentation.api.dependencies import get_container
from six_cities.presentation.api.interceptors import (
    DocumentExistsInterceptor,
    ValidateDtoInterceptor,
    ValidateIdInterceptor,
)
from six_cities.presentation.api.pipeline import Pipeline, RequestContext
from six_cities.presentation.api.schemas import ErrorResponse


logger = get_logger(__name__)

router = APIRouter(prefix="/offers", tags=["Comments"])


@router.get(
    "/{offer_id}/comments",
    response_model=list[CommentResponse],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Commentaires d'une offre",
)
def list_comments(
    offer_id: str,
    request: Request,
    container: Container = Depends(get_container),
):
    """Retourne les commentaires, plus recents en premier."""
    def handler(context: RequestContext) -> list[CommentResponse]:
        comments = container.comment_service.find_by_offer_id(context.id_of("offer_id"))
        authors = {
            user.id: user
            for user in container.user_service.find_by_ids(c.author_id for c in comments)
        }

        responses = []
        for comment in comments:
            author = authors.get(comment.author_id)
            if author is None:
                logger.warning(
                    "comment_author_missing",
                    comment_id=str(comment.id),
                    author_id=str(comment.author_id),
                )
                continue
            responses.append(CommentResponse.from_entity(comment, author))
        return responses

    pipeline = Pipeline(
        ValidateIdInterceptor("offer_id"),
        DocumentExistsInterceptor(container.offer_service, "offer_id", "Offer"),
    )
    return pipeline.run(RequestContext.from_request(request), handler)


@router.post(
    "/{offer_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Commenter une offre",
)
def create_comment(
    offer_id: str,
    request: Request,
    payload: Any = Body(None),
    container: Container = Depends(get_container),
):
    """
    Publie un commentaire au nom de l'utilisateur authentifie.

    Ordre: id -> existence -> authentification -> validation du corps.
    """
    def handler(context: RequestContext) -> CommentResponse:
        dto: CreateCommentRequest = context.dto
        comment = container.comment_service.create(
            text=dto.text,
            rating=dto.rating,
            author_id=context.user.id,
            offer_id=context.id_of("offer_id"),
        )
        logger.info(
            "comment_created",
            comment_id=str(comment.id),
            offer_id=str(comment.offer_id),
            rating=comment.rating,
        )
        return CommentResponse.from_entity(comment, context.user)

    pipeline = Pipeline(
        ValidateIdInterceptor("offer_id"),
        DocumentExistsInterceptor(container.offer_service, "offer_id", "Offer"),
        container.authenticate,
        ValidateDtoInterceptor(CreateCommentRequest),
    )
    return pipeline.run(RequestContext.from_request(request, body=payload), handler)
