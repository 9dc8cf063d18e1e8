"""
Favorites Router - Offres favorites.

Endpoints:
----------
- GET /favorites: Favoris de l'utilisateur authentifie
- POST /favorites/{offer_id}: Ajout (idempotent)
- DELETE /favorites/{offer_id}: Retrait (idempotent)

Ajout et retrait renvoient l'offre avec isFavorite a jour.
L'existence de l'offre est verifiee avant l'authentification.
"""

from fastapi import APIRouter, Depends, Request

from six_cities.infrastructure.container import Container
from six_cities.infrastructure.logging import get_logger
from six_cities.presentation.api.dependencies import get_container
from six_cities.presentation.api.interceptors import (
    DocumentExistsInterceptor,
    ValidateIdInterceptor,
)
from six_cities.presentation.api.offers.router import find_offer_or_404
from six_cities.presentation.api.offers.schemas import OfferResponse
from six_cities.presentation.api.pipeline import Pipeline, RequestContext
from six_cities.presentation.api.schemas import ErrorResponse


logger = get_logger(__name__)

router = APIRouter(prefix="/favorites", tags=["Favorites"])

FAVORITE_ERRORS = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


def _favorite_pipeline(container: Container) -> Pipeline:
    return Pipeline(
        ValidateIdInterceptor("offer_id"),
        DocumentExistsInterceptor(container.offer_service, "offer_id", "Offer"),
        container.authenticate,
    )


@router.get(
    "",
    response_model=list[OfferResponse],
    responses={401: {"model": ErrorResponse}},
    summary="Mes favoris",
)
def list_favorites(
    request: Request,
    container: Container = Depends(get_container),
):
    """Retourne les offres favorites, plus recentes en premier."""
    def handler(context: RequestContext) -> list[OfferResponse]:
        offers = container.offer_service.find_favorites(context.user.id)
        return [OfferResponse.from_entity(offer, is_favorite=True) for offer in offers]

    pipeline = Pipeline(container.authenticate)
    return pipeline.run(RequestContext.from_request(request), handler)


@router.post(
    "/{offer_id}",
    response_model=OfferResponse,
    responses=FAVORITE_ERRORS,
    summary="Ajouter aux favoris",
)
def add_favorite(
    offer_id: str,
    request: Request,
    container: Container = Depends(get_container),
):
    """Ajoute l'offre aux favoris (sans effet si deja presente)."""
    def handler(context: RequestContext) -> OfferResponse:
        target_id = context.id_of("offer_id")
        added = container.user_service.add_to_favorites(context.user.id, target_id)
        logger.info(
            "favorite_added",
            user_id=str(context.user.id),
            offer_id=str(target_id),
            changed=added,
        )
        offer = find_offer_or_404(container, target_id)
        return OfferResponse.from_entity(offer, is_favorite=True)

    return _favorite_pipeline(container).run(RequestContext.from_request(request), handler)


@router.delete(
    "/{offer_id}",
    response_model=OfferResponse,
    responses=FAVORITE_ERRORS,
    summary="Retirer des favoris",
)
def remove_favorite(
    offer_id: str,
    request: Request,
    container: Container = Depends(get_container),
):
    """Retire l'offre des favoris (sans erreur si absente)."""
    def handler(context: RequestContext) -> OfferResponse:
        target_id = context.id_of("offer_id")
        removed = container.user_service.remove_from_favorites(context.user.id, target_id)
        logger.info(
            "favorite_removed",
            user_id=str(context.user.id),
            offer_id=str(target_id),
            changed=removed,
        )
        offer = find_offer_or_404(container, target_id)
        return OfferResponse.from_entity(offer, is_favorite=False)

    return _favorite_pipeline(container).run(RequestContext.from_request(request), handler)
