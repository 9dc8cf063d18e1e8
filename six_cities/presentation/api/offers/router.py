"""
Offers Router - Endpoints des offres de location.

Responsabilite unique:
----------------------
Exposer la consultation et la gestion des offres.

Endpoints:
----------
- GET /offers?limit=: Dernieres offres (60 par defaut)
- POST /offers: Publication (authentifie)
- GET /offers/premium/{city}: 3 dernieres offres premium d'une ville
- GET /offers/{offer_id}: Detail
- PUT /offers/{offer_id}: Modification (proprietaire)
- DELETE /offers/{offer_id}: Suppression + commentaires (proprietaire)

isFavorite n'est vrai que pour un appelant authentifie ayant
l'offre dans ses favoris.
"""

from typing import Any, Iterable, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, Request, Response, status

from six_cities.application.services.offer_service import OfferService
from six_cities.domain.entities.offer import Offer
from six_cities.domain.entities.user import User
from six_cities.domain.value_objects.city import City
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
from six_cities.presentation.api.offers.schemas import (
    CreateOfferRequest,
    OfferResponse,
    UpdateOfferRequest,
)
from six_cities.presentation.api.pipeline import Pipeline, RequestContext
from six_cities.presentation.api.schemas import ErrorResponse


logger = get_logger(__name__)

router = APIRouter(prefix="/offers", tags=["Offers"])

OWNER_ERRORS = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


def _to_responses(offers: Iterable[Offer], user: Optional[User]) -> list[OfferResponse]:
    """Serialise une liste d'offres pour l'appelant."""
    favorites = user.favorite_offer_ids if user else set()
    return [OfferResponse.from_entity(o, o.id in favorites) for o in offers]


def find_offer_or_404(container: Container, offer_id: UUID) -> Offer:
    """Charge une offre; 404 si elle a disparu depuis le controle d'existence."""
    offer = container.offer_service.find_by_id(offer_id)
    if offer is None:
        raise NotFoundError(f"Offer with id {offer_id} not found")
    return offer


def _owner_check(container: Container) -> RequireOwnerInterceptor:
    return RequireOwnerInterceptor(
        lambda offer_id, user: container.offer_service.is_owner(offer_id, user.id),
        "offer_id",
    )


def _offer_exists(container: Container) -> DocumentExistsInterceptor:
    return DocumentExistsInterceptor(container.offer_service, "offer_id", "Offer")


@router.get(
    "",
    response_model=list[OfferResponse],
    summary="Liste des offres",
)
def list_offers(
    request: Request,
    limit: int = Query(OfferService.DEFAULT_OFFER_COUNT, ge=1),
    container: Container = Depends(get_container),
):
    """Retourne les offres les plus recentes."""
    def handler(context: RequestContext) -> list[OfferResponse]:
        offers = container.offer_service.find_many(limit=limit)
        return _to_responses(offers, context.user)

    pipeline = Pipeline(container.optional_authenticate)
    return pipeline.run(RequestContext.from_request(request), handler)


@router.post(
    "",
    response_model=OfferResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
    summary="Publier une offre",
)
def create_offer(
    request: Request,
    payload: Any = Body(None),
    container: Container = Depends(get_container),
):
    """
    Publie une offre au nom de l'utilisateur authentifie.

    rating et commentCount demarrent a 0.
    """
    def handler(context: RequestContext) -> OfferResponse:
        dto: CreateOfferRequest = context.dto
        offer = container.offer_service.create(dto.to_domain(), author_id=context.user.id)
        logger.info("offer_created", offer_id=str(offer.id), author_id=str(offer.author_id))
        return OfferResponse.from_entity(offer)

    pipeline = Pipeline(
        container.authenticate,
        ValidateDtoInterceptor(CreateOfferRequest),
    )
    return pipeline.run(RequestContext.from_request(request, body=payload), handler)


@router.get(
    "/premium/{city}",
    response_model=list[OfferResponse],
    responses={400: {"model": ErrorResponse}},
    summary="Offres premium d'une ville",
)
def list_premium_offers(
    city: City,
    request: Request,
    container: Container = Depends(get_container),
):
    """Retourne les 3 dernieres offres premium de la ville."""
    def handler(context: RequestContext) -> list[OfferResponse]:
        offers = container.offer_service.find_premium_by_city(city)
        return _to_responses(offers, context.user)

    pipeline = Pipeline(container.optional_authenticate)
    return pipeline.run(RequestContext.from_request(request), handler)


@router.get(
    "/{offer_id}",
    response_model=OfferResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Detail d'une offre",
)
def get_offer(
    offer_id: str,
    request: Request,
    container: Container = Depends(get_container),
):
    """Retourne une offre."""
    def handler(context: RequestContext) -> OfferResponse:
        offer = find_offer_or_404(container, context.id_of("offer_id"))
        return _to_responses([offer], context.user)[0]

    pipeline = Pipeline(
        ValidateIdInterceptor("offer_id"),
        _offer_exists(container),
        container.optional_authenticate,
    )
    return pipeline.run(RequestContext.from_request(request), handler)


@router.put(
    "/{offer_id}",
    response_model=OfferResponse,
    responses=OWNER_ERRORS,
    summary="Modifier une offre",
)
def update_offer(
    offer_id: str,
    request: Request,
    payload: Any = Body(None),
    container: Container = Depends(get_container),
):
    """Modifie partiellement une offre (proprietaire uniquement)."""
    def handler(context: RequestContext) -> OfferResponse:
        dto: UpdateOfferRequest = context.dto
        offer = container.offer_service.update(context.id_of("offer_id"), dto.to_changes())
        logger.info("offer_updated", offer_id=str(offer.id))
        return _to_responses([offer], context.user)[0]

    pipeline = Pipeline(
        ValidateIdInterceptor("offer_id"),
        _offer_exists(container),
        container.authenticate,
        _owner_check(container),
        ValidateDtoInterceptor(UpdateOfferRequest),
    )
    return pipeline.run(RequestContext.from_request(request, body=payload), handler)


@router.delete(
    "/{offer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=OWNER_ERRORS,
    summary="Supprimer une offre",
)
def delete_offer(
    offer_id: str,
    request: Request,
    container: Container = Depends(get_container),
):
    """Supprime une offre, ses commentaires et ses references favoris."""
    def handler(context: RequestContext) -> Response:
        target_id = context.id_of("offer_id")
        container.offer_service.delete(target_id)
        logger.info("offer_deleted", offer_id=str(target_id), user_id=str(context.user.id))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    pipeline = Pipeline(
        ValidateIdInterceptor("offer_id"),
        _offer_exists(container),
        container.authenticate,
        _owner_check(container),
    )
    return pipeline.run(RequestContext.from_request(request), handler)
