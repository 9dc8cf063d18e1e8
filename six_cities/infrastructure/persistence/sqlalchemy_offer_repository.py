"""
SqlAlchemyOfferRepository - Adapter SQLAlchemy pour les offres.

Implemente le port OfferRepository. Les listes sont triees par
date de publication decroissante.
"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import desc

from six_cities.domain.entities.offer import Offer
from six_cities.domain.ports.offer_repository import OfferRepository
from six_cities.domain.value_objects import Amenity, City, Coordinates, OfferType
from six_cities.infrastructure.persistence.database import DatabaseManager
from six_cities.infrastructure.persistence.models import FavoriteModel, OfferModel


class SqlAlchemyOfferRepository(OfferRepository):
    """
    Repository SQLAlchemy pour les offres.

    Attributes:
        db: DatabaseManager pour les sessions.
    """

    def __init__(self, db: DatabaseManager):
        self._db = db

    def save(self, offer: Offer) -> Offer:
        """Cree ou met a jour une offre."""
        with self._db.get_session() as session:
            model = session.get(OfferModel, offer.id)
            if model is None:
                model = OfferModel(id=offer.id, created_at=offer.created_at)
                session.add(model)
            self._apply(model, offer)
        return offer

    def get_by_id(self, offer_id: UUID) -> Optional[Offer]:
        """Recupere une offre par ID."""
        with self._db.get_session() as session:
            model = session.get(OfferModel, offer_id)
            return self._to_entity(model) if model else None

    def exists(self, offer_id: UUID) -> bool:
        """Verifie l'existence d'une offre."""
        with self._db.get_session() as session:
            return session.query(
                session.query(OfferModel).filter(OfferModel.id == offer_id).exists()
            ).scalar()

    def find_latest(self, limit: int) -> List[Offer]:
        """Offres les plus recentes."""
        with self._db.get_session() as session:
            models = (
                session.query(OfferModel)
                .order_by(desc(OfferModel.date))
                .limit(limit)
                .all()
            )
            return [self._to_entity(m) for m in models]

    def find_premium_by_city(self, city: City, limit: int) -> List[Offer]:
        """Offres premium d'une ville."""
        with self._db.get_session() as session:
            models = (
                session.query(OfferModel)
                .filter(
                    OfferModel.city == city.value,
                    OfferModel.is_premium.is_(True),
                )
                .order_by(desc(OfferModel.date))
                .limit(limit)
                .all()
            )
            return [self._to_entity(m) for m in models]

    def find_favorites_of(self, user_id: UUID) -> List[Offer]:
        """Offres favorites d'un utilisateur."""
        with self._db.get_session() as session:
            models = (
                session.query(OfferModel)
                .join(FavoriteModel, FavoriteModel.offer_id == OfferModel.id)
                .filter(FavoriteModel.user_id == user_id)
                .order_by(desc(OfferModel.date))
                .all()
            )
            return [self._to_entity(m) for m in models]

    def update_stats(self, offer_id: UUID, comment_count: int, rating: float) -> None:
        """Ecrit rating et comment_count sans toucher au reste."""
        with self._db.get_session() as session:
            session.query(OfferModel).filter(OfferModel.id == offer_id).update(
                {
                    OfferModel.comment_count: comment_count,
                    OfferModel.rating: rating,
                },
                synchronize_session=False,
            )

    def delete(self, offer_id: UUID) -> bool:
        """Supprime l'offre et la retire des favoris."""
        with self._db.get_session() as session:
            session.query(FavoriteModel).filter(
                FavoriteModel.offer_id == offer_id
            ).delete(synchronize_session=False)
            deleted = session.query(OfferModel).filter(
                OfferModel.id == offer_id
            ).delete(synchronize_session=False)
            return deleted > 0

    @staticmethod
    def _apply(model: OfferModel, offer: Offer) -> None:
        """Copie les attributs de l'entite sur le model."""
        model.title = offer.title
        model.description = offer.description
        model.date = offer.date
        model.city = offer.city.value
        model.preview = offer.preview
        model.images = list(offer.images)
        model.is_premium = offer.is_premium
        model.type = offer.type.value
        model.bedrooms = offer.bedrooms
        model.guests = offer.guests
        model.price = offer.price
        model.amenities = [a.value for a in offer.amenities]
        model.latitude = offer.coordinates.latitude
        model.longitude = offer.coordinates.longitude
        model.author_id = offer.author_id
        model.rating = offer.rating
        model.comment_count = offer.comment_count
        model.updated_at = offer.updated_at

    def _to_entity(self, model: OfferModel) -> Offer:
        """Convertit un model en entite."""
        return Offer(
            id=model.id,
            title=model.title,
            description=model.description,
            date=model.date,
            city=City.from_string(model.city),
            preview=model.preview,
            images=list(model.images or []),
            is_premium=model.is_premium,
            type=OfferType.from_string(model.type),
            bedrooms=model.bedrooms,
            guests=model.guests,
            price=model.price,
            amenities=[Amenity.from_string(a) for a in model.amenities or []],
            coordinates=Coordinates(
                latitude=model.latitude,
                longitude=model.longitude,
            ),
            author_id=model.author_id,
            rating=model.rating or 0.0,
            comment_count=model.comment_count or 0,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
