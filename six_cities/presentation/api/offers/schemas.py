"""
Offers Schemas - Modeles Pydantic pour les offres.

Responsabilite unique:
----------------------
Valider les corps de creation / modification d'offre et
serialiser les offres (camelCase, isFavorite calcule par requete).

rating et commentCount ne sont jamais acceptes en entree.
"""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import Field, field_validator

from six_cities.domain.entities.offer import Offer
from six_cities.domain.value_objects import Amenity, City, Coordinates, OfferType
from six_cities.presentation.api.schemas import CamelModel


class CoordinatesSchema(CamelModel):
    """Position GPS."""

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


def _unique_amenities(value: Optional[list[Amenity]]) -> Optional[list[Amenity]]:
    if value is not None and len(set(value)) != len(value):
        raise ValueError("amenities must not contain duplicates")
    return value


class CreateOfferRequest(CamelModel):
    """
    Requete de publication d'offre.

    Example:
        {
            "title": "Beautiful & luxurious studio",
            "description": "A quiet cozy and picturesque place...",
            "city": "Amsterdam",
            "preview": "https://.../preview.jpg",
            "images": ["1.jpg", "2.jpg", "3.jpg", "4.jpg", "5.jpg", "6.jpg"],
            "isPremium": true,
            "type": "apartment",
            "bedrooms": 3,
            "guests": 4,
            "price": 120,
            "amenities": ["Breakfast", "Washer"],
            "coordinates": {"latitude": 52.370216, "longitude": 4.895168}
        }
    """

    title: str = Field(..., min_length=10, max_length=100)
    description: str = Field(..., min_length=20, max_length=1024)
    city: City
    preview: str = Field(..., min_length=1, max_length=500)
    images: list[str] = Field(..., min_length=6, max_length=6)
    is_premium: bool
    type: OfferType
    bedrooms: int = Field(..., ge=1, le=8)
    guests: int = Field(..., ge=1, le=10)
    price: int = Field(..., ge=100, le=100000)
    amenities: list[Amenity] = Field(..., min_length=1)
    coordinates: CoordinatesSchema

    @field_validator("amenities")
    @classmethod
    def check_unique_amenities(cls, value):
        return _unique_amenities(value)

    def to_domain(self) -> dict[str, Any]:
        """Attributs prets pour Offer.create (snake_case, value objects)."""
        data = self.model_dump(exclude={"coordinates"})
        data["coordinates"] = Coordinates(**self.coordinates.model_dump())
        return data


class UpdateOfferRequest(CamelModel):
    """
    Requete de modification partielle.

    Seuls les champs presents (et non nuls) sont modifies.
    """

    title: Optional[str] = Field(None, min_length=10, max_length=100)
    description: Optional[str] = Field(None, min_length=20, max_length=1024)
    city: Optional[City] = None
    preview: Optional[str] = Field(None, min_length=1, max_length=500)
    images: Optional[list[str]] = Field(None, min_length=6, max_length=6)
    is_premium: Optional[bool] = None
    type: Optional[OfferType] = None
    bedrooms: Optional[int] = Field(None, ge=1, le=8)
    guests: Optional[int] = Field(None, ge=1, le=10)
    price: Optional[int] = Field(None, ge=100, le=100000)
    amenities: Optional[list[Amenity]] = Field(None, min_length=1)
    coordinates: Optional[CoordinatesSchema] = None

    @field_validator("amenities")
    @classmethod
    def check_unique_amenities(cls, value):
        return _unique_amenities(value)

    def to_changes(self) -> dict[str, Any]:
        """Champs envoyes par le client, convertis pour Offer.apply_changes."""
        changes = {
            name: value
            for name, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }
        if "coordinates" in changes:
            changes["coordinates"] = Coordinates(**changes["coordinates"])
        return changes


class OfferResponse(CamelModel):
    """Offre serialisee, avec isFavorite relatif a l'appelant."""

    id: UUID
    title: str
    description: str
    date: datetime
    city: City
    preview: str
    images: list[str]
    is_premium: bool
    is_favorite: bool
    rating: float
    type: OfferType
    bedrooms: int
    guests: int
    price: int
    amenities: list[Amenity]
    author_id: UUID
    comment_count: int
    coordinates: CoordinatesSchema
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, offer: Offer, is_favorite: bool = False) -> "OfferResponse":
        """Convertit une entite Offer."""
        return cls(
            id=offer.id,
            title=offer.title,
            description=offer.description,
            date=offer.date,
            city=offer.city,
            preview=offer.preview,
            images=offer.images,
            is_premium=offer.is_premium,
            is_favorite=is_favorite,
            rating=offer.rating,
            type=offer.type,
            bedrooms=offer.bedrooms,
            guests=offer.guests,
            price=offer.price,
            amenities=offer.amenities,
            author_id=offer.author_id,
            comment_count=offer.comment_count,
            coordinates=CoordinatesSchema(**offer.coordinates.to_dict()),
            created_at=offer.created_at,
            updated_at=offer.updated_at,
        )
