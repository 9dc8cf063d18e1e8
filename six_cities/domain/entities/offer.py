"""
Entite Offer - Offre de location.

Une offre est publiee par un utilisateur authentifie. Elle porte
ses attributs descriptifs et deux champs derives des commentaires:

- rating: moyenne des notes des commentaires (1 decimale)
- comment_count: nombre de commentaires

Ces deux champs ne sont jamais modifies directement par un client:
ils sont recalcules a chaque creation de commentaire.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from six_cities.domain.exceptions import InvalidEntityError
from six_cities.domain.value_objects import Amenity, City, Coordinates, OfferType


@dataclass
class Offer:
    """
    Offre de location.

    Attributes:
        id: Identifiant unique UUID.
        title: Titre (10 a 100 caracteres).
        description: Description (20 a 1024 caracteres).
        date: Date de publication.
        city: Ville du logement.
        preview: Image de previsualisation.
        images: Exactement 6 photos du logement.
        is_premium: Offre mise en avant.
        type: Type de logement.
        bedrooms: Nombre de chambres (1 a 8).
        guests: Nombre de voyageurs (1 a 10).
        price: Prix par nuit (100 a 100000).
        amenities: Equipements (sous-ensemble non vide).
        coordinates: Position GPS.
        author_id: Auteur de l'offre.
        rating: Note moyenne derivee des commentaires.
        comment_count: Nombre de commentaires.

    Example:
        >>> offer = Offer.create(title="Nice, cozy, warm big bed apartment", ...)
        >>> offer.rating, offer.comment_count
        (0.0, 0)
    """

    id: UUID
    title: str
    description: str
    date: datetime
    city: City
    preview: str
    images: list[str]
    is_premium: bool
    type: OfferType
    bedrooms: int
    guests: int
    price: int
    amenities: list[Amenity]
    coordinates: Coordinates
    author_id: UUID
    rating: float = 0.0
    comment_count: int = 0
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    # Attributs modifiables par le proprietaire
    EDITABLE_FIELDS = (
        "title", "description", "city", "preview", "images", "is_premium",
        "type", "bedrooms", "guests", "price", "amenities", "coordinates",
    )
    IMAGES_COUNT = 6

    @classmethod
    def create(
        cls,
        title: str,
        description: str,
        city: City | str,
        preview: str,
        images: list[str],
        is_premium: bool,
        type: OfferType | str,
        bedrooms: int,
        guests: int,
        price: int,
        amenities: list[Amenity | str],
        coordinates: Coordinates,
        author_id: UUID,
        date: Optional[datetime] = None,
    ) -> "Offer":
        """
        Factory pour publier une nouvelle offre.

        La note et le nombre de commentaires demarrent a zero,
        la date de publication vaut maintenant si non fournie.

        Raises:
            InvalidEntityError: Si un attribut viole un invariant.
        """
        if len(images) != cls.IMAGES_COUNT:
            raise InvalidEntityError(
                f"images must contain exactly {cls.IMAGES_COUNT} items",
                field="images",
            )

        return cls(
            id=uuid4(),
            title=title,
            description=description,
            date=date or datetime.now(),
            city=city if isinstance(city, City) else City.from_string(city),
            preview=preview,
            images=list(images),
            is_premium=is_premium,
            type=type if isinstance(type, OfferType) else OfferType.from_string(type),
            bedrooms=bedrooms,
            guests=guests,
            price=price,
            amenities=Amenity.parse_many(amenities),
            coordinates=coordinates,
            author_id=author_id,
        )

    def apply_changes(self, changes: dict[str, Any]) -> None:
        """
        Applique une mise a jour partielle.

        Seuls les attributs descriptifs sont modifiables; rating,
        comment_count, auteur et date de publication sont ignores.

        Args:
            changes: Attributs a modifier (noms snake_case).
        """
        for name, value in changes.items():
            if name not in self.EDITABLE_FIELDS or value is None:
                continue
            if name == "city" and not isinstance(value, City):
                value = City.from_string(value)
            elif name == "type" and not isinstance(value, OfferType):
                value = OfferType.from_string(value)
            elif name == "amenities":
                value = Amenity.parse_many(value)
            elif name == "coordinates" and isinstance(value, dict):
                value = Coordinates(**value)
            elif name == "images" and len(value) != self.IMAGES_COUNT:
                raise InvalidEntityError(
                    f"images must contain exactly {self.IMAGES_COUNT} items",
                    field="images",
                )
            setattr(self, name, value)
        self.updated_at = datetime.now()

    def update_stats(self, comment_count: int, rating: float) -> None:
        """Remplace les champs derives par les agregats recalcules."""
        self.comment_count = comment_count
        self.rating = rating

    def is_owned_by(self, user_id: UUID) -> bool:
        """True si l'utilisateur est l'auteur de l'offre."""
        return self.author_id == user_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Offer):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
