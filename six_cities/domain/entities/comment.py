"""
Entite Comment - Avis d'un voyageur sur une offre.

Un commentaire est cree une fois et n'est jamais modifie.
Sa creation declenche le recalcul des statistiques de l'offre.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from six_cities.domain.exceptions import InvalidEntityError


@dataclass
class Comment:
    """
    Commentaire sur une offre.

    Attributes:
        id: Identifiant unique UUID.
        text: Texte (5 a 1024 caracteres).
        rating: Note entiere de 1 a 5.
        author_id: Auteur du commentaire.
        offer_id: Offre commentee.
        created_at: Date de publication.
    """

    id: UUID
    text: str
    rating: int
    author_id: UUID
    offer_id: UUID
    created_at: datetime = field(default_factory=datetime.now)

    TEXT_MIN_LENGTH = 5
    TEXT_MAX_LENGTH = 1024
    RATING_MIN = 1
    RATING_MAX = 5

    @classmethod
    def create(
        cls,
        text: str,
        rating: int,
        author_id: UUID,
        offer_id: UUID,
    ) -> "Comment":
        """
        Factory pour un nouveau commentaire.

        Raises:
            InvalidEntityError: Si le texte ou la note sont hors bornes.
        """
        if not cls.TEXT_MIN_LENGTH <= len(text) <= cls.TEXT_MAX_LENGTH:
            raise InvalidEntityError(
                f"text must be between {cls.TEXT_MIN_LENGTH} and "
                f"{cls.TEXT_MAX_LENGTH} characters",
                field="text",
            )
        if not cls.RATING_MIN <= rating <= cls.RATING_MAX:
            raise InvalidEntityError(
                f"rating must be between {cls.RATING_MIN} and {cls.RATING_MAX}",
                field="rating",
            )

        return cls(
            id=uuid4(),
            text=text,
            rating=rating,
            author_id=author_id,
            offer_id=offer_id,
        )
