"""
Comments Schemas - Modeles Pydantic pour les commentaires.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from six_cities.domain.entities.comment import Comment
from six_cities.domain.entities.user import User
from six_cities.presentation.api.schemas import CamelModel
from six_cities.presentation.api.users.schemas import UserResponse


class CreateCommentRequest(CamelModel):
    """
    Requete de creation de commentaire.

    Example:
        {"text": "Great place to stay", "rating": 5}
    """

    text: str = Field(..., min_length=5, max_length=1024)
    rating: int = Field(..., ge=1, le=5)


class CommentResponse(CamelModel):
    """Commentaire avec son auteur."""

    id: UUID
    text: str
    rating: int
    published_at: datetime
    author: UserResponse

    @classmethod
    def from_entity(cls, comment: Comment, author: User) -> "CommentResponse":
        """Convertit un commentaire et son auteur."""
        return cls(
            id=comment.id,
            text=comment.text,
            rating=comment.rating,
            published_at=comment.created_at,
            author=UserResponse.from_entity(author),
        )
