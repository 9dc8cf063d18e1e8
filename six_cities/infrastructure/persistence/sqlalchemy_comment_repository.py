"""
SqlAlchemyCommentRepository - Adapter SQLAlchemy pour les commentaires.

Les agregats (count, moyenne) sont calcules par la base.
"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import desc, func

from six_cities.domain.entities.comment import Comment
from six_cities.domain.ports.comment_repository import CommentRepository
from six_cities.infrastructure.persistence.database import DatabaseManager
from six_cities.infrastructure.persistence.models import CommentModel


class SqlAlchemyCommentRepository(CommentRepository):
    """Repository SQLAlchemy pour les commentaires."""

    def __init__(self, db: DatabaseManager):
        self._db = db

    def save(self, comment: Comment) -> Comment:
        """Insere un commentaire."""
        with self._db.get_session() as session:
            session.add(CommentModel(
                id=comment.id,
                text=comment.text,
                rating=comment.rating,
                author_id=comment.author_id,
                offer_id=comment.offer_id,
                created_at=comment.created_at,
            ))
        return comment

    def find_by_offer(self, offer_id: UUID, limit: int) -> List[Comment]:
        """Commentaires d'une offre, plus recents en premier."""
        with self._db.get_session() as session:
            models = (
                session.query(CommentModel)
                .filter(CommentModel.offer_id == offer_id)
                .order_by(desc(CommentModel.created_at))
                .limit(limit)
                .all()
            )
            return [self._to_entity(m) for m in models]

    def count_by_offer(self, offer_id: UUID) -> int:
        """Nombre de commentaires d'une offre."""
        with self._db.get_session() as session:
            return session.query(func.count(CommentModel.id)).filter(
                CommentModel.offer_id == offer_id
            ).scalar() or 0

    def average_rating(self, offer_id: UUID) -> Optional[float]:
        """Moyenne des notes, None si aucun commentaire."""
        with self._db.get_session() as session:
            average = session.query(func.avg(CommentModel.rating)).filter(
                CommentModel.offer_id == offer_id
            ).scalar()
            # Decimal sous PostgreSQL, float sous SQLite
            return float(average) if average is not None else None

    def delete_by_offer(self, offer_id: UUID) -> int:
        """Supprime les commentaires d'une offre."""
        with self._db.get_session() as session:
            return session.query(CommentModel).filter(
                CommentModel.offer_id == offer_id
            ).delete(synchronize_session=False)

    def _to_entity(self, model: CommentModel) -> Comment:
        """Convertit un model en entite."""
        return Comment(
            id=model.id,
            text=model.text,
            rating=model.rating,
            author_id=model.author_id,
            offer_id=model.offer_id,
            created_at=model.created_at,
        )
