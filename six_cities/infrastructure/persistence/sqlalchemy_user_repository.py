"""
SqlAlchemyUserRepository - Adapter SQLAlchemy pour les utilisateurs.

Implemente le port UserRepository avec SQLAlchemy.
Responsabilite unique: persistance des utilisateurs et de leurs favoris.

La verification du mot de passe est geree par l'entite User,
pas ici.
"""

from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from six_cities.domain.entities.user import User
from six_cities.domain.ports.user_repository import UserRepository
from six_cities.domain.value_objects.user_type import UserType
from six_cities.infrastructure.persistence.database import DatabaseManager
from six_cities.infrastructure.persistence.models import FavoriteModel, UserModel


class SqlAlchemyUserRepository(UserRepository):
    """
    Repository SQLAlchemy pour les utilisateurs.

    Attributes:
        db: DatabaseManager pour les sessions.
    """

    def __init__(self, db: DatabaseManager):
        """
        Initialise le repository.

        Args:
            db: Instance DatabaseManager.
        """
        self._db = db

    def save(self, user: User) -> User:
        """
        Persiste un utilisateur.

        Cree ou met a jour selon l'existence. Les favoris sont
        geres par add_favorite / remove_favorite.

        Args:
            user: Entite User a persister.

        Returns:
            User persiste.
        """
        with self._db.get_session() as session:
            existing = session.query(UserModel).filter(
                UserModel.id == user.id
            ).first()

            if existing:
                existing.name = user.name
                existing.email = user.email
                existing.password_hash = user.password_hash
                existing.type = str(user.type)
                existing.avatar = user.avatar
                existing.updated_at = user.updated_at
            else:
                session.add(UserModel(
                    id=user.id,
                    name=user.name,
                    email=user.email,
                    password_hash=user.password_hash,
                    type=str(user.type),
                    avatar=user.avatar,
                    created_at=user.created_at,
                    updated_at=user.updated_at,
                ))

        return user

    def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Recupere par ID, favoris inclus."""
        with self._db.get_session() as session:
            model = session.query(UserModel).filter(
                UserModel.id == user_id
            ).first()
            if not model:
                return None
            return self._to_entity(model, self._favorite_ids(session, model.id))

    def get_by_email(self, email: str) -> Optional[User]:
        """Recupere par email."""
        with self._db.get_session() as session:
            model = session.query(UserModel).filter(
                UserModel.email == email.lower()
            ).first()
            if not model:
                return None
            return self._to_entity(model, self._favorite_ids(session, model.id))

    def find_by_ids(self, user_ids: Iterable[UUID]) -> List[User]:
        """Recupere plusieurs utilisateurs (sans leurs favoris)."""
        ids = list(user_ids)
        if not ids:
            return []
        with self._db.get_session() as session:
            models = session.query(UserModel).filter(UserModel.id.in_(ids)).all()
            return [self._to_entity(m) for m in models]

    def exists(self, user_id: UUID) -> bool:
        """Verifie l'existence d'un utilisateur."""
        with self._db.get_session() as session:
            return session.query(
                session.query(UserModel).filter(UserModel.id == user_id).exists()
            ).scalar()

    def add_favorite(self, user_id: UUID, offer_id: UUID) -> bool:
        """
        Ajoute un favori si absent.

        Deux ajouts concurrents du meme couple peuvent passer la
        verification: le perdant heurte la cle primaire composite et
        retourne False, comme un ajout sur un favori deja present.
        """
        with self._db.get_session() as session:
            existing = session.get(FavoriteModel, (user_id, offer_id))
            if existing:
                return False
            session.add(FavoriteModel(user_id=user_id, offer_id=offer_id))
            try:
                session.flush()
            except IntegrityError:
                session.rollback()
                if not self._has_favorite(session, user_id, offer_id):
                    raise
                return False
            return True

    def remove_favorite(self, user_id: UUID, offer_id: UUID) -> bool:
        """Retire un favori s'il est present."""
        with self._db.get_session() as session:
            deleted = session.query(FavoriteModel).filter(
                FavoriteModel.user_id == user_id,
                FavoriteModel.offer_id == offer_id,
            ).delete(synchronize_session=False)
            return deleted > 0

    def get_favorite_ids(self, user_id: UUID) -> set[UUID]:
        """IDs des offres favorites."""
        with self._db.get_session() as session:
            return self._favorite_ids(session, user_id)

    @staticmethod
    def _has_favorite(session, user_id: UUID, offer_id: UUID) -> bool:
        return session.query(
            session.query(FavoriteModel).filter(
                FavoriteModel.user_id == user_id,
                FavoriteModel.offer_id == offer_id,
            ).exists()
        ).scalar()

    @staticmethod
    def _favorite_ids(session, user_id: UUID) -> set[UUID]:
        rows = session.query(FavoriteModel.offer_id).filter(
            FavoriteModel.user_id == user_id
        ).all()
        return {row.offer_id for row in rows}

    def _to_entity(
        self,
        model: UserModel,
        favorite_ids: Optional[set[UUID]] = None,
    ) -> User:
        """Convertit un model en entite."""
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            type=UserType.from_string(model.type),
            avatar=model.avatar,
            favorite_offer_ids=favorite_ids or set(),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
