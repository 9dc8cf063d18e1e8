"""
Modeles SQLAlchemy des utilisateurs.

Tables:
-------
- users: Comptes utilisateurs
- user_favorites: Ensemble des offres favorites par utilisateur
"""
from datetime import datetime
import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Index, String, Uuid

from six_cities.infrastructure.persistence.models.base import Base


class UserModel(Base):
    """
    Table users - Comptes de la plateforme.

    Colonnes:
        id: UUID unique
        name: Nom affiche
        email: Adresse email (unique, minuscules)
        password_hash: Hash bcrypt du mot de passe
        type: pro ou normal
        avatar: Chemin public de l'avatar
        created_at: Date de creation
        updated_at: Derniere modification
    """
    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(15), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    type = Column(String(10), nullable=False, default="normal")
    avatar = Column(String(500), nullable=True)
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)


class FavoriteModel(Base):
    """
    Table user_favorites - Offres favorites.

    La cle primaire composite garantit qu'une offre apparait
    au plus une fois dans les favoris d'un utilisateur.
    """
    __tablename__ = "user_favorites"

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    offer_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("offers.id", ondelete="CASCADE"),
        primary_key=True,
    )
    created_at = Column(DateTime, default=datetime.now)

    __table_args__ = (
        Index("idx_user_favorites_offer", "offer_id"),
    )
