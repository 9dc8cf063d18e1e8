"""
Modeles SQLAlchemy des offres et commentaires.

Tables:
-------
- offers: Offres de location (avec rating / comment_count derives)
- comments: Commentaires des voyageurs
"""
from datetime import datetime
import uuid

from sqlalchemy import (
    JSON, Boolean, Column, DateTime, Float, ForeignKey, Index, Integer,
    String, Text, Uuid,
)

from six_cities.infrastructure.persistence.models.base import Base


class OfferModel(Base):
    """
    Table offers - Offres de location.

    images et amenities sont stockes en JSON (listes de chaines).
    rating et comment_count sont ecrits uniquement par le
    recalcul des statistiques.
    """
    __tablename__ = "offers"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    date = Column(DateTime, nullable=False, default=datetime.now)
    city = Column(String(20), nullable=False)
    preview = Column(String(500), nullable=False)
    images = Column(JSON, nullable=False, default=list)
    is_premium = Column(Boolean, nullable=False, default=False)
    type = Column(String(20), nullable=False)
    bedrooms = Column(Integer, nullable=False)
    guests = Column(Integer, nullable=False)
    price = Column(Integer, nullable=False)
    amenities = Column(JSON, nullable=False, default=list)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    author_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id"),
        nullable=False,
    )
    rating = Column(Float, nullable=False, default=0.0)
    comment_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    __table_args__ = (
        Index("idx_offers_date", "date"),
        Index("idx_offers_city_premium", "city", "is_premium"),
        Index("idx_offers_author", "author_id"),
    )


class CommentModel(Base):
    """Table comments - Commentaires sur les offres."""
    __tablename__ = "comments"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    text = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False)
    author_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id"),
        nullable=False,
    )
    offer_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("offers.id", ondelete="CASCADE"),
        nullable=False,
    )
    created_at = Column(DateTime, default=datetime.now)

    __table_args__ = (
        Index("idx_comments_offer_created", "offer_id", "created_at"),
    )
