"""
Gestion de la connexion a la base de donnees.

Architecture Hexagonale:
------------------------
Ce module fait partie de la couche Infrastructure (Adapters).
Les repositories SQLAlchemy recoivent un DatabaseManager et
ouvrent une session par operation.

    six_cities/infrastructure/persistence/
    ├── database.py                        <- CE FICHIER
    ├── models/                            Modeles SQLAlchemy
    ├── sqlalchemy_user_repository.py
    ├── sqlalchemy_offer_repository.py
    └── sqlalchemy_comment_repository.py

Connection Pooling:
-------------------
Pour PostgreSQL, DatabaseManager utilise un pool de connexions:
- pool_size=5: Connexions maintenues en permanence
- max_overflow=10: Connexions temporaires supplementaires
- pool_recycle=1800: Recyclage toutes les 30 min (evite timeout)
- pool_pre_ping=True: Verification avant utilisation

SQLite (dev local, tests) n'accepte pas ces options: le pool
par defaut est conserve et le partage entre threads est autorise.
"""
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from six_cities.infrastructure.persistence.models import Base


class DatabaseManager:
    """
    Gestionnaire central de connexion a la base de donnees.

    Encapsule la configuration SQLAlchemy et fournit un context
    manager pour les sessions avec gestion automatique des
    transactions (commit/rollback).

    Attributes:
        engine: Moteur SQLAlchemy.
        SessionLocal: Factory de sessions configuree.

    Example:
        >>> db = DatabaseManager("sqlite:///six_cities.db")
        >>> db.create_tables()
        >>> with db.get_session() as session:
        ...     offers = session.query(OfferModel).all()
        # Commit automatique si pas d'exception
        # Rollback automatique en cas d'erreur
    """

    def __init__(self, database_url: str):
        self.database_url = database_url

        if database_url.startswith("sqlite"):
            self.engine = create_engine(
                database_url,
                connect_args={"check_same_thread": False},
                echo=False,
            )
        else:
            self.engine = create_engine(
                database_url,
                pool_pre_ping=True,
                pool_size=5,
                max_overflow=10,
                pool_timeout=30,
                pool_recycle=1800,
                echo=False,
            )
        self.SessionLocal = sessionmaker(bind=self.engine, expire_on_commit=False)

    def create_tables(self) -> None:
        """Cree toutes les tables si elles n'existent pas."""
        Base.metadata.create_all(self.engine)

    def drop_tables(self) -> None:
        """Supprime toutes les tables (tests uniquement)."""
        Base.metadata.drop_all(self.engine)

    @contextmanager
    def get_session(self) -> Iterator[Session]:
        """Context manager pour les sessions avec gestion automatique des transactions."""
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        """Ferme toutes les connexions du pool."""
        self.engine.dispose()
