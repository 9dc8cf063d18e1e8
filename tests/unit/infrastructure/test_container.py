"""
Tests unitaires pour le Container d'injection de dependances.
"""

from unittest.mock import MagicMock

from six_cities.infrastructure.container import Container
from six_cities.infrastructure.persistence import (
    SqlAlchemyCommentRepository,
    SqlAlchemyOfferRepository,
    SqlAlchemyUserRepository,
)
from six_cities.infrastructure.storage import LocalFileStorage


class TestContainer:
    """Tests pour Container."""

    def test_create_with_db_manager(self, settings) -> None:
        """Les repositories partagent le DatabaseManager fourni."""
        mock_db = MagicMock()

        container = Container.create(settings, database=mock_db)

        assert container.database is mock_db
        assert isinstance(container.user_repository, SqlAlchemyUserRepository)
        assert isinstance(container.offer_repository, SqlAlchemyOfferRepository)
        assert isinstance(container.comment_repository, SqlAlchemyCommentRepository)
        assert container.user_repository._db is mock_db

    def test_create_without_db_manager(self, settings) -> None:
        """Sans DatabaseManager, il est cree depuis la configuration."""
        container = Container.create(settings)

        assert container.database.database_url == settings.sqlalchemy_url
        container.database.dispose()

    def test_services_are_wired(self, settings) -> None:
        """Les services recoivent leurs repositories."""
        container = Container.create(settings, database=MagicMock())

        assert container.offer_service._offers is container.offer_repository
        assert container.offer_service._comments is container.comment_repository
        assert container.comment_service._offers is container.offer_service
        assert container.user_service._users is container.user_repository

    def test_shared_interceptors(self, settings) -> None:
        """Les intercepteurs partages utilisent les services du container."""
        container = Container.create(settings, database=MagicMock())

        assert container.authenticate._users is container.user_service
        assert container.authenticate._jwt is container.jwt_service
        assert container.upload_avatar.storage is container.file_storage
        assert container.upload_avatar.field == "avatar"
        assert container.upload_avatar.max_size == settings.max_upload_size_bytes

    def test_file_storage_uses_upload_dir(self, settings) -> None:
        """Le stockage ecrit dans UPLOAD_DIR."""
        container = Container.create(settings, database=MagicMock())

        assert isinstance(container.file_storage, LocalFileStorage)
        assert str(container.file_storage.directory) == settings.upload_dir
        assert container.file_storage.url_prefix == "/uploads"
