"""
Container d'injection de dependances.

Ce module fournit le point de composition unique qui initialise et
connecte tous les composants de l'architecture hexagonale par
construction explicite (aucun registre par reflexion).

Ordre de construction:
----------------------
DatabaseManager -> repositories -> services -> JWTService
-> stockage fichiers -> intercepteurs partages
"""

from dataclasses import dataclass
from typing import Optional

from six_cities.application.services import CommentService, OfferService, UserService
from six_cities.domain.ports import (
    CommentRepository,
    FileStorage,
    OfferRepository,
    UserRepository,
)
from six_cities.infrastructure.persistence import (
    DatabaseManager,
    SqlAlchemyCommentRepository,
    SqlAlchemyOfferRepository,
    SqlAlchemyUserRepository,
)
from six_cities.infrastructure.storage import LocalFileStorage
from six_cities.presentation.api.auth.jwt_service import JWTService
from six_cities.presentation.api.config import APISettings
from six_cities.presentation.api.interceptors import (
    AuthenticateInterceptor,
    OptionalAuthenticateInterceptor,
    UploadFileInterceptor,
)


@dataclass
class Container:
    """
    Conteneur d'injection de dependances.

    Expose les services et les intercepteurs partages aux routers.
    L'application FastAPI le conserve dans app.state.container.

    Example:
        >>> container = Container.create(APISettings())
        >>> container.database.create_tables()
        >>> container.offer_service.find_many(limit=10)
    """

    settings: APISettings
    database: DatabaseManager

    # Repositories
    user_repository: UserRepository
    offer_repository: OfferRepository
    comment_repository: CommentRepository

    # Services
    user_service: UserService
    offer_service: OfferService
    comment_service: CommentService
    jwt_service: JWTService

    # Stockage
    file_storage: FileStorage

    # Intercepteurs partages
    authenticate: AuthenticateInterceptor
    optional_authenticate: OptionalAuthenticateInterceptor
    upload_avatar: UploadFileInterceptor

    @classmethod
    def create(
        cls,
        settings: APISettings,
        database: Optional[DatabaseManager] = None,
    ) -> "Container":
        """
        Cree un container avec toutes les dependances initialisees.

        Args:
            settings: Configuration de l'API.
            database: DatabaseManager existant (sinon cree depuis settings).

        Returns:
            Container configure.
        """
        database = database or DatabaseManager(settings.sqlalchemy_url)

        user_repository = SqlAlchemyUserRepository(database)
        offer_repository = SqlAlchemyOfferRepository(database)
        comment_repository = SqlAlchemyCommentRepository(database)

        user_service = UserService(user_repository)
        offer_service = OfferService(offer_repository, comment_repository)
        comment_service = CommentService(comment_repository, offer_service)
        jwt_service = JWTService(settings)

        file_storage = LocalFileStorage(settings.upload_dir, settings.upload_url_prefix)

        return cls(
            settings=settings,
            database=database,
            user_repository=user_repository,
            offer_repository=offer_repository,
            comment_repository=comment_repository,
            user_service=user_service,
            offer_service=offer_service,
            comment_service=comment_service,
            jwt_service=jwt_service,
            file_storage=file_storage,
            authenticate=AuthenticateInterceptor(jwt_service, user_service),
            optional_authenticate=OptionalAuthenticateInterceptor(
                jwt_service, user_service
            ),
            upload_avatar=UploadFileInterceptor(
                file_storage,
                field="avatar",
                max_size=settings.max_upload_size_bytes,
            ),
        )
