"""
Main - Factory FastAPI.

Responsabilite unique:
----------------------
Creer et configurer l'application FastAPI: logging, container,
middlewares, traducteur d'erreurs, fichiers statiques et routers.

Usage:
------
    # Development
    uvicorn six_cities.presentation.api.main:create_app --factory --reload

    # Production
    ENV=production six-cities
"""

from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.middleware.base import BaseHTTPMiddleware

from six_cities.infrastructure.container import Container
from six_cities.infrastructure.logging import configure_logging, get_logger
from six_cities.infrastructure.logging.config import RequestLogger
from six_cities.presentation.api.auth.router import router as auth_router
from six_cities.presentation.api.comments.router import router as comments_router
from six_cities.presentation.api.config import APISettings, get_settings
from six_cities.presentation.api.exception_handlers import register_exception_handlers
from six_cities.presentation.api.favorites.router import router as favorites_router
from six_cities.presentation.api.offers.router import router as offers_router
from six_cities.presentation.api.users.router import router as users_router


def create_app(
    settings: Optional[APISettings] = None,
    container: Optional[Container] = None,
) -> FastAPI:
    """
    Factory pour creer l'application FastAPI.

    Args:
        settings: Configuration (defaut: variables d'environnement).
        container: Container deja construit (tests).

    Returns:
        Application FastAPI configuree.
    """
    settings = settings or get_settings()

    configure_logging(json_logs=settings.is_production, log_level=settings.log_level)
    logger = get_logger("six_cities.api")

    container = container or Container.create(settings)
    container.database.create_tables()

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.container = container

    # Request logging middleware
    app.add_middleware(BaseHTTPMiddleware, dispatch=RequestLogger())

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Avatars uploades
    app.mount(
        settings.upload_url_prefix,
        StaticFiles(directory=settings.upload_dir),
        name="uploads",
    )

    @app.get("/health", tags=["Health"])
    def health():
        """Endpoint de sante."""
        return {"status": "healthy"}

    app.include_router(auth_router, prefix=settings.api_prefix)
    app.include_router(users_router, prefix=settings.api_prefix)
    app.include_router(offers_router, prefix=settings.api_prefix)
    app.include_router(comments_router, prefix=settings.api_prefix)
    app.include_router(favorites_router, prefix=settings.api_prefix)

    logger.info(
        "app_started",
        version=settings.api_version,
        env=settings.env,
        upload_dir=settings.upload_dir,
    )
    return app


def run() -> None:
    """Lance le serveur uvicorn avec la configuration courante."""
    settings = get_settings()
    uvicorn.run(
        "six_cities.presentation.api.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
