"""
Configuration API - Settings Pydantic.

Responsabilite unique:
----------------------
Charger et valider la configuration API depuis les variables d'env
(ou un fichier .env).

Variables principales:
----------------------
- JWT_SECRET_KEY: Cle secrete pour signer les tokens
- JWT_ALGORITHM: Algorithme (defaut: HS256)
- JWT_EXPIRE_MINUTES: Duree de vie du token (defaut: 7 jours)
- DATABASE_URL: URL SQLAlchemy complete, ou DB_HOST / DB_PORT /
  DB_USER / DB_PASSWORD / DB_NAME pour PostgreSQL
- UPLOAD_DIR: Repertoire des fichiers uploades
- PORT: Port d'ecoute
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """
    Configuration de l'API REST.

    Chargee depuis les variables d'environnement.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environnement
    env: str = "development"
    log_level: str = "INFO"

    # Serveur
    host: str = "0.0.0.0"
    port: int = 4000

    # JWT
    jwt_secret_key: str = "CHANGE_ME_IN_PRODUCTION"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 7 * 24 * 60

    # API
    api_title: str = "Six Cities API"
    api_version: str = "1.0.0"
    api_prefix: str = ""

    # CORS
    cors_origins: list[str] = ["*"]

    # Base de donnees
    database_url: str = ""
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = "postgres"
    db_name: str = "six_cities"

    # Upload
    upload_dir: str = "upload"
    upload_url_prefix: str = "/uploads"
    max_upload_size_mb: int = 5

    @property
    def is_production(self) -> bool:
        """True en production (logs JSON)."""
        return self.env == "production"

    @property
    def sqlalchemy_url(self) -> str:
        """URL de connexion, construite depuis DB_* si DATABASE_URL est vide."""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    @property
    def max_upload_size_bytes(self) -> int:
        """Taille maximale d'un upload en octets."""
        return self.max_upload_size_mb * 1024 * 1024


@lru_cache
def get_settings() -> APISettings:
    """Retourne la configuration (cached)."""
    return APISettings()
