"""Stockage des fichiers uploades."""

from six_cities.infrastructure.storage.local_file_storage import LocalFileStorage

__all__ = ["LocalFileStorage"]
