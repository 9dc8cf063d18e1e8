"""
Port FileStorage - Interface pour le stockage des fichiers uploades.

Usage:
------
    stored = storage.save(data, "image/png")
    user.set_avatar(stored.url)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class StoredFile:
    """
    Fichier persiste par le stockage.

    Attributes:
        filename: Nom genere (unique).
        url: Chemin public servi par l'API.
        size: Taille en octets.
        content_type: Type MIME declare.
    """

    filename: str
    url: str
    size: int
    content_type: str


class FileStorage(ABC):
    """Interface de stockage de fichiers."""

    @abstractmethod
    def save(self, data: bytes, content_type: str) -> StoredFile:
        """Persiste le contenu sous un nom unique."""
        ...

    @abstractmethod
    def delete(self, filename: str) -> bool:
        """Supprime un fichier, True s'il existait."""
        ...
