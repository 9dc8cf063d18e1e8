"""
LocalFileStorage - Stockage des uploads sur le disque local.

Responsabilite unique:
----------------------
Ecrire les fichiers uploades dans le repertoire d'upload sous
un nom aleatoire. Le repertoire est servi en statique par l'API
sous un prefixe d'URL fixe (ex: /uploads).

Usage:
------
    storage = LocalFileStorage("upload", "/uploads")
    stored = storage.save(data, "image/png")
    stored.url  # "/uploads/3f2b...c1.png"
"""

from pathlib import Path
from uuid import uuid4

from six_cities.domain.ports.file_storage import FileStorage, StoredFile
from six_cities.infrastructure.logging import get_logger


logger = get_logger(__name__)


# Extension par type MIME accepte
EXTENSIONS: dict[str, str] = {
    "image/jpeg": "jpg",
    "image/png": "png",
}


class LocalFileStorage(FileStorage):
    """
    Stockage fichiers sur disque.

    Attributes:
        directory: Repertoire de destination (cree si absent).
        url_prefix: Prefixe public des fichiers.
    """

    def __init__(self, directory: str | Path, url_prefix: str = "/uploads"):
        self.directory = Path(directory)
        self.url_prefix = url_prefix.rstrip("/")
        self.directory.mkdir(parents=True, exist_ok=True)

    def save(self, data: bytes, content_type: str) -> StoredFile:
        """
        Ecrit le contenu sous un nom unique.

        Args:
            data: Contenu binaire.
            content_type: Type MIME declare (determine l'extension).

        Returns:
            StoredFile avec le nom genere et l'URL publique.
        """
        extension = EXTENSIONS.get(content_type, "bin")
        filename = f"{uuid4().hex}.{extension}"
        (self.directory / filename).write_bytes(data)

        logger.debug("file_stored", filename=filename, size=len(data))
        return StoredFile(
            filename=filename,
            url=f"{self.url_prefix}/{filename}",
            size=len(data),
            content_type=content_type,
        )

    def delete(self, filename: str) -> bool:
        """Supprime un fichier du repertoire d'upload."""
        path = self.directory / Path(filename).name
        if not path.exists():
            return False
        path.unlink()
        return True
