"""
UploadFileInterceptor - Reception d'un fichier multipart.

Responsabilite unique:
----------------------
Valider puis stocker le fichier d'un champ multipart donne.
Refus en 400 si le fichier est absent, si son type MIME n'est pas
accepte ou s'il depasse la taille maximale. Rien n'est ecrit (ni
fichier ni base) en cas de refus.
"""

from typing import Any

from six_cities.domain.ports.file_storage import FileStorage
from six_cities.infrastructure.logging import get_logger
from six_cities.presentation.api.errors import BadRequestError
from six_cities.presentation.api.pipeline import Handler, Interceptor, RequestContext


logger = get_logger(__name__)

IMAGE_MIME_TYPES = ("image/jpeg", "image/png")
DEFAULT_MAX_SIZE = 5 * 1024 * 1024


class UploadFileInterceptor(Interceptor):
    """
    Stocke le fichier d'un champ multipart.

    Args:
        storage: Stockage de destination.
        field: Nom du champ multipart (ex: "avatar").
        allowed_types: Types MIME acceptes.
        max_size: Taille maximale en octets.
    """

    def __init__(
        self,
        storage: FileStorage,
        field: str = "avatar",
        allowed_types: tuple[str, ...] = IMAGE_MIME_TYPES,
        max_size: int = DEFAULT_MAX_SIZE,
    ):
        self.storage = storage
        self.field = field
        self.allowed_types = allowed_types
        self.max_size = max_size

    def handle(self, context: RequestContext, call_next: Handler) -> Any:
        upload = context.files.get(self.field)
        if upload is None or not upload.filename:
            raise BadRequestError(f"File field '{self.field}' is required")

        if upload.content_type not in self.allowed_types:
            raise BadRequestError(
                f"Only {', '.join(self.allowed_types)} files are allowed"
            )

        # Lecture bornee: un octet de plus suffit a detecter le depassement
        data = upload.file.read(self.max_size + 1)
        if len(data) > self.max_size:
            raise BadRequestError(
                f"File must not exceed {self.max_size // (1024 * 1024)}MB"
            )

        context.stored_file = self.storage.save(data, upload.content_type)
        logger.info(
            "file_uploaded",
            field=self.field,
            filename=context.stored_file.filename,
            size=context.stored_file.size,
        )
        return call_next(context)
