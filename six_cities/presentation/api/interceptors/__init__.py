"""
Intercepteurs de requete.

Chaque intercepteur implemente handle(context, call_next) et se
compose dans un Pipeline dans l'ordre de la route.
"""

from six_cities.presentation.api.interceptors.authenticate import (
    AuthenticateInterceptor,
    OptionalAuthenticateInterceptor,
)
from six_cities.presentation.api.interceptors.document_exists import (
    DocumentExistsInterceptor,
)
from six_cities.presentation.api.interceptors.require_owner import (
    RequireOwnerInterceptor,
)
from six_cities.presentation.api.interceptors.upload_file import UploadFileInterceptor
from six_cities.presentation.api.interceptors.validate_dto import ValidateDtoInterceptor
from six_cities.presentation.api.interceptors.validate_id import ValidateIdInterceptor

__all__ = [
    "AuthenticateInterceptor",
    "DocumentExistsInterceptor",
    "OptionalAuthenticateInterceptor",
    "RequireOwnerInterceptor",
    "UploadFileInterceptor",
    "ValidateDtoInterceptor",
    "ValidateIdInterceptor",
]
