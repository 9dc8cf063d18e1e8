"""
Exception Handlers - Traducteur global des erreurs.

Responsabilite unique:
----------------------
Convertir toute exception remontee par un endpoint en reponse
JSON {"error": str, "details"?: any}.

Classification:
---------------
- HttpException: code porte par l'erreur (log debug)
- DomainException: reclassee (404, 409, 400) (log debug)
- IntegrityError SQLAlchemy: unicite -> 409, autre -> 400 (log debug)
- RequestValidationError FastAPI: 400 "Validation failed"
- HTTPException Starlette (route inconnue, methode): code conserve
- Toute autre exception: 500 "Internal Server Error" (log error + stack)
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from six_cities.domain.exceptions import (
    DomainException,
    EmailAlreadyExistsError,
    EntityNotFoundError,
    InvalidEntityError,
)
from six_cities.infrastructure.logging import get_logger
from six_cities.presentation.api.errors import (
    BadRequestError,
    ConflictError,
    HttpException,
    NotFoundError,
    validation_error,
)


logger = get_logger(__name__)


def _respond(error: HttpException, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content=error.to_dict(),
        headers=headers,
    )


def translate_domain_exception(exc: DomainException) -> HttpException:
    """
    Reclasse une exception du domaine dans la taxonomie HTTP.

    Args:
        exc: Exception metier.

    Returns:
        Erreur HTTP equivalente (400 par defaut).
    """
    if isinstance(exc, EntityNotFoundError):
        return NotFoundError(exc.message)
    if isinstance(exc, EmailAlreadyExistsError):
        return ConflictError(exc.message)
    if isinstance(exc, InvalidEntityError) and exc.field:
        return BadRequestError(
            "Validation failed",
            details=[{"field": exc.field, "messages": [exc.message]}],
        )
    return BadRequestError(exc.message)


def translate_integrity_error(exc: IntegrityError) -> HttpException:
    """
    Reclasse une erreur du driver en 409 (unicite) ou 400.

    PostgreSQL et SQLite mentionnent tous deux "unique" dans le
    message d'une violation de contrainte d'unicite.
    """
    message = str(exc.orig) if exc.orig is not None else str(exc)
    if "unique" in message.lower() or "duplicate" in message.lower():
        return ConflictError("Resource already exists")
    return BadRequestError("Invalid data")


async def http_exception_handler(request: Request, exc: HttpException) -> JSONResponse:
    """Erreurs typees levees par les intercepteurs et handlers."""
    logger.debug(
        "http_error",
        status_code=exc.status_code,
        error=exc.message,
    )
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return _respond(exc, headers)


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Exceptions metier remontees par les services."""
    error = translate_domain_exception(exc)
    logger.debug(
        "domain_error",
        code=exc.code,
        status_code=error.status_code,
        error=exc.message,
    )
    return _respond(error)


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Violations de contraintes detectees par la base."""
    error = translate_integrity_error(exc)
    logger.debug(
        "integrity_error",
        status_code=error.status_code,
        error=str(exc.orig),
    )
    return _respond(error)


async def request_validation_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Parametres de route, query ou corps JSON mal formes."""
    error = validation_error(list(exc.errors()))
    logger.debug("request_validation_error", details=error.details)
    return _respond(error)


async def starlette_http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """Erreurs du routeur (404 route inconnue, 405 methode)."""
    logger.debug("routing_error", status_code=exc.status_code, error=exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Toute erreur non classifiee: 500 sans fuite de detail."""
    logger.error(
        "unhandled_error",
        error=str(exc),
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Enregistre le traducteur global sur l'application.

    Args:
        app: Application FastAPI.
    """
    app.add_exception_handler(HttpException, http_exception_handler)
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, starlette_http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
