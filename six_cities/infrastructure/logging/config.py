"""
Logging Config - Configuration structlog.

Responsabilite unique:
----------------------
Configurer structlog une seule fois au demarrage de l'API.

Modes:
------
- Development: Console, couleurs
- Production: JSON, timestamp ISO, stack traces serialisees

Usage:
------
    from six_cities.infrastructure.logging import configure_logging, get_logger

    configure_logging(json_logs=True, log_level="INFO")
    logger = get_logger("six_cities")
    logger.info("app_started", version="1.0.0")
"""

import logging
import sys
import time
from typing import Optional
from uuid import uuid4

import structlog


# Loggers tiers trop bavards en INFO
NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "multipart")


def configure_logging(
    json_logs: bool = False,
    log_level: str = "INFO",
) -> None:
    """
    Configure le logging global.

    Args:
        json_logs: True pour JSON (production), False pour console.
        log_level: Niveau minimum (DEBUG, INFO, WARNING, ERROR).
    """
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """
    Retourne un logger structure.

    Args:
        name: Nom du logger (module name).

    Example:
        logger = get_logger(__name__)
        logger.info("event", key="value")
    """
    return structlog.get_logger(name)


class RequestLogger:
    """
    Middleware HTTP de logging des requetes.

    Lie au contexte structlog l'identifiant de requete, la methode,
    le chemin et l'IP client, puis log la fin de chaque requete.
    L'identifiant est repris du header X-Request-ID ou genere, et
    renvoye dans la reponse.
    """

    REQUEST_ID_HEADER = "x-request-id"

    def __init__(self, logger: Optional[structlog.stdlib.BoundLogger] = None):
        self._logger = logger or get_logger("six_cities.requests")

    async def __call__(self, request, call_next):
        """Log la requete et la reponse."""
        start_time = time.perf_counter()
        request_id = request.headers.get(self.REQUEST_ID_HEADER) or uuid4().hex

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else None,
        )

        try:
            response = await call_next(request)
        except Exception as e:
            self._logger.error(
                "request_failed",
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=self._elapsed_ms(start_time),
            )
            raise

        response.headers[self.REQUEST_ID_HEADER] = request_id
        self._logger.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=self._elapsed_ms(start_time),
        )
        return response

    @staticmethod
    def _elapsed_ms(start_time: float) -> float:
        return round((time.perf_counter() - start_time) * 1000, 2)
