"""
Logging Infrastructure - Logging structure avec structlog.

Responsabilite:
---------------
Fournir un logging JSON structure en production, lisible en dev.

Usage:
------
    from six_cities.infrastructure.logging import get_logger

    logger = get_logger(__name__)
    logger.info("offer_created", offer_id="...", author_id="...")
"""

from six_cities.infrastructure.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
