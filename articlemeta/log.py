"""
Logging setup for articlemeta.

Modules log through structlog; applications embedding the library can call
configure_logging() once to get the same processor chain everywhere.
"""
import logging
from typing import Optional

import structlog

from articlemeta.config import Settings, load_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Set up structured logging based on configuration."""
    settings = settings or load_settings()
    log_level = settings.log_level.value

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if settings.structured_logging
            else structlog.dev.ConsoleRenderer()
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Libraries using stdlib logging follow the same level
    numeric_level = getattr(logging, log_level, logging.WARNING)
    logging.getLogger().setLevel(numeric_level)
