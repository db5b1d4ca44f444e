"""
Structured logging setup.

structlog on top of stdlib logging; configured lazily on the first
get_logger() call from TransformSettings (LAZY_TRANSFORM_LOG_LEVEL,
LAZY_TRANSFORM_LOG_JSON).
"""

import logging
from typing import Any

import structlog
from structlog.processors import JSONRenderer

_LOGGER_CACHE: dict[str, Any] = {}
_INITIALIZED = False


def configure_logging(level: str | None = None, json_format: bool | None = None) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        level: Log level name (None: read from settings)
        json_format: Render JSON lines instead of console output (None: read from settings)
    """
    global _INITIALIZED

    if level is None or json_format is None:
        from lazy_transform.config import get_settings

        settings = get_settings()
        level = level or settings.log_level
        json_format = settings.log_json if json_format is None else json_format

    level = level.upper()

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors.append(JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level, logging.INFO),
    )
    _INITIALIZED = True


def get_logger(name: str):
    """
    Get a structured logger (configures logging on first call).

    Args:
        name: Logger name (usually __name__)

    Returns:
        structlog BoundLogger
    """
    if not _INITIALIZED:
        configure_logging()

    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = structlog.get_logger(name)
    return _LOGGER_CACHE[name]


def reset_logging() -> None:
    """Reset logging state (tests)."""
    global _INITIALIZED
    _INITIALIZED = False
    _LOGGER_CACHE.clear()
    structlog.reset_defaults()
