"""
Structured logging setup shared by the chat router and the translation pipeline.

All modules log through structlog with event-style messages:

    logger = structlog.get_logger("chat_router.rate_limiter")
    logger.warning("rate_limit_check_failed", user_id=user_id[:8], error=str(e))

Services call configure_logging() once at startup to pick the renderer and level.
"""
import logging
import os
import sys
from typing import Optional

import structlog

_configured = False


def configure_logging(service_name: str, level: Optional[str] = None):
    """
    Configure structlog for the process and bind the service name to every log line.

    Args:
        service_name: Name bound to every log line as ``service``
        level: Log level name (defaults to LOG_LEVEL env var, then INFO)

    Returns:
        structlog logger; every log line in the process carries ``service``
    """
    global _configured

    if not _configured:
        level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
        log_level = getattr(logging, level_name, logging.INFO)

        if os.getenv("LOG_FORMAT", "json").lower() == "console":
            renderer = structlog.dev.ConsoleRenderer()
        else:
            renderer = structlog.processors.JSONRenderer()

        logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)
        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.processors.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(log_level),
            logger_factory=structlog.PrintLoggerFactory(),
            cache_logger_on_first_use=True,
        )
        _configured = True

    # Add service name to all logs
    structlog.contextvars.bind_contextvars(service=service_name)

    return structlog.get_logger(service_name)
