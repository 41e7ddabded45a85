"""
Logging Setup
Structured logging shared by routes, services and storage
"""
import logging

import structlog
from structlog.typing import FilteringBoundLogger


def configure_logging(level: str = "INFO", json: bool = False) -> None:
    """Configure structlog once at startup"""
    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """Named structlog logger; binds to the configuration on first use"""
    return structlog.get_logger(name)
