"""Logging configuration for Synaptic Embeddings."""

import logging
from typing import List, Optional

import structlog
from rich.console import Console
from rich.logging import RichHandler

from .settings import Settings


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Set up structured logging with Rich formatting."""
    if settings is None:
        settings = Settings()

    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    handlers: List[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            show_time=True,
            show_path=True,
            markup=True,
            rich_tracebacks=True,
        ),
    ]
    if settings.LOG_FILE:
        settings.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.LOG_FILE, encoding="utf-8"))

    # Configure standard library logging
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        # Route through stdlib logging so the Rich/file handlers receive events
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


def get_module_logger(module_name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger for a specific module."""
    return get_logger(f"synaptic_embeddings.{module_name}")


class LoggerMixin:
    """Mixin class to add logging capabilities to any class."""

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        """Get a logger for this class."""
        return get_logger(f"{self.__class__.__module__}.{self.__class__.__name__}")


embeddings_logger = get_module_logger("embeddings")
cli_logger = get_module_logger("cli")
