"""Logging configuration for MCP DocDB.

stdout carries the MCP stdio transport, so every handler here writes to
stderr or to the log file under ``LOG_DIR``.
"""

import logging
import sys
from typing import List, Optional

import structlog
from rich.console import Console
from rich.logging import RichHandler

from .settings import Settings

LOG_FILE_NAME = "docdb.log"


def _handlers(settings: Settings) -> List[logging.Handler]:
    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_path=settings.DEBUG,
        markup=False,
        rich_tracebacks=True,
    )
    file_handler = logging.FileHandler(settings.LOG_DIR / LOG_FILE_NAME, encoding="utf-8")
    return [console_handler, file_handler]


def _processors(settings: Settings) -> list:
    renderer = (
        structlog.dev.ConsoleRenderer()
        if settings.DEBUG
        else structlog.processors.JSONRenderer(default=str)
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
        renderer,
    ]


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Route stdlib logging through Rich and structlog to stderr."""
    if settings is None:
        settings = Settings()

    settings.create_directories()
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=_handlers(settings),
        force=True,
    )

    # pymongo heartbeats stay at INFO and above
    logging.getLogger("pymongo").setLevel(max(level, logging.INFO))

    structlog.configure(
        processors=_processors(settings),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.WriteLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


class LoggerMixin:
    """Mixin class to add logging capabilities to any class."""

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        """Get a logger for this class."""
        return get_logger(f"{self.__class__.__module__}.{self.__class__.__name__}")
