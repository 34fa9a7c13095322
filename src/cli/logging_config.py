"""
Logging configuration for the vinculum CLI.

structlog пишет в stderr, чтобы stdout оставался чистым выводом конвертации.

Environment Variables:
    VINCULUM_LOG_LEVEL: Уровень логирования по умолчанию (default: WARNING)
"""

import logging
import os
import sys
from typing import Final

import structlog

LOG_LEVEL_ENV_VAR: Final[str] = "VINCULUM_LOG_LEVEL"
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"

LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def default_log_level() -> str:
    """Уровень из VINCULUM_LOG_LEVEL, иначе WARNING."""
    level = os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    if level not in LOG_LEVELS:
        raise ValueError(
            f"{LOG_LEVEL_ENV_VAR} must be one of {', '.join(LOG_LEVELS)}, got {level!r}"
        )
    return level


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """
    Настройка structlog: фильтр по уровню, console renderer, вывод в stderr.

    Args:
        level: Имя уровня (DEBUG/INFO/WARNING/ERROR/CRITICAL)
    """
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
