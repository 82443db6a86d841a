"""Logging setup built on loguru.

Library code asks for a logger with ``get_logger(__name__)``. The first call
configures a default sink when the host application has not done so through
``setup_logging`` or ``configure_logger``.
"""

import sys
import typing as t

from loguru import logger

from ..config.settings import Environment, LogLevel, Settings

if t.TYPE_CHECKING:
    import loguru

_DEVELOPMENT_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
_PRODUCTION_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[name]} - {message}"
)

_configured = False


def configure_logger(
    level: LogLevel | str = LogLevel.INFO,
    environment: Environment = Environment.PRODUCTION,
) -> None:
    """Replace all loguru sinks with a single stderr sink.

    Args:
        level: Minimum level to emit
        environment: Selects the output format. Development gets colours
            and backtraces, everything else a plain single-line format.
    """
    global _configured

    level_name = level.value if isinstance(level, LogLevel) else str(level).upper()
    is_dev = environment == Environment.DEVELOPMENT

    logger.remove()
    logger.configure(extra={"name": "rebound"})
    logger.add(
        sys.stderr,
        level=level_name,
        format=_DEVELOPMENT_FORMAT if is_dev else _PRODUCTION_FORMAT,
        colorize=is_dev,
        backtrace=is_dev,
        diagnose=is_dev,
    )
    _configured = True


def setup_logging(settings: Settings) -> None:
    """Configure logging from application settings."""
    configure_logger(level=settings.log_level, environment=settings.environment)


def is_configured() -> bool:
    return _configured


def reset_logging() -> None:
    """Drop all sinks so the next get_logger call reconfigures from defaults."""
    global _configured

    logger.remove()
    _configured = False


def get_logger(name: str) -> "loguru.Logger":
    """Return a logger bound to ``name``, configuring defaults if needed."""
    if not _configured:
        configure_logger()
    return logger.bind(name=name)
