"""Application bootstrap: settings plus logging."""

import typing as t
from dataclasses import dataclass

from .config.settings import Settings
from .infrastructure.logging import get_logger, setup_logging

if t.TYPE_CHECKING:
    import loguru


@dataclass(frozen=True)
class App:
    settings: Settings
    logger: "loguru.Logger"


def create_app(settings: Settings | None = None) -> App:
    """Create the application container and configure logging.

    Args:
        settings: Settings to use. Defaults to ``Settings()``.
    """
    settings = settings if settings is not None else Settings()
    setup_logging(settings)
    return App(settings=settings, logger=get_logger("rebound"))
