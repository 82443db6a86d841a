from dataclasses import dataclass, fields
from enum import Enum
from typing import Any


class Environment(Enum):
    """Runtime environment for the application.

    Kept small and explicit to support simple environment-driven behavior
    without introducing configuration dependencies.
    """

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Log levels understood by the logging setup."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass(frozen=True)
class Settings:
    """Minimal settings container used to bootstrap the app.

    Keeps a stable shape that library code depends on while letting the
    host application decide how values are populated.
    """

    environment: Environment = Environment.PRODUCTION
    log_level: LogLevel = LogLevel.INFO


def build_settings(**overrides: Any) -> Settings:
    """Build Settings, ignoring overrides that are None.

    Unknown keys raise TypeError, same as the dataclass constructor.
    """
    known = {f.name for f in fields(Settings)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"Unknown settings: {', '.join(sorted(unknown))}")

    return Settings(**{k: v for k, v in overrides.items() if v is not None})
