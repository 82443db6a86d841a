from .settings import Environment, LogLevel, Settings, build_settings

__all__ = ["Environment", "LogLevel", "Settings", "build_settings"]
