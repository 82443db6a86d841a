"""Retry driver and handlers."""

from .base import BaseRetryHandler
from .driver import (
    AsyncOperation,
    Notify,
    Operation,
    aretry,
    retry,
    retry_notify,
    retry_notify_with_cancel,
)
from .handler import RetryHandler
from .null import NullRetryHandler

__all__ = [
    # Driver
    "retry",
    "aretry",
    "retry_notify",
    "retry_notify_with_cancel",
    "Operation",
    "AsyncOperation",
    "Notify",
    # Handlers
    "BaseRetryHandler",
    "RetryHandler",
    "NullRetryHandler",
]
