"""rebound: retry an operation under an abstract backoff policy."""

from .app import App, create_app
from .backoff import STOP, BaseBackOff, StopBackOff, ZeroBackOff
from .cancellation import AsyncCancelToken, CancelToken
from .domain.exceptions import (
    DeadlineExceededError,
    ReboundError,
    RetryCancelledError,
    RetryError,
)
from .retry import (
    NullRetryHandler,
    RetryHandler,
    aretry,
    retry,
    retry_notify,
    retry_notify_with_cancel,
)

__all__ = [
    "App",
    "create_app",
    "STOP",
    "BaseBackOff",
    "StopBackOff",
    "ZeroBackOff",
    "CancelToken",
    "AsyncCancelToken",
    "ReboundError",
    "RetryCancelledError",
    "DeadlineExceededError",
    "RetryError",
    "retry",
    "aretry",
    "retry_notify",
    "retry_notify_with_cancel",
    "RetryHandler",
    "NullRetryHandler",
]
