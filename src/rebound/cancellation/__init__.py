"""Level-triggered cancellation signals for retry loops."""

from .base import BaseAsyncCancelSignal, BaseCancelSignal
from .token import AsyncCancelToken, CancelToken

__all__ = [
    "BaseCancelSignal",
    "BaseAsyncCancelSignal",
    "CancelToken",
    "AsyncCancelToken",
]
