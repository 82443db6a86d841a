"""Event data models."""

from .base import BaseEvent
from .error_info import ErrorInfo
from .retry import RetryCancelledEvent, RetryEvent, RetryExhaustedEvent, RetryingEvent

__all__ = [
    "BaseEvent",
    "ErrorInfo",
    "RetryEvent",
    "RetryingEvent",
    "RetryExhaustedEvent",
    "RetryCancelledEvent",
]
