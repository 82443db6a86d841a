"""Event infrastructure - event emitter and event types."""

from .base import BaseEmitter
from .emitter import EventEmitter
from .models import (
    BaseEvent,
    ErrorInfo,
    RetryCancelledEvent,
    RetryEvent,
    RetryExhaustedEvent,
    RetryingEvent,
)
from .null import NullEmitter

__all__ = [
    # Base and implementations
    "BaseEmitter",
    "EventEmitter",
    "NullEmitter",
    # Models
    "BaseEvent",
    "ErrorInfo",
    "RetryEvent",
    "RetryingEvent",
    "RetryExhaustedEvent",
    "RetryCancelledEvent",
]
