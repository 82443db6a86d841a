"""Events emitted by RetryHandler while driving a retry loop."""

from pydantic import Field

from .base import BaseEvent
from .error_info import ErrorInfo


class RetryEvent(BaseEvent):
    """Base class for retry lifecycle events."""

    event_type: str = Field(default="retry.base")


class RetryingEvent(RetryEvent):
    """Emitted after a failed attempt, before waiting for the next one.

    Never emitted for the attempt on which the policy returned Stop.
    """

    event_type: str = Field(default="retry.retrying")
    attempt: int = Field(ge=1, description="Number of the attempt that failed (1-indexed)")
    delay_seconds: float = Field(ge=0, description="Wait before the next attempt")
    error: ErrorInfo


class RetryExhaustedEvent(RetryEvent):
    """Emitted when the backoff policy stops the loop."""

    event_type: str = Field(default="retry.exhausted")
    attempts: int = Field(ge=1, description="Total attempts made")
    error: ErrorInfo


class RetryCancelledEvent(RetryEvent):
    """Emitted when the cancel token ends the loop."""

    event_type: str = Field(default="retry.cancelled")
    attempts: int = Field(ge=0, description="Attempts made before cancellation")
    reason: ErrorInfo
