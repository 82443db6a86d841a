"""Domain types shared across rebound."""

from .exceptions import (
    DeadlineExceededError,
    ReboundError,
    RetryCancelledError,
    RetryError,
)

__all__ = [
    "ReboundError",
    "RetryCancelledError",
    "DeadlineExceededError",
    "RetryError",
]
