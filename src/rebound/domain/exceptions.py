"""Custom exceptions for rebound."""


class ReboundError(Exception):
    """Base exception for rebound errors."""

    pass


class RetryCancelledError(ReboundError):
    """Raised when a retry loop is cancelled through its cancel token.

    This is the default reason carried by a cancelled token. Callers may
    cancel with their own exception instead, in which case that exception
    is raised by the driver.
    """

    pass


class DeadlineExceededError(RetryCancelledError):
    """Raised when a cancel token's deadline passes before the loop ends."""

    pass


class RetryError(ReboundError):
    """Raised when a cancel signal reports done but carries no reason.

    This indicates a broken BaseCancelSignal implementation: the driver
    has nothing to raise for the cancellation.
    """

    pass
