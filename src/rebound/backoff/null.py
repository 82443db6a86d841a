"""Null object backoff policies."""

from .base import STOP, BaseBackOff


class StopBackOff(BaseBackOff):
    """Never retries: the operation runs exactly once."""

    def reset(self) -> None:
        pass

    def next_backoff(self) -> float:
        return STOP


class ZeroBackOff(BaseBackOff):
    """Retries immediately and indefinitely.

    Pair with a cancel token, or an operation that eventually succeeds.
    """

    def reset(self) -> None:
        pass

    def next_backoff(self) -> float:
        return 0.0
