"""Abstract backoff policy consumed by the retry driver."""

from abc import ABC, abstractmethod

STOP: float = -1.0
"""Returned by ``next_backoff`` to mean "do not retry again".

The driver treats any negative delay as STOP.
"""


class BaseBackOff(ABC):
    """Stateful source of successive retry delays.

    Implementations hold mutable state (attempt counters, elapsed time) and
    are not safe to share between concurrent retry loops. The driver calls
    ``reset`` once on entry and then ``next_backoff`` after every failed
    attempt.
    """

    @abstractmethod
    def reset(self) -> None:
        """Return the policy to its initial state."""
        pass

    @abstractmethod
    def next_backoff(self) -> float:
        """Delay in seconds before the next attempt, or STOP.

        After ``reset`` the first call returns the initial delay, or STOP
        straight away for a policy that allows no retries.
        """
        pass
