"""Cancel tokens backed by threading and asyncio events."""

import asyncio
import contextlib
import threading
import time
import typing as t
from abc import ABC, abstractmethod

from ..domain.exceptions import DeadlineExceededError, RetryCancelledError
from .base import BaseAsyncCancelSignal, BaseCancelSignal


class _TokenState(ABC):
    """Reason bookkeeping and optional deadline shared by both tokens.

    The first of ``cancel()`` or the deadline to happen decides the reason;
    later calls never replace it.
    """

    def __init__(
        self, timeout: float | None, guard: t.ContextManager[t.Any]
    ) -> None:
        self._guard = guard
        self._reason: BaseException | None = None
        self._deadline = time.monotonic() + timeout if timeout is not None else None

    @abstractmethod
    def _set(self) -> None:
        pass

    @abstractmethod
    def _is_set(self) -> bool:
        pass

    def _settle(self, reason: BaseException) -> bool:
        with self._guard:
            if self._reason is not None:
                return False
            self._reason = reason
        self._set()
        return True

    def _expire(self) -> bool:
        self._settle(DeadlineExceededError("retry deadline exceeded"))
        return True

    def _deadline_passed(self) -> bool:
        if self._deadline is None or time.monotonic() < self._deadline:
            return False
        return self._expire()

    def _bounded(self, timeout: float) -> float:
        if self._deadline is None:
            return timeout
        return max(0.0, min(timeout, self._deadline - time.monotonic()))

    def cancel(self, reason: BaseException | None = None) -> bool:
        """Mark the token as cancelled.

        Args:
            reason: Exception the retry driver will raise. Defaults to
                RetryCancelledError.

        Returns:
            True if this call cancelled the token, False if it was already done
        """
        if self._deadline_passed():
            return False
        return self._settle(
            reason if reason is not None else RetryCancelledError("retry cancelled")
        )

    @property
    def is_cancelled(self) -> bool:
        return self._is_set() or self._deadline_passed()

    @property
    def reason(self) -> BaseException | None:
        return self._reason if self.is_cancelled else None

    @property
    def deadline(self) -> float | None:
        """Deadline on the ``time.monotonic`` clock, if any."""
        return self._deadline


class CancelToken(_TokenState, BaseCancelSignal):
    """Thread-safe cancel token.

    ``cancel`` may be called from any thread, including while another thread
    is blocked in ``wait``.

    Args:
        timeout: Seconds from construction after which the token cancels
            itself with DeadlineExceededError
    """

    def __init__(self, timeout: float | None = None) -> None:
        super().__init__(timeout, threading.Lock())
        self._event = threading.Event()

    def _set(self) -> None:
        self._event.set()

    def _is_set(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: float) -> bool:
        bounded = self._bounded(timeout)
        self._event.wait(bounded)
        # A wait shortened by the deadline ends at the deadline
        return self.is_cancelled or (bounded < timeout and self._expire())


class AsyncCancelToken(_TokenState, BaseAsyncCancelSignal):
    """Cancel token for code running on an asyncio event loop.

    ``cancel`` must be called from the loop's thread; use
    ``loop.call_soon_threadsafe(token.cancel)`` from elsewhere.

    Args:
        timeout: Seconds from construction after which the token cancels
            itself with DeadlineExceededError
    """

    def __init__(self, timeout: float | None = None) -> None:
        # Single-threaded by contract, so no lock
        super().__init__(timeout, contextlib.nullcontext())
        self._event = asyncio.Event()

    def _set(self) -> None:
        self._event.set()

    def _is_set(self) -> bool:
        return self._event.is_set()

    async def wait(self, timeout: float) -> bool:
        bounded = self._bounded(timeout)
        try:
            await asyncio.wait_for(self._event.wait(), bounded)
        except asyncio.TimeoutError:
            pass
        return self.is_cancelled or (bounded < timeout and self._expire())
