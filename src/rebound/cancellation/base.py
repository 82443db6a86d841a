"""Interfaces for cancellation signals read by the retry driver.

A signal becomes done at most once and stays done. The driver only reads
it: before the first attempt and while waiting between attempts.
"""

from abc import ABC, abstractmethod


class BaseCancelSignal(ABC):
    """Cancellation signal for the blocking driver."""

    @property
    @abstractmethod
    def is_cancelled(self) -> bool:
        pass

    @property
    @abstractmethod
    def reason(self) -> BaseException | None:
        """Exception the driver raises once cancelled, None before that."""
        pass

    @abstractmethod
    def wait(self, timeout: float) -> bool:
        """Block up to ``timeout`` seconds for cancellation.

        Returns:
            True if the signal is done when the call returns
        """
        pass


class BaseAsyncCancelSignal(ABC):
    """Cancellation signal for the asyncio driver."""

    @property
    @abstractmethod
    def is_cancelled(self) -> bool:
        pass

    @property
    @abstractmethod
    def reason(self) -> BaseException | None:
        """Exception the driver raises once cancelled, None before that."""
        pass

    @abstractmethod
    async def wait(self, timeout: float) -> bool:
        """Suspend up to ``timeout`` seconds for cancellation.

        Returns:
            True if the signal is done when the call returns
        """
        pass
