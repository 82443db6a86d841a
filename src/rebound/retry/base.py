"""Base interface for retry handlers."""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, TypeVar

from ..cancellation import BaseAsyncCancelSignal, BaseCancelSignal

T = TypeVar("T")


class BaseRetryHandler(ABC):
    """Abstract base class for retry handlers.

    This interface defines the contract for retry handlers, allowing
    different retry strategies (e.g., backoff-driven, no retry)
    to be used interchangeably via dependency injection.
    """

    @abstractmethod
    async def execute_with_retry(
        self,
        operation: Callable[[], Awaitable[T]],
        *,
        notify: Callable[[Exception, float], None] | None = None,
        cancel: BaseAsyncCancelSignal | None = None,
    ) -> T:
        """Execute an async operation with retry logic.

        Args:
            operation: The async callable to execute.
            notify: Optional callback receiving each retried error and the
                delay before the next attempt.
            cancel: Optional signal that aborts waiting between attempts.

        Returns:
            The result of the operation.

        Raises:
            Exception: The last operation error, or the cancel reason.
        """
        pass

    @abstractmethod
    def execute_with_retry_sync(
        self,
        operation: Callable[[], T],
        *,
        notify: Callable[[Exception, float], None] | None = None,
        cancel: BaseCancelSignal | None = None,
    ) -> T:
        """Blocking counterpart of ``execute_with_retry``."""
        pass
