"""Null object implementation of retry handler."""

from typing import Awaitable, Callable, TypeVar

from ..backoff import StopBackOff
from ..cancellation import BaseAsyncCancelSignal, BaseCancelSignal
from .base import BaseRetryHandler
from .driver import aretry, retry

T = TypeVar("T")


class NullRetryHandler(BaseRetryHandler):
    """Runs the operation once and never retries.

    A cancel token that is already done still prevents the call. ``notify``
    is accepted for interface compatibility and never called.
    """

    async def execute_with_retry(
        self,
        operation: Callable[[], Awaitable[T]],
        *,
        notify: Callable[[Exception, float], None] | None = None,
        cancel: BaseAsyncCancelSignal | None = None,
    ) -> T:
        return await aretry(operation, StopBackOff(), cancel=cancel)

    def execute_with_retry_sync(
        self,
        operation: Callable[[], T],
        *,
        notify: Callable[[Exception, float], None] | None = None,
        cancel: BaseCancelSignal | None = None,
    ) -> T:
        return retry(operation, StopBackOff(), cancel=cancel)
