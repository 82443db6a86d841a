"""Retry handler driving a backoff policy, with logging and events."""

import typing as t

from ..backoff import BaseBackOff
from ..cancellation import BaseAsyncCancelSignal, BaseCancelSignal
from ..events import (
    BaseEmitter,
    ErrorInfo,
    EventEmitter,
    RetryCancelledEvent,
    RetryExhaustedEvent,
    RetryingEvent,
)
from ..infrastructure.logging import get_logger
from .base import BaseRetryHandler
from .driver import Notify, aretry, retry

if t.TYPE_CHECKING:
    import loguru

T = t.TypeVar("T")


class _Attempts:
    """Per-call bookkeeping: attempt count, last error, retry reporting."""

    def __init__(self, handler: "RetryHandler", notify: Notify | None) -> None:
        self.handler = handler
        self.notify = notify
        self.count = 0
        self.last_error: Exception | None = None

    def record(self, error: Exception) -> None:
        self.last_error = error

    def on_retry(self, error: Exception, delay: float) -> None:
        """Log, emit ``retry.retrying``, then call the user's notify.

        Runs in that order. An exception from the emitter propagates and the
        user's notify is not called for that attempt.
        """
        self.handler.logger.warning(
            f"Retrying operation (attempt {self.count + 1}) in {delay:.2f}s: {error}"
        )
        self.handler.emitter.emit(
            "retry.retrying",
            RetryingEvent(
                attempt=self.count,
                delay_seconds=delay,
                error=ErrorInfo.from_exception(error),
            ),
        )
        if self.notify is not None:
            self.notify(error, delay)


class RetryHandler(BaseRetryHandler):
    """Retries operations according to a backoff policy.

    The handler owns ``backoff`` and resets it at the start of every call,
    so one handler must not run two retry loops at the same time.
    """

    def __init__(
        self,
        backoff: BaseBackOff,
        logger: "loguru.Logger | None" = None,
        emitter: BaseEmitter | None = None,
    ) -> None:
        """
        Initialise retry handler.

        Args:
            backoff: Policy producing delays between attempts
            logger: Logger for recording retry events.
                    If None, a logger bound to this module is used.
            emitter: Event emitter for broadcasting retry events.
                    If None, a new EventEmitter will be created.
        """
        self.backoff = backoff
        self.logger = logger if logger is not None else get_logger(__name__)
        self.emitter = emitter if emitter is not None else EventEmitter(self.logger)

    async def execute_with_retry(
        self,
        operation: t.Callable[[], t.Awaitable[T]],
        *,
        notify: Notify | None = None,
        cancel: BaseAsyncCancelSignal | None = None,
    ) -> T:
        attempts = _Attempts(self, notify)

        async def attempt() -> T:
            attempts.count += 1
            try:
                return await operation()
            except Exception as e:
                attempts.record(e)
                raise

        try:
            return await aretry(
                attempt, self.backoff, notify=attempts.on_retry, cancel=cancel
            )
        except Exception as e:
            self._report_failure(e, attempts, cancel)
            raise

    def execute_with_retry_sync(
        self,
        operation: t.Callable[[], T],
        *,
        notify: Notify | None = None,
        cancel: BaseCancelSignal | None = None,
    ) -> T:
        attempts = _Attempts(self, notify)

        def attempt() -> T:
            attempts.count += 1
            try:
                return operation()
            except Exception as e:
                attempts.record(e)
                raise

        try:
            return retry(attempt, self.backoff, notify=attempts.on_retry, cancel=cancel)
        except Exception as e:
            self._report_failure(e, attempts, cancel)
            raise

    def _report_failure(
        self,
        error: Exception,
        attempts: _Attempts,
        cancel: BaseCancelSignal | BaseAsyncCancelSignal | None,
    ) -> None:
        # Anything else (e.g. a failing notify callback) propagates unreported
        if cancel is not None and cancel.is_cancelled and error is cancel.reason:
            self.logger.info(
                f"Retry cancelled after {attempts.count} attempts: {error}"
            )
            self.emitter.emit(
                "retry.cancelled",
                RetryCancelledEvent(
                    attempts=attempts.count, reason=ErrorInfo.from_exception(error)
                ),
            )
        elif error is attempts.last_error:
            self.logger.error(
                f"Operation failed after {attempts.count} attempts: {error}"
            )
            self.emitter.emit(
                "retry.exhausted",
                RetryExhaustedEvent(
                    attempts=attempts.count, error=ErrorInfo.from_exception(error)
                ),
            )
