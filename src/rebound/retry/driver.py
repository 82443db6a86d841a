"""The retry loop.

``retry`` and ``aretry`` call an operation until it returns, the backoff
policy answers STOP, or the cancel token fires. Exactly one of three things
happens per call:

- the operation's return value is returned,
- the last operation exception is re-raised unchanged (policy exhausted),
- the cancel token's ``reason`` is raised.

Cancellation is checked before the first attempt and during each wait. It
never interrupts an operation that is already running.
"""

import asyncio
import time
import typing as t

from ..backoff import BaseBackOff
from ..cancellation import BaseAsyncCancelSignal, BaseCancelSignal
from ..domain.exceptions import RetryError

T = t.TypeVar("T")

Operation = t.Callable[[], T]
AsyncOperation = t.Callable[[], t.Awaitable[T]]
Notify = t.Callable[[Exception, float], None]


def _raise_reason(cancel: BaseCancelSignal | BaseAsyncCancelSignal) -> t.NoReturn:
    reason = cancel.reason
    if reason is None:
        raise RetryError("Cancel signal reported done without a reason")
    # Shared tokens raise the same instance; drop frames from earlier raises
    raise reason.with_traceback(None)


def retry(
    operation: Operation[T],
    backoff: BaseBackOff,
    *,
    notify: Notify | None = None,
    cancel: BaseCancelSignal | None = None,
) -> T:
    """Call ``operation`` until it succeeds, blocking between attempts.

    The operation runs at least once unless ``cancel`` is already done on
    entry. It is not assumed to be idempotent; nothing is deduplicated.

    Args:
        operation: Zero-argument callable. Raising an Exception is a failure.
        backoff: Policy asked for a delay after every failure. Reset on entry.
        notify: Called with ``(error, delay)`` before each wait. Never called
            for the failure that ends the loop.
        cancel: Signal that aborts the loop before the first attempt or
            during a wait.

    Returns:
        The value returned by the successful attempt

    Raises:
        Exception: The last operation error when the policy returns STOP,
            or ``cancel.reason`` when cancelled
    """
    if cancel is not None and cancel.is_cancelled:
        _raise_reason(cancel)

    backoff.reset()
    while True:
        try:
            return operation()
        except Exception as e:
            err = e

        delay = backoff.next_backoff()
        if delay < 0:
            raise err

        if notify is not None:
            notify(err, delay)

        if cancel is None:
            time.sleep(delay)
        elif cancel.wait(delay):
            _raise_reason(cancel)


async def aretry(
    operation: AsyncOperation[T],
    backoff: BaseBackOff,
    *,
    notify: Notify | None = None,
    cancel: BaseAsyncCancelSignal | None = None,
) -> T:
    """Await ``operation`` until it succeeds, sleeping cooperatively between attempts.

    Same contract as ``retry``. ``notify`` stays synchronous and runs on the
    event loop, so it should return promptly.
    """
    if cancel is not None and cancel.is_cancelled:
        _raise_reason(cancel)

    backoff.reset()
    while True:
        try:
            return await operation()
        except Exception as e:
            err = e

        delay = backoff.next_backoff()
        if delay < 0:
            raise err

        if notify is not None:
            notify(err, delay)

        if cancel is None:
            await asyncio.sleep(delay)
        elif await cancel.wait(delay):
            _raise_reason(cancel)


def retry_notify(operation: Operation[T], backoff: BaseBackOff, notify: Notify | None) -> T:
    return retry(operation, backoff, notify=notify)


def retry_notify_with_cancel(
    cancel: BaseCancelSignal | None,
    operation: Operation[T],
    backoff: BaseBackOff,
    notify: Notify | None,
) -> T:
    return retry(operation, backoff, notify=notify, cancel=cancel)
