"""In-process event emitter with synchronous handlers."""

import typing as t
from collections import defaultdict
from typing import Any, Callable

from .base import BaseEmitter

if t.TYPE_CHECKING:
    import loguru


class EventEmitter(BaseEmitter):
    """Dispatches events to subscribed handlers in subscription order.

    Handlers run on the emitting thread, so they delay whatever emitted the
    event (for retries, the next backoff wait). A handler that raises is
    logged and skipped; the remaining handlers still run.
    """

    def __init__(self, logger: "loguru.Logger") -> None:
        self._logger = logger
        self._handlers: dict[str, list[Callable[[Any], None]]] = defaultdict(list)

    def on(self, event_type: str, handler: Callable[[Any], None]) -> None:
        self._handlers[event_type].append(handler)

    def off(self, event_type: str, handler: Callable[[Any], None]) -> None:
        try:
            self._handlers[event_type].remove(handler)
        except ValueError:
            self._logger.warning(f"Handler {handler} not found for event {event_type}")

    def emit(self, event_type: str, event_data: Any) -> None:
        # Copy so handlers may unsubscribe while being dispatched
        for handler in list(self._handlers.get(event_type, ())):
            try:
                handler(event_data)
            except Exception as e:
                self._logger.error(f"Error in handler for event {event_type}: {e}")
