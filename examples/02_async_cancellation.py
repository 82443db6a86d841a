#!/usr/bin/env python3
"""
02_async_cancellation.py - RetryHandler with events and a cancel token

Demonstrates:
- RetryHandler logging and retry.* events
- AsyncCancelToken aborting a long backoff wait
- Deadline-based tokens
"""

import asyncio

from rebound import AsyncCancelToken, RetryCancelledError, RetryHandler, ZeroBackOff
from rebound.app import create_app
from rebound.backoff import BaseBackOff
from rebound.config import Environment, LogLevel, Settings
from rebound.events import EventEmitter, RetryingEvent


class FixedBackOff(BaseBackOff):
    def __init__(self, delay: float) -> None:
        self.delay = delay

    def reset(self) -> None:
        pass

    def next_backoff(self) -> float:
        return self.delay


def on_retrying(event: RetryingEvent) -> None:
    print(f"  event: attempt {event.attempt} failed, next in {event.delay_seconds}s")


async def unreachable() -> None:
    raise ConnectionError("host unreachable")


async def main() -> None:
    app = create_app(Settings(environment=Environment.DEVELOPMENT, log_level=LogLevel.INFO))
    emitter = EventEmitter(app.logger)
    emitter.on("retry.retrying", on_retrying)

    print("Cancelled from outside during a 10s wait:")
    token = AsyncCancelToken()
    asyncio.get_running_loop().call_later(0.5, token.cancel)
    handler = RetryHandler(FixedBackOff(10.0), app.logger, emitter)
    try:
        await handler.execute_with_retry(unreachable, cancel=token)
    except RetryCancelledError as e:
        print(f"  stopped: {e}\n")

    print("Retrying immediately until a 0.2s deadline passes:")
    calls = 0

    async def counted() -> None:
        nonlocal calls
        calls += 1
        await asyncio.sleep(0.05)
        await unreachable()

    try:
        await RetryHandler(ZeroBackOff(), app.logger).execute_with_retry(
            counted, cancel=AsyncCancelToken(timeout=0.2)
        )
    except RetryCancelledError as e:
        print(f"  stopped after {calls} calls: {e}")


if __name__ == "__main__":
    asyncio.run(main())
