#!/usr/bin/env python3
"""
01_basic_retry.py - Retrying a flaky call with a custom backoff policy

Demonstrates:
- Implementing BaseBackOff (doubling delay, bounded attempt count)
- notify callback for each retried failure
- Exhaustion re-raising the last error unchanged
"""

from rebound import STOP, BaseBackOff, retry


class DoublingBackOff(BaseBackOff):
    """0.1s, 0.2s, 0.4s, ... for at most ``max_retries`` retries."""

    def __init__(self, initial: float = 0.1, max_retries: int = 3) -> None:
        self.initial = initial
        self.max_retries = max_retries
        self.reset()

    def reset(self) -> None:
        self._retries = 0

    def next_backoff(self) -> float:
        if self._retries >= self.max_retries:
            return STOP
        delay = self.initial * (2**self._retries)
        self._retries += 1
        return delay


def main() -> None:
    calls = 0

    def fetch() -> str:
        nonlocal calls
        calls += 1
        if calls < 3:
            raise ConnectionError(f"connection refused (call {calls})")
        return "payload"

    def on_retry(error: Exception, delay: float) -> None:
        print(f"  {error} - retrying in {delay:.1f}s")

    print("Succeeds on the third call:")
    print(f"  result: {retry(fetch, DoublingBackOff(), notify=on_retry)}\n")

    def always_down() -> str:
        raise ConnectionError("service unavailable")

    print("Never succeeds, two retries allowed:")
    try:
        retry(always_down, DoublingBackOff(max_retries=2), notify=on_retry)
    except ConnectionError as e:
        print(f"  gave up: {e}")


if __name__ == "__main__":
    main()
