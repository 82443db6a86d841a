"""Pytest configuration and fixtures for rebound tests."""

import typing as t

import loguru
import pytest
from blockbuster import BlockBuster, blockbuster_ctx

from rebound.app import create_app
from rebound.backoff import STOP, BaseBackOff
from rebound.config.settings import Environment, LogLevel, Settings
from rebound.events import BaseEmitter, EventEmitter
from rebound.infrastructure.logging import reset_logging


@pytest.fixture(autouse=True)
def blockbuster() -> t.Iterator[BlockBuster]:
    """Detect blocking calls in async event loop during tests.

    This fixture automatically activates Blockbuster for all tests,
    which will raise a BlockingError if any blocking call (like
    time.sleep or threading.Event.wait) is made from rebound code
    while an event loop is running.
    """
    with blockbuster_ctx(scanned_modules=["rebound"]) as bb:
        yield bb


@pytest.fixture
def test_settings():
    """Provide test-specific settings."""
    return Settings(
        environment=Environment.TESTING,
        log_level=LogLevel.CRITICAL,  # Minimal logging during tests
    )


@pytest.fixture
def test_app(test_settings):
    """Provide a test app with clean logging state."""
    reset_logging()
    app = create_app(settings=test_settings)
    yield app
    reset_logging()


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    logger = mocker.Mock(spec=loguru.logger)
    return logger


@pytest.fixture
def mock_emitter(mocker):
    """Provide a mock event emitter for testing event emission."""
    emitter = mocker.Mock(spec=BaseEmitter)
    return emitter


@pytest.fixture
def real_emitter(mock_logger):
    """Provide a real EventEmitter for tests that subscribe handlers."""
    return EventEmitter(mock_logger)


class ScriptedBackOff(BaseBackOff):
    """Backoff that replays a fixed list of delays, then STOP.

    Records how often it was reset and asked for a delay.
    """

    def __init__(self, delays: t.Sequence[float]) -> None:
        self.delays = list(delays)
        self.resets = 0
        self.calls = 0
        self._index = 0

    def reset(self) -> None:
        self.resets += 1
        self._index = 0

    def next_backoff(self) -> float:
        self.calls += 1
        if self._index >= len(self.delays):
            return STOP
        delay = self.delays[self._index]
        self._index += 1
        return delay


@pytest.fixture
def scripted_backoff() -> t.Callable[..., ScriptedBackOff]:
    """Factory for ScriptedBackOff: ``scripted_backoff(0.01, 0.02)``."""

    def make(*delays: float) -> ScriptedBackOff:
        return ScriptedBackOff(delays)

    return make


class FlakyOperation:
    """Callable failing with a fresh numbered error until ``succeed_on``.

    ``succeed_on=None`` fails forever.
    """

    def __init__(self, succeed_on: int | None = None, result: t.Any = "success"):
        self.succeed_on = succeed_on
        self.result = result
        self.calls = 0
        self.errors: list[Exception] = []

    def __call__(self) -> t.Any:
        self.calls += 1
        if self.succeed_on is not None and self.calls >= self.succeed_on:
            return self.result
        error = ConnectionError(f"attempt {self.calls} failed")
        self.errors.append(error)
        raise error


class AsyncFlakyOperation(FlakyOperation):
    async def __call__(self) -> t.Any:  # type: ignore[override]
        return super().__call__()


@pytest.fixture
def flaky_operation() -> t.Callable[..., FlakyOperation]:
    return FlakyOperation


@pytest.fixture
def async_flaky_operation() -> t.Callable[..., AsyncFlakyOperation]:
    return AsyncFlakyOperation
