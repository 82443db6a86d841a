"""Tests for NullRetryHandler."""

import pytest

from rebound.cancellation import AsyncCancelToken, CancelToken
from rebound.domain.exceptions import RetryCancelledError
from rebound.retry import NullRetryHandler


@pytest.fixture
def null_retry_handler():
    """Provide a NullRetryHandler instance for testing."""
    return NullRetryHandler()


class TestNullRetryHandler:
    """Test NullRetryHandler null object implementation."""

    @pytest.mark.asyncio
    async def test_executes_operation_without_retry(
        self, null_retry_handler, async_flaky_operation
    ):
        operation = async_flaky_operation(succeed_on=1, result="result")

        result = await null_retry_handler.execute_with_retry(operation)

        assert result == "result"
        assert operation.calls == 1

    @pytest.mark.asyncio
    async def test_propagates_exceptions(self, null_retry_handler, async_flaky_operation, mocker):
        operation = async_flaky_operation(succeed_on=2)
        notify = mocker.Mock()

        with pytest.raises(ConnectionError, match="attempt 1 failed"):
            await null_retry_handler.execute_with_retry(operation, notify=notify)

        assert operation.calls == 1  # Called only once, no retry on error
        notify.assert_not_called()

    def test_sync_propagates_exceptions(self, null_retry_handler, flaky_operation):
        operation = flaky_operation(succeed_on=2)

        with pytest.raises(ConnectionError):
            null_retry_handler.execute_with_retry_sync(operation)

        assert operation.calls == 1

    @pytest.mark.asyncio
    async def test_honours_pre_cancelled_token(
        self, null_retry_handler, async_flaky_operation
    ):
        token = AsyncCancelToken()
        token.cancel()
        operation = async_flaky_operation(succeed_on=1)

        with pytest.raises(RetryCancelledError):
            await null_retry_handler.execute_with_retry(operation, cancel=token)

        assert operation.calls == 0

    def test_sync_honours_pre_cancelled_token(self, null_retry_handler, flaky_operation):
        token = CancelToken()
        token.cancel()

        with pytest.raises(RetryCancelledError):
            null_retry_handler.execute_with_retry_sync(flaky_operation(), cancel=token)
