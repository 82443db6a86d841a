"""Tests for EventEmitter class."""

import pytest

from rebound.events import EventEmitter, NullEmitter


@pytest.fixture
def test_emitter(mock_logger):
    return EventEmitter(logger=mock_logger)


class TestEventEmitterSubscription:
    """Test event subscription and unsubscription."""

    def test_on_registers_handler(self, test_emitter):
        def handler(event):
            pass

        test_emitter.on("test.event", handler)

        assert handler in test_emitter._handlers["test.event"]

    def test_off_removes_handler(self, test_emitter):
        def handler(event):
            pass

        test_emitter.on("test.event", handler)
        test_emitter.off("test.event", handler)

        assert handler not in test_emitter._handlers.get("test.event", [])

    def test_off_handles_non_existent_handler_gracefully(self, test_emitter):
        def handler(event):
            pass

        test_emitter.off("test.event", handler)

        warning_msg = f"Handler {handler} not found for event test.event"
        test_emitter._logger.warning.assert_called_once_with(warning_msg)


class TestEventEmitterDispatch:
    def test_handlers_run_in_subscription_order(self, test_emitter):
        calls = []
        test_emitter.on("test.event", lambda e: calls.append(("first", e)))
        test_emitter.on("test.event", lambda e: calls.append(("second", e)))

        test_emitter.emit("test.event", {"key": "value"})

        assert calls == [("first", {"key": "value"}), ("second", {"key": "value"})]

    def test_other_event_types_not_dispatched(self, test_emitter):
        calls = []
        test_emitter.on("test.event", calls.append)

        test_emitter.emit("other.event", {})

        assert calls == []

    def test_failing_handler_is_logged_and_skipped(self, test_emitter):
        calls = []

        def broken(event):
            raise ValueError("handler failed")

        test_emitter.on("test.event", broken)
        test_emitter.on("test.event", calls.append)

        test_emitter.emit("test.event", "payload")

        assert calls == ["payload"]
        test_emitter._logger.error.assert_called_once()
        assert "handler failed" in test_emitter._logger.error.call_args[0][0]

    def test_handler_may_unsubscribe_during_emit(self, test_emitter):
        calls = []

        def once(event):
            calls.append(event)
            test_emitter.off("test.event", once)

        test_emitter.on("test.event", once)
        test_emitter.emit("test.event", 1)
        test_emitter.emit("test.event", 2)

        assert calls == [1]


class TestNullEmitter:
    def test_does_nothing(self):
        emitter = NullEmitter()
        calls = []

        emitter.on("test.event", calls.append)
        emitter.emit("test.event", {})
        emitter.off("test.event", calls.append)

        assert calls == []
