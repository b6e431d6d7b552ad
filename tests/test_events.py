"""Tests for gitscm.events module."""

import pytest

from gitscm.events import Disposable, EventEmitter


class TestDisposable:
    """Tests for Disposable."""

    def test_runs_callback_once(self):
        """Test that dispose is idempotent."""
        calls = []
        disposable = Disposable(lambda: calls.append(1))

        disposable.dispose()
        disposable.dispose()

        assert calls == [1]
        assert disposable.is_disposed

    def test_without_callback(self):
        """Test that an empty Disposable is already disposed."""
        disposable = Disposable()
        disposable.dispose()
        assert disposable.is_disposed


class TestEventEmitter:
    """Tests for EventEmitter."""

    def test_fire_reaches_all_listeners_in_order(self):
        """Test broadcast to multiple subscribers."""
        emitter = EventEmitter()
        received = []
        emitter.event(lambda v: received.append(("first", v)))
        emitter.event(lambda v: received.append(("second", v)))

        emitter.fire(42)

        assert received == [("first", 42), ("second", 42)]

    def test_unsubscribe(self):
        """Test that a disposed subscription stops receiving values."""
        emitter = EventEmitter()
        received = []
        subscription = emitter.event(received.append)

        emitter.fire(1)
        subscription.dispose()
        emitter.fire(2)

        assert received == [1]
        assert emitter.listener_count == 0

    def test_unsubscribe_during_fire(self):
        """Test that a listener may unsubscribe while being notified."""
        emitter = EventEmitter()
        received = []
        subscription = None

        def once(value):
            received.append(value)
            subscription.dispose()

        subscription = emitter.event(once)
        emitter.event(lambda v: received.append(v * 10))

        emitter.fire(1)
        emitter.fire(2)

        assert received == [1, 10, 20]

    def test_dispose_drops_listeners(self):
        """Test that a disposed emitter no longer delivers or subscribes."""
        emitter = EventEmitter()
        received = []
        subscription = emitter.event(received.append)

        emitter.dispose()
        emitter.fire(1)
        late = emitter.event(received.append)
        emitter.fire(2)

        assert received == []
        assert late.is_disposed
        # Disposing an old subscription after the emitter is safe
        subscription.dispose()

    def test_listener_errors_propagate(self):
        """Test that exceptions from listeners reach the caller."""
        emitter = EventEmitter()

        def broken(_):
            raise RuntimeError("boom")

        emitter.event(broken)

        with pytest.raises(RuntimeError, match="boom"):
            emitter.fire(None)
