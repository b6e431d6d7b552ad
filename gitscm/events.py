"""Change notification primitives.

Contains:
- Disposable: Runs a cleanup callback at most once
- EventEmitter: Synchronous single-producer, multi-subscriber broadcast
"""

from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")

Listener = Callable[[T], None]


class Disposable:
    """Handle returned by a subscription; ``dispose()`` is idempotent."""

    def __init__(self, callback: Optional[Callable[[], None]] = None):
        self._callback = callback

    @property
    def is_disposed(self) -> bool:
        return self._callback is None

    def dispose(self) -> None:
        callback, self._callback = self._callback, None
        if callback is not None:
            callback()


class EventEmitter(Generic[T]):
    """Broadcasts values to subscribed listeners.

    Listeners subscribe by calling ``emitter.event(listener)`` and are
    invoked synchronously, in subscription order, on every ``fire``.
    Exceptions raised by a listener propagate to the caller of ``fire``.
    """

    def __init__(self):
        self._listeners: list[Listener] = []
        self._disposed = False

    def event(self, listener: Listener) -> Disposable:
        """Subscribe a listener.

        Args:
            listener: Called with each fired value.

        Returns:
            A Disposable that removes the listener.
        """
        if self._disposed:
            return Disposable()

        self._listeners.append(listener)
        return Disposable(lambda: self._remove(listener))

    def fire(self, value: T) -> None:
        """Deliver a value to every listener subscribed at call time."""
        for listener in list(self._listeners):
            listener(value)

    def dispose(self) -> None:
        """Drop all listeners. Later subscriptions and fires are no-ops."""
        self._disposed = True
        self._listeners.clear()

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def _remove(self, listener: Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            # Already dropped by dispose()
            pass
