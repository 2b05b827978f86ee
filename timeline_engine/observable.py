"""Push-based snapshot channel."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")

Subscriber = Callable[[T], None]


class SnapshotSubject(Generic[T]):
    """Holds the latest snapshot and pushes every new one to subscribers.

    A new subscriber receives the current value right away. Publication is
    synchronous and delivers the full value, never a diff.
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._subscribers: list[Subscriber] = []

    @property
    def value(self) -> T:
        return self._value

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback`` and return a function that unregisters it."""

        self._subscribers.append(callback)
        callback(self._value)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def publish(self, value: T) -> None:
        self._value = value
        for callback in list(self._subscribers):
            callback(value)
