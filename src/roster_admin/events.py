"""
roster_admin.events

Minimal synchronous change-notification helper shared by stateful components.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class Listeners(Generic[T]):
    def __init__(self) -> None:
        self._items: list[Callable[[T], None]] = []

    def add(self, listener: Callable[[T], None]) -> Callable[[], None]:
        """
        Register `listener`; the returned callable unregisters it (idempotent).
        """

        self._items.append(listener)

        def remove() -> None:
            if listener in self._items:
                self._items.remove(listener)

        return remove

    def notify(self, value: T) -> None:
        # Copy so listeners may unsubscribe while being notified.
        for listener in list(self._items):
            listener(value)
