"""
roster_admin.notifications.queue

Transient user-facing messages with per-message auto-expiry.

Responsibilities:
- Append notifications in insertion order with unique ids.
- Schedule one cancellable removal timer per notification.
- Remove on explicit dismissal, cancelling the pending timer.
"""

from __future__ import annotations

import asyncio
import enum
import uuid
from collections.abc import Callable
from dataclasses import dataclass

from roster_admin.events import Listeners
from roster_admin.observability.logging import get_logger

log = get_logger(__name__)

DEFAULT_TIMEOUT_SECONDS = 5.0


class NotificationKind(enum.StrEnum):
    success = "success"
    error = "error"


@dataclass(frozen=True, slots=True)
class Notification:
    id: str
    text: str
    kind: NotificationKind


NotificationListener = Callable[[tuple[Notification, ...]], None]


class NotificationQueue:
    """
    Must be used from within a running event loop: `show` schedules its
    expiry timer on the current loop.
    """

    def __init__(self, *, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> None:
        self._timeout = timeout
        self._items: list[Notification] = []
        self._timers: dict[str, asyncio.TimerHandle] = {}
        self._listeners: Listeners[tuple[Notification, ...]] = Listeners()

    @property
    def items(self) -> tuple[Notification, ...]:
        return tuple(self._items)

    def show(self, text: str, kind: NotificationKind | str) -> Notification:
        notification = Notification(id=uuid.uuid4().hex, text=text, kind=NotificationKind(kind))
        self._items.append(notification)
        loop = asyncio.get_running_loop()
        self._timers[notification.id] = loop.call_later(
            self._timeout, self._expire, notification.id
        )
        log.debug("notification_shown", notification_id=notification.id, kind=notification.kind)
        self._emit()
        return notification

    def success(self, text: str) -> Notification:
        return self.show(text, NotificationKind.success)

    def error(self, text: str) -> Notification:
        return self.show(text, NotificationKind.error)

    def dismiss(self, notification_id: str) -> None:
        timer = self._timers.pop(notification_id, None)
        if timer is not None:
            timer.cancel()
        self._remove(notification_id)

    def clear(self) -> None:
        for timer in self._timers.values():
            timer.cancel()
        self._timers.clear()
        if self._items:
            self._items.clear()
            self._emit()

    def subscribe(self, listener: NotificationListener) -> Callable[[], None]:
        return self._listeners.add(listener)

    def _expire(self, notification_id: str) -> None:
        self._timers.pop(notification_id, None)
        self._remove(notification_id)

    def _remove(self, notification_id: str) -> None:
        remaining = [n for n in self._items if n.id != notification_id]
        if len(remaining) != len(self._items):
            self._items = remaining
            self._emit()

    def _emit(self) -> None:
        self._listeners.notify(self.items)


# --- Module Notes -----------------------------------------------------------
# Storage order is insertion order; a view that shows newest-first reverses `items`.
