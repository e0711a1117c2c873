"""
roster_admin.app

Composition root for the Roster Admin client.

Responsibilities:
- Select the directory backend from settings (remote HTTP or local store).
- Build the session store, notification queue and view-models and wire them together.
- Refresh the roster when the dashboard becomes active; reset it when the session ends.
- Own startup (store init + session restore) and shutdown (timers, engine, HTTP client).
"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import Any

from roster_admin.directory.base import EmployeeDirectory
from roster_admin.directory.http import HttpEmployeeDirectory
from roster_admin.directory.local import LocalEmployeeDirectory
from roster_admin.notifications.queue import NotificationQueue
from roster_admin.observability.logging import configure_logging, get_logger
from roster_admin.session.storage import FileTokenStorage, TokenStorage
from roster_admin.session.store import SessionStore
from roster_admin.settings import Settings
from roster_admin.viewmodels.login import LoginViewModel
from roster_admin.viewmodels.roster import RosterViewModel
from roster_admin.viewmodels.router import SessionGatedRouter, View

log = get_logger(__name__)


def build_directory(settings: Settings) -> EmployeeDirectory:
    if settings.backend == "http":
        return HttpEmployeeDirectory.from_settings(settings)
    return LocalEmployeeDirectory.from_settings(settings)


class RosterApp:
    def __init__(
        self,
        *,
        settings: Settings,
        directory: EmployeeDirectory,
        storage: TokenStorage,
    ) -> None:
        self.settings = settings
        self.directory = directory
        self.session = SessionStore(storage)
        self.notifications = NotificationQueue(timeout=settings.notification_timeout_seconds)
        self.router = SessionGatedRouter(self.session)
        self.login = LoginViewModel(
            directory=directory, session=self.session, notifications=self.notifications
        )
        self.roster = RosterViewModel(
            directory=directory, session=self.session, notifications=self.notifications
        )
        self._tasks: set[asyncio.Task[Any]] = set()
        self.router.subscribe(self._on_view_change)

    @property
    def view(self) -> View:
        return self.router.current_view

    async def start(self) -> View:
        if isinstance(self.directory, LocalEmployeeDirectory):
            await self.directory.initialize()
        # Rendering is gated on this: the router reports LOADING until it resolves.
        await self.session.restore()
        log.info("app_started", backend=self.settings.backend, view=self.view)
        return self.view

    def logout(self) -> None:
        self.session.logout()

    async def drain(self) -> None:
        """
        Wait for background work spawned by view changes (e.g. the dashboard's first refresh).
        """

        while pending := [t for t in self._tasks if not t.done()]:
            await asyncio.gather(*pending, return_exceptions=True)

    async def close(self) -> None:
        for task in list(self._tasks):
            task.cancel()
        await self.drain()
        self.notifications.clear()
        await self.directory.aclose()
        log.info("app_closed")

    def _on_view_change(self, view: View) -> None:
        if view is View.dashboard:
            self._spawn(self.roster.refresh())
        elif view is View.login:
            self.roster.reset()

    def _spawn(self, coro: Coroutine[Any, Any, Any]) -> None:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)


def create_app(
    *,
    settings: Settings,
    directory: EmployeeDirectory | None = None,
    storage: TokenStorage | None = None,
) -> RosterApp:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.env != "dev",
    )
    return RosterApp(
        settings=settings,
        directory=directory or build_directory(settings),
        storage=storage or FileTokenStorage(settings.session_file, slot=settings.session_slot),
    )


# --- Module Notes -----------------------------------------------------------
# Nothing in the view-models reaches for globals: every collaborator is handed
# in here, so tests build a `RosterApp` with in-memory storage and a local store.
