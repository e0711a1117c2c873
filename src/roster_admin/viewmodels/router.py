"""
roster_admin.viewmodels.router

Session-gated view switch.

Responsibilities:
- Map session state onto the view to display (loading / login / dashboard).
- Forward view changes to subscribers.
"""

from __future__ import annotations

import enum
from collections.abc import Callable

from roster_admin.events import Listeners
from roster_admin.session.store import SessionStore


class View(enum.StrEnum):
    loading = "LOADING"
    login = "LOGIN"
    dashboard = "DASHBOARD"


class SessionGatedRouter:
    def __init__(self, session: SessionStore) -> None:
        self._session = session
        self._listeners: Listeners[View] = Listeners()
        self._last = self.current_view
        session.subscribe(self._on_session_change)

    @property
    def current_view(self) -> View:
        if self._session.loading:
            return View.loading
        return View.dashboard if self._session.is_authenticated else View.login

    def subscribe(self, listener: Callable[[View], None]) -> Callable[[], None]:
        return self._listeners.add(listener)

    def _on_session_change(self, _: SessionStore) -> None:
        view = self.current_view
        # Only transitions are forwarded; a repeated logout is not a view change.
        if view is not self._last:
            self._last = view
            self._listeners.notify(view)
