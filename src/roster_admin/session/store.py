"""
roster_admin.session.store

Authentication session state.

Responsibilities:
- Hold the current token and the one-shot `loading` flag.
- Restore the token at startup; persist on login; clear on logout.
- Degrade to in-memory operation when the token storage fails (logged, never raised).
- Notify subscribers after every state change.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from roster_admin.events import Listeners
from roster_admin.observability.logging import get_logger
from roster_admin.session.storage import TokenStorage, TokenStorageError

log = get_logger(__name__)

SessionListener = Callable[["SessionStore"], None]


class SessionStore:
    def __init__(self, storage: TokenStorage) -> None:
        self._storage = storage
        self._token: str | None = None
        self._loading = True
        self._listeners: Listeners[SessionStore] = Listeners()

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def is_authenticated(self) -> bool:
        return bool(self._token)

    async def restore(self) -> str | None:
        if not self._loading:
            return self._token

        try:
            # Storage backends are blocking; keep the event loop free while reading.
            stored = await asyncio.to_thread(self._storage.read)
        except TokenStorageError as e:
            log.warning("session_restore_failed", error=str(e))
            stored = None
        finally:
            self._loading = False

        if stored:
            self._token = stored
        log.info("session_restored", authenticated=self.is_authenticated)
        self._emit()
        return self._token

    def login(self, token: str) -> None:
        self._token = token
        try:
            self._storage.write(token)
        except TokenStorageError as e:
            log.warning("session_persist_failed", error=str(e))
        self._emit()

    def logout(self) -> None:
        self._token = None
        try:
            self._storage.clear()
        except TokenStorageError as e:
            log.warning("session_clear_failed", error=str(e))
        self._emit()

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        return self._listeners.add(listener)

    def _emit(self) -> None:
        self._listeners.notify(self)


# --- Module Notes -----------------------------------------------------------
# `loading` only ever goes True -> False; `restore()` after that returns the
# current token without touching storage again.
