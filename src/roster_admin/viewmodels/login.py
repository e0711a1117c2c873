"""
roster_admin.viewmodels.login

Login form state.

Responsibilities:
- Exchange username/password for a session token and hand it to the session store.
- Surface rejected logins and transport failures as error notifications.
"""

from __future__ import annotations

from collections.abc import Callable

from roster_admin.directory.base import EmployeeDirectory
from roster_admin.directory.errors import DirectoryError
from roster_admin.events import Listeners
from roster_admin.notifications.queue import NotificationQueue
from roster_admin.observability.logging import get_logger
from roster_admin.session.store import SessionStore

log = get_logger(__name__)


class LoginViewModel:
    def __init__(
        self,
        *,
        directory: EmployeeDirectory,
        session: SessionStore,
        notifications: NotificationQueue,
    ) -> None:
        self._directory = directory
        self._session = session
        self._notifications = notifications
        self._listeners: Listeners[LoginViewModel] = Listeners()
        self._loading = False

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def button_label(self) -> str:
        return "Signing In..." if self._loading else "Sign In"

    def subscribe(self, listener: Callable[[LoginViewModel], None]) -> Callable[[], None]:
        return self._listeners.add(listener)

    async def submit(self, username: str, password: str) -> bool:
        if self._loading:
            return False

        self._loading = True
        self._listeners.notify(self)
        try:
            token = await self._directory.authenticate(username, password)
        except DirectoryError as e:
            self._notifications.error(e.message)
            return False
        finally:
            self._loading = False
            self._listeners.notify(self)

        self._session.login(token)
        log.info("login_succeeded", username=username)
        return True
