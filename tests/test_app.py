"""
tests.test_app

End-to-end flows through the composition root with the local store.

Responsibilities:
- Session-gated routing (loading -> login -> dashboard -> login).
- Login view-model outcomes.
- The seeded-roster create/delete scenario driven through the view-models.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from fakes import FakeDirectory

from roster_admin.app import RosterApp, build_directory, create_app
from roster_admin.directory.errors import TransportError
from roster_admin.directory.http import HttpEmployeeDirectory
from roster_admin.directory.local import LocalEmployeeDirectory
from roster_admin.notifications.queue import NotificationKind
from roster_admin.session.storage import MemoryTokenStorage
from roster_admin.settings import Settings
from roster_admin.viewmodels.router import View


@pytest.fixture
def storage() -> MemoryTokenStorage:
    return MemoryTokenStorage()


@pytest_asyncio.fixture
async def app(settings: Settings, storage: MemoryTokenStorage) -> AsyncIterator[RosterApp]:
    roster_app = create_app(settings=settings, storage=storage)
    try:
        yield roster_app
    finally:
        await roster_app.close()


@pytest.mark.asyncio
async def test_view_is_loading_until_session_restored(app: RosterApp) -> None:
    assert app.view is View.loading
    assert await app.start() is View.login


@pytest.mark.asyncio
async def test_rejected_login_stays_on_login_view(app: RosterApp) -> None:
    await app.start()

    assert await app.login.submit("admin", "wrong") is False

    assert app.view is View.login
    assert app.login.loading is False
    assert app.login.button_label == "Sign In"
    assert app.notifications.items[-1].kind is NotificationKind.error
    assert app.notifications.items[-1].text == "Invalid username or password."


@pytest.mark.asyncio
async def test_login_opens_dashboard_and_loads_roster(
    app: RosterApp, storage: MemoryTokenStorage
) -> None:
    await app.start()

    assert await app.login.submit("admin", "password") is True
    assert app.view is View.dashboard
    assert storage.token == app.session.token

    await app.drain()
    assert len(app.roster.employees) == 5


@pytest.mark.asyncio
async def test_seeded_roster_scenario(app: RosterApp) -> None:
    await app.start()
    await app.login.submit("admin", "password")
    await app.drain()

    app.roster.open_create()
    assert await app.roster.submit(
        {"name": "Zoe", "email": "z@x.com", "position": "Intern", "department": "Ops"}
    )
    assert len(app.roster.employees) == 6
    zoe = next(e for e in app.roster.employees if e.name == "Zoe")
    assert zoe.id not in {e.id for e in app.roster.employees if e.name != "Zoe"}

    app.roster.request_remove(zoe)
    assert await app.roster.remove(zoe.id)
    assert len(app.roster.employees) == 5
    assert zoe.id not in {e.id for e in app.roster.employees}


@pytest.mark.asyncio
async def test_logout_returns_to_login_and_drops_roster(app: RosterApp) -> None:
    await app.start()
    await app.login.submit("admin", "password")
    await app.drain()
    app.roster.search("alice")

    app.logout()

    assert app.view is View.login
    assert app.roster.employees == ()
    assert app.roster.search_term == ""


@pytest.mark.asyncio
async def test_restored_token_goes_straight_to_dashboard(
    settings: Settings, storage: MemoryTokenStorage
) -> None:
    directory = FakeDirectory()
    storage.token = await directory.authenticate("admin", "password")
    roster_app = create_app(settings=settings, directory=directory, storage=storage)
    try:
        assert await roster_app.start() is View.dashboard
        await roster_app.drain()
        assert directory.calls[-1] == "list"
    finally:
        await roster_app.close()


@pytest.mark.asyncio
async def test_login_transport_failure_is_notified(
    settings: Settings, storage: MemoryTokenStorage
) -> None:
    directory = FakeDirectory()
    directory.failures["authenticate"] = TransportError("Network error: refused")
    roster_app = create_app(settings=settings, directory=directory, storage=storage)
    try:
        await roster_app.start()
        assert await roster_app.login.submit("admin", "password") is False
        assert roster_app.notifications.items[-1].text == "Network error: refused"
        assert roster_app.session.token is None
    finally:
        await roster_app.close()


@pytest.mark.asyncio
async def test_router_only_forwards_view_transitions(app: RosterApp) -> None:
    views: list[View] = []
    app.router.subscribe(views.append)

    await app.start()
    app.logout()
    await app.login.submit("admin", "password")
    app.logout()

    assert views == [View.login, View.dashboard, View.login]


@pytest.mark.asyncio
async def test_backend_is_selected_from_settings(settings: Settings) -> None:
    local = build_directory(settings)
    remote = build_directory(settings.model_copy(update={"backend": "http"}))
    try:
        assert isinstance(local, LocalEmployeeDirectory)
        assert isinstance(remote, HttpEmployeeDirectory)
    finally:
        await local.aclose()
        await remote.aclose()
