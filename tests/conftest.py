"""
tests.conftest

Shared fixtures.

Responsibilities:
- Test settings with an in-memory SQLite store.
- A seeded `LocalEmployeeDirectory` plus a valid admin token.
- An `httpx.AsyncClient` talking to the dev server in-process (ASGITransport).
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio

from roster_admin.devserver.app import create_devserver
from roster_admin.directory.local import LocalEmployeeDirectory
from roster_admin.notifications.queue import NotificationQueue
from roster_admin.session.storage import MemoryTokenStorage
from roster_admin.session.store import SessionStore
from roster_admin.settings import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(
        env="test",
        log_level="WARNING",
        backend="local",
        database_url="sqlite+aiosqlite:///:memory:",
        jwt_secret="test-secret",
    )


@pytest_asyncio.fixture
async def local_directory(settings: Settings) -> AsyncIterator[LocalEmployeeDirectory]:
    directory = LocalEmployeeDirectory.from_settings(settings)
    await directory.initialize()
    try:
        yield directory
    finally:
        await directory.aclose()


@pytest_asyncio.fixture
async def token(local_directory: LocalEmployeeDirectory) -> str:
    return await local_directory.authenticate("admin", "password")


@pytest_asyncio.fixture
async def devserver_client(settings: Settings) -> AsyncIterator[httpx.AsyncClient]:
    app = create_devserver(settings=settings)
    # httpx ASGITransport does not run the lifespan; drive it explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            yield client


@pytest_asyncio.fixture
async def notifications() -> AsyncIterator[NotificationQueue]:
    queue = NotificationQueue(timeout=5.0)
    try:
        yield queue
    finally:
        queue.clear()


@pytest.fixture
def session() -> SessionStore:
    return SessionStore(MemoryTokenStorage())


# --- Module Notes -----------------------------------------------------------
# View-model tests that need precise control over timing or failures use
# `fakes.FakeDirectory` instead of the SQLite-backed store.
