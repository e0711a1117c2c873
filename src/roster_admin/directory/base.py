"""
roster_admin.directory.base

The employee directory capability set.

Responsibilities:
- Declare the async CRUD + authenticate protocol every backend satisfies.
- Provide the local token precondition shared by all implementations.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from roster_admin.directory.errors import Unauthenticated
from roster_admin.directory.models import Employee, NewEmployee


@runtime_checkable
class EmployeeDirectory(Protocol):
    async def authenticate(self, username: str, password: str) -> str: ...

    async def list(self, token: str | None) -> list[Employee]: ...

    async def create(self, token: str | None, data: NewEmployee) -> Employee: ...

    async def update(
        self, token: str | None, employee_id: str, data: NewEmployee | Employee
    ) -> Employee: ...

    async def delete(self, token: str | None, employee_id: str) -> None: ...

    async def aclose(self) -> None: ...


def require_token(token: str | None) -> str:
    # Resolved before any I/O: a missing token never reaches the store.
    if not token:
        raise Unauthenticated()
    return token


# --- Module Notes -----------------------------------------------------------
# Implementations: `directory.http.HttpEmployeeDirectory` (remote REST) and
# `directory.local.LocalEmployeeDirectory` (SQLite-backed mock).
