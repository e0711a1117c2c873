"""
roster_admin.devserver.deps

FastAPI dependency wiring for the dev server.

Responsibilities:
- Expose the app-scoped `LocalEmployeeDirectory`.
- Extract the bearer token; validation is left to the directory.
"""

from __future__ import annotations

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from roster_admin.directory.local import LocalEmployeeDirectory

_bearer = HTTPBearer(auto_error=False)


def directory_dep(request: Request) -> LocalEmployeeDirectory:
    # Created in the app lifespan (see `devserver.app.create_devserver`).
    return request.app.state.directory  # type: ignore[no-any-return]


def bearer_token(
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> str | None:
    # A missing token is passed through as None; the directory answers 401.
    if creds is None or not creds.credentials:
        return None
    return creds.credentials
