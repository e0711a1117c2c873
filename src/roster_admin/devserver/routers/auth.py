"""
roster_admin.devserver.routers.auth

Login endpoint.

Responsibilities:
- Exchange the admin credential for a session token (`POST /auth/login`).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from roster_admin.devserver.deps import directory_dep
from roster_admin.directory.local import LocalEmployeeDirectory
from roster_admin.directory.models import LoginRequest, TokenResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
async def login(
    body: LoginRequest,
    directory: LocalEmployeeDirectory = Depends(directory_dep),
) -> TokenResponse:
    # InvalidCredentials -> 401 {message} via the DirectoryError handler.
    token = await directory.authenticate(body.username, body.password)
    return TokenResponse(token=token)
