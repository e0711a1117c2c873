"""
roster_admin.devserver.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) with employee store connectivity validation.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from roster_admin.devserver.deps import directory_dep
from roster_admin.directory.local import LocalEmployeeDirectory

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(directory: LocalEmployeeDirectory = Depends(directory_dep)) -> dict[str, str]:
    # TransportError from ping is rendered as 502 {message} by the app's handler.
    await directory.ping()
    return {"status": "ready"}
