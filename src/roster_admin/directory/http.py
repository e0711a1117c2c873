"""
roster_admin.directory.http

HTTP client boundary for a remote employee directory.

Responsibilities:
- Attach the session token as a bearer credential on protected calls.
- Map the REST contract (`/auth/login`, `/employees[/{id}]`) onto the directory protocol.
- Translate every failure (status, network, malformed body) into the directory taxonomy.
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import ValidationError

from roster_admin.directory.base import require_token
from roster_admin.directory.errors import (
    DirectoryError,
    InvalidCredentials,
    NotFound,
    TransportError,
    Unauthenticated,
)
from roster_admin.directory.models import Employee, NewEmployee, TokenResponse
from roster_admin.observability.logging import get_logger
from roster_admin.settings import Settings

log = get_logger(__name__)


class HttpEmployeeDirectory:
    """
    Thin gateway; holds no roster state. The `httpx.AsyncClient` may be shared
    and is only closed here when this instance created it.
    """

    def __init__(self, *, http: httpx.AsyncClient, owns_client: bool = False) -> None:
        self._http = http
        self._owns_client = owns_client

    @classmethod
    def from_settings(cls, settings: Settings) -> HttpEmployeeDirectory:
        http = httpx.AsyncClient(
            base_url=settings.api_base_url,
            timeout=settings.request_timeout_seconds,
        )
        return cls(http=http, owns_client=True)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def authenticate(self, username: str, password: str) -> str:
        r = await self._send(
            "POST",
            "/auth/login",
            json={"username": username, "password": password},
            unauthorized=InvalidCredentials,
        )
        return self._parse(r, TokenResponse).token

    async def list(self, token: str | None) -> list[Employee]:
        r = await self._send("GET", "/employees", token=require_token(token))
        body = self._json(r)
        if not isinstance(body, list):
            raise TransportError("Malformed response: expected a list of employees.")
        try:
            return [Employee.model_validate(item) for item in body]
        except ValidationError as e:
            raise TransportError(f"Malformed employee record: {e}") from e

    async def create(self, token: str | None, data: NewEmployee) -> Employee:
        r = await self._send(
            "POST", "/employees", token=require_token(token), json=data.model_dump()
        )
        return self._parse(r, Employee)

    async def update(
        self, token: str | None, employee_id: str, data: NewEmployee | Employee
    ) -> Employee:
        # Callers always send the full record; the server merges it onto the stored one.
        payload = {**data.model_dump(), "id": employee_id}
        r = await self._send(
            "PUT", f"/employees/{employee_id}", token=require_token(token), json=payload
        )
        return self._parse(r, Employee)

    async def delete(self, token: str | None, employee_id: str) -> None:
        # 204 No Content: the body is never read.
        await self._send("DELETE", f"/employees/{employee_id}", token=require_token(token))

    async def _send(
        self,
        method: str,
        url: str,
        *,
        token: str | None = None,
        json: Any = None,
        unauthorized: type[DirectoryError] = Unauthenticated,
    ) -> httpx.Response:
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        try:
            r = await self._http.request(method, url, headers=headers, json=json)
        except httpx.HTTPError as e:
            log.warning("directory_request_failed", method=method, url=url, error=str(e))
            raise TransportError(f"Network error: {e}") from e

        if r.is_success:
            return r

        message = _error_message(r)
        log.info("directory_request_rejected", method=method, url=url, status=r.status_code)
        if r.status_code == 401:
            raise unauthorized(message)
        if r.status_code == 404:
            raise NotFound(message)
        raise TransportError(message)

    @staticmethod
    def _json(r: httpx.Response) -> Any:
        try:
            return r.json()
        except ValueError as e:
            raise TransportError(f"Malformed response body ({r.status_code}).") from e

    def _parse(self, r: httpx.Response, model: type[Any]) -> Any:
        try:
            return model.model_validate(self._json(r))
        except ValidationError as e:
            raise TransportError(f"Malformed response: {e}") from e


def _error_message(r: httpx.Response) -> str:
    fallback = f"API Error: {r.status_code} {r.reason_phrase}".rstrip()
    try:
        body = r.json()
    except ValueError:
        return fallback
    if isinstance(body, dict) and isinstance(body.get("message"), str) and body["message"]:
        return body["message"]
    return fallback


# --- Module Notes -----------------------------------------------------------
# Timeouts come from the shared client (`request_timeout_seconds`); an expired
# timeout is an `httpx.HTTPError` and surfaces as `TransportError`.
