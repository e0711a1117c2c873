"""
tests.test_http_directory

HTTP gateway tests.

Responsibilities:
- Exercise `HttpEmployeeDirectory` end-to-end against the dev server (ASGITransport).
- Pin the error mapping and body handling with `httpx.MockTransport`.
"""

from __future__ import annotations

import json

import httpx
import pytest

from roster_admin.directory.errors import (
    InvalidCredentials,
    NotFound,
    TransportError,
    Unauthenticated,
)
from roster_admin.directory.http import HttpEmployeeDirectory
from roster_admin.directory.models import NewEmployee

ZOE = NewEmployee(name="Zoe", email="z@x.com", position="Intern", department="Ops")


def _mock_directory(handler) -> HttpEmployeeDirectory:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://api")
    return HttpEmployeeDirectory(http=client, owns_client=True)


@pytest.mark.asyncio
async def test_full_roster_scenario_against_devserver(
    devserver_client: httpx.AsyncClient,
) -> None:
    directory = HttpEmployeeDirectory(http=devserver_client)

    token = await directory.authenticate("admin", "password")
    assert token
    assert len(await directory.list(token)) == 5

    zoe = await directory.create(token, ZOE)
    roster = await directory.list(token)
    assert len(roster) == 6
    assert zoe in roster

    renamed = await directory.update(token, zoe.id, zoe.model_copy(update={"name": "Zoe Q"}))
    assert renamed.id == zoe.id
    assert renamed.name == "Zoe Q"

    await directory.delete(token, zoe.id)
    assert len(await directory.list(token)) == 5
    with pytest.raises(NotFound):
        await directory.delete(token, zoe.id)


@pytest.mark.asyncio
async def test_devserver_rejections_map_to_taxonomy(devserver_client: httpx.AsyncClient) -> None:
    directory = HttpEmployeeDirectory(http=devserver_client)

    with pytest.raises(InvalidCredentials) as exc:
        await directory.authenticate("admin", "nope")
    assert exc.value.message == "Invalid username or password."

    with pytest.raises(Unauthenticated):
        await directory.list("forged-token")

    token = await directory.authenticate("admin", "password")
    with pytest.raises(NotFound):
        await directory.update(token, "missing", ZOE)


@pytest.mark.asyncio
async def test_devserver_rejects_empty_fields_with_400(devserver_client: httpx.AsyncClient) -> None:
    token = (
        await devserver_client.post(
            "/auth/login", json={"username": "admin", "password": "password"}
        )
    ).json()["token"]

    r = await devserver_client.post(
        "/employees",
        headers={"Authorization": f"Bearer {token}"},
        json={"name": "", "email": "a@b.c", "position": "x", "department": "y"},
    )
    assert r.status_code == 400
    assert "name" in r.json()["message"]


@pytest.mark.asyncio
async def test_missing_token_never_reaches_the_server() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[])

    directory = _mock_directory(handler)
    try:
        with pytest.raises(Unauthenticated):
            await directory.list(None)
        with pytest.raises(Unauthenticated):
            await directory.create("", ZOE)
        with pytest.raises(Unauthenticated):
            await directory.delete(None, "e1")
    finally:
        await directory.aclose()
    assert seen == []


@pytest.mark.asyncio
async def test_bearer_token_is_attached() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["Authorization"] == "Bearer tok"
        return httpx.Response(200, json=[])

    directory = _mock_directory(handler)
    try:
        assert await directory.list("tok") == []
    finally:
        await directory.aclose()


@pytest.mark.asyncio
async def test_error_message_comes_from_body() -> None:
    directory = _mock_directory(lambda r: httpx.Response(500, json={"message": "DB is down"}))
    try:
        with pytest.raises(TransportError) as exc:
            await directory.list("tok")
    finally:
        await directory.aclose()
    assert exc.value.message == "DB is down"


@pytest.mark.asyncio
async def test_unparseable_error_body_falls_back_to_status_line() -> None:
    directory = _mock_directory(lambda r: httpx.Response(503, text="<html>oops</html>"))
    try:
        with pytest.raises(TransportError) as exc:
            await directory.list("tok")
    finally:
        await directory.aclose()
    assert exc.value.message == "API Error: 503 Service Unavailable"


@pytest.mark.asyncio
async def test_204_body_is_never_parsed() -> None:
    directory = _mock_directory(lambda r: httpx.Response(204, content=b"not json"))
    try:
        assert await directory.delete("tok", "e1") is None
    finally:
        await directory.aclose()


@pytest.mark.asyncio
async def test_network_failure_is_a_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    directory = _mock_directory(handler)
    try:
        with pytest.raises(TransportError):
            await directory.list("tok")
    finally:
        await directory.aclose()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="not json"),
        httpx.Response(200, json={"employees": []}),
        httpx.Response(200, json=[{"id": "1", "name": "No email"}]),
    ],
)
async def test_malformed_list_responses_are_transport_errors(response: httpx.Response) -> None:
    directory = _mock_directory(lambda r: response)
    try:
        with pytest.raises(TransportError):
            await directory.list("tok")
    finally:
        await directory.aclose()


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [{"access_token": "x"}, {"token": ""}])
async def test_malformed_login_response_is_a_transport_error(body: dict[str, str]) -> None:
    directory = _mock_directory(lambda r: httpx.Response(200, json=body))
    try:
        with pytest.raises(TransportError):
            await directory.authenticate("admin", "password")
    finally:
        await directory.aclose()


@pytest.mark.asyncio
async def test_update_sends_the_full_record_to_the_item_path() -> None:
    captured: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["method"] = request.method
        captured["path"] = request.url.path
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json={"id": "e1", **ZOE.model_dump()})

    directory = _mock_directory(handler)
    try:
        updated = await directory.update("tok", "e1", ZOE)
    finally:
        await directory.aclose()

    assert captured["method"] == "PUT"
    assert captured["path"] == "/employees/e1"
    assert captured["body"] == {"id": "e1", **ZOE.model_dump()}
    assert updated.id == "e1"
