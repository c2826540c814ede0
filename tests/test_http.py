from __future__ import annotations

import asyncio
import json
from typing import Any, Dict, List, Optional

import aiohttp
import pytest

from pyguild import HTTPClient, Route
from pyguild.errors import DiscordServerError, Forbidden, HTTPException, LoginFailure, NotFound


class _FakeResponse:
    def __init__(self, status: int, body: Any, headers: Optional[Dict[str, str]] = None) -> None:
        self.status = status
        self.reason = "Reason"
        self._body = body
        self.headers = {"content-type": "application/json"} if headers is None else headers

    async def text(self, encoding: str = "utf-8") -> str:
        if isinstance(self._body, str):
            return self._body
        return json.dumps(self._body)

    async def __aenter__(self) -> "_FakeResponse":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


class _FakeSession:
    def __init__(self, *responses: _FakeResponse) -> None:
        self.responses = list(responses)
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def request(self, method: str, url: str, **kwargs: Any) -> _FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        return self.responses.pop(0)

    async def close(self) -> None:
        self.closed = True


def _client(*responses: _FakeResponse) -> HTTPClient:
    client = HTTPClient(token="secret")
    client._HTTPClient__session = _FakeSession(*responses)
    return client


def test_route_formats_and_quotes_parameters() -> None:
    route = Route("PATCH", "/guilds/{guild_id}/members/{user_id}", guild_id="1", user_id="a b")

    assert route.url == Route.base + "/guilds/1/members/a%20b"
    assert route.bucket == "None:1:/guilds/{guild_id}/members/{user_id}"


def test_request_sends_json_and_authorization() -> None:
    client = _client(_FakeResponse(200, {"nick": "Nel"}))

    data = asyncio.run(client.change_my_nickname("1", "Nel", reason="because"))

    call = client._HTTPClient__session.calls[0]
    assert data == {"nick": "Nel"}
    assert call["method"] == "PATCH"
    assert call["url"].endswith("/guilds/1/members/@me/nick")
    assert json.loads(call["data"]) == {"nick": "Nel"}
    assert call["headers"]["Authorization"] == "Bot secret"
    assert call["headers"]["Content-Type"] == "application/json"
    assert call["headers"]["X-Audit-Log-Reason"] == "because"


def test_request_returns_text_for_non_json() -> None:
    client = _client(_FakeResponse(204, "", headers={}))

    assert asyncio.run(client.ban("1", "2")) == ""


@pytest.mark.parametrize(
    "status, exc_type",
    [
        (403, Forbidden),
        (404, NotFound),
        (400, HTTPException),
    ],
)
def test_request_error_statuses(status: int, exc_type: type) -> None:
    client = _client(_FakeResponse(status, {"code": 10007, "message": "Unknown Member"}))

    with pytest.raises(exc_type) as excinfo:
        asyncio.run(client.edit_member("1", "2", nick="x"))

    assert excinfo.value.status == status
    assert excinfo.value.code == 10007
    assert excinfo.value.text == "Unknown Member"


def test_request_flattens_form_errors() -> None:
    body = {
        "code": 50035,
        "message": "Invalid Form Body",
        "errors": {"nick": {"_errors": [{"code": "BASE_TYPE_MAX_LENGTH", "message": "Too long"}]}},
    }
    client = _client(_FakeResponse(400, body))

    with pytest.raises(HTTPException) as excinfo:
        asyncio.run(client.edit_member("1", "2", nick="x" * 100))

    assert excinfo.value.text == "Invalid Form Body\nIn nick: Too long"


def test_request_retries_server_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    async def no_sleep(delay: float) -> None:
        pass

    monkeypatch.setattr(asyncio, "sleep", no_sleep)
    client = _client(_FakeResponse(502, "bad gateway", headers={}), _FakeResponse(200, {}))

    assert asyncio.run(client.move_member("1", "2", "3")) == {}
    assert len(client._HTTPClient__session.calls) == 2


def test_request_gives_up_after_five_server_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    async def no_sleep(delay: float) -> None:
        pass

    monkeypatch.setattr(asyncio, "sleep", no_sleep)
    client = _client(*[_FakeResponse(500, "oops", headers={}) for _ in range(5)])

    with pytest.raises(DiscordServerError):
        asyncio.run(client.get_member("1", "2"))


def test_static_login_failure_restores_token(monkeypatch: pytest.MonkeyPatch) -> None:
    client = HTTPClient(token="old")

    async def scenario() -> None:
        async def unauthorized(route: Route, **kwargs: Any) -> Any:
            raise HTTPException(_FakeResponse(401, ""), {"code": 0, "message": "401: Unauthorized"})

        monkeypatch.setattr(client, "request", unauthorized)
        try:
            await client.static_login("bad")
        finally:
            await client.close()

    with pytest.raises(LoginFailure):
        asyncio.run(scenario())

    assert client.token == "old"


def test_request_recreates_closed_session(monkeypatch: pytest.MonkeyPatch) -> None:
    closed = _FakeSession()
    closed.closed = True
    fresh = _FakeSession(_FakeResponse(200, {"id": "2"}))
    monkeypatch.setattr(aiohttp, "ClientSession", lambda connector=None: fresh)

    client = HTTPClient(token="secret")
    client._HTTPClient__session = closed

    assert asyncio.run(client.get_user("2")) == {"id": "2"}
    assert closed.calls == []
    assert len(fresh.calls) == 1
    assert client._HTTPClient__session is fresh
