from __future__ import annotations

import copy
from types import SimpleNamespace
from typing import Any, Dict, List, Optional, Tuple

import pytest

from pyguild import CacheManager, HTTPClient, Route
from pyguild.errors import HTTPException


SELF_ID = "100000000000000001"
MEMBER_ID = "80351110224678912"
GUILD_ID = "41771983423143937"
ROLE_A = "200000000000000001"
ROLE_B = "200000000000000002"
ROLE_C = "200000000000000003"


class RecordingHTTPClient(HTTPClient):
    """An HTTP client that records routes instead of sending them."""

    def __init__(self) -> None:
        super().__init__(token="token")
        self.requests: List[Tuple[Route, Dict[str, Any]]] = []
        self.response: Any = None
        self.error: Optional[Exception] = None

    async def request(self, route: Route, **kwargs: Any) -> Any:
        self.requests.append((route, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def last(self) -> Tuple[Route, Dict[str, Any]]:
        return self.requests[-1]


def http_error(status: int, message: Any = "") -> HTTPException:
    response = SimpleNamespace(status=status, reason="Error")
    return HTTPException(response, message)


def user_payload(user_id: str = MEMBER_ID, username: str = "Nelly") -> Dict[str, Any]:
    return {"id": user_id, "username": username, "discriminator": "1337", "avatar": None}


def member_payload(**overrides: Any) -> Dict[str, Any]:
    data = {
        "user": user_payload(),
        "roles": [ROLE_B, ROLE_A],
        "deaf": False,
        "mute": False,
        "joined_at": "2015-04-26T06:26:56.936000+00:00",
        "nick": None,
    }
    data.update(overrides)
    return copy.deepcopy(data)


def guild_payload(**overrides: Any) -> Dict[str, Any]:
    data = {
        "id": GUILD_ID,
        "name": "Test guild",
        "owner_id": SELF_ID,
        "roles": [
            {"id": ROLE_A, "name": "Alpha", "color": 0, "hoist": False, "position": 1, "permissions": "0", "managed": False, "mentionable": False},
            {"id": ROLE_C, "name": "Gamma", "color": 0, "hoist": False, "position": 2, "permissions": "0", "managed": False, "mentionable": False},
            {"id": ROLE_B, "name": "Beta", "color": 0, "hoist": True, "position": 3, "permissions": "8", "managed": False, "mentionable": True},
        ],
    }
    data.update(overrides)
    return copy.deepcopy(data)


def presence_payload(**overrides: Any) -> Dict[str, Any]:
    data = {
        "user": {"id": MEMBER_ID},
        "guild_id": GUILD_ID,
        "status": "dnd",
        "activities": [{"name": "Factorio", "type": 0}],
        "client_status": {"desktop": "dnd"},
        "game": {"name": "Factorio", "type": 0},
    }
    data.update(overrides)
    return copy.deepcopy(data)


@pytest.fixture
def http() -> RecordingHTTPClient:
    return RecordingHTTPClient()


@pytest.fixture
def events() -> List[Tuple[Any, ...]]:
    return []


@pytest.fixture
def cache(http: RecordingHTTPClient, events: List[Tuple[Any, ...]]) -> CacheManager:
    cache = CacheManager(api=http, dispatch=lambda event, *args: events.append((event, *args)))
    cache.user = cache.store_user(user_payload(SELF_ID, "pyguild"))
    return cache


@pytest.fixture
def member(cache: CacheManager):
    return cache.create_member(member_payload(), guild_id=GUILD_ID)
