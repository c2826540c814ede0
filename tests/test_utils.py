from __future__ import annotations

import datetime

import pytest

from pyguild import Activity, ActivityType, Role, Status, try_enum, utils
from pyguild.errors import InvalidData


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2021-03-04T05:06:07Z", datetime.datetime(2021, 3, 4, 5, 6, 7, tzinfo=datetime.timezone.utc)),
        ("2021-03-04T05:06:07.123456+00:00", datetime.datetime(2021, 3, 4, 5, 6, 7, 123456, tzinfo=datetime.timezone.utc)),
        ("2021-03-04T05:06:07", datetime.datetime(2021, 3, 4, 5, 6, 7, tzinfo=datetime.timezone.utc)),
    ],
)
def test_parse_time(value: str, expected: datetime.datetime) -> None:
    assert utils.parse_time(value) == expected


@pytest.mark.parametrize("value", ["", "yesterday", "2021-13-40T00:00:00Z", 1614834367])
def test_parse_time_rejects_garbage(value) -> None:
    with pytest.raises(InvalidData):
        utils.parse_time(value)


def test_find_and_get() -> None:
    roles = [Role({"id": "1", "name": "a"}), Role({"id": "2", "name": "b", "hoist": True})]

    assert utils.find(lambda r: r.hoist, roles) is roles[1]
    assert utils.find(lambda r: r.name == "c", roles) is None
    assert utils.get(roles, name="a") is roles[0]
    assert utils.get(roles, name="b", hoist=False) is None


def test_try_enum() -> None:
    assert try_enum(Status, "idle") is Status.idle
    assert try_enum(Status, "sleeping") == "sleeping"


def test_activity_fields() -> None:
    activity = Activity({"name": "Stream", "type": 1, "url": "https://example.com", "created_at": 1600000000000})

    assert activity
    assert activity.type is ActivityType.streaming
    assert activity.url == "https://example.com"
    assert activity.created_at == datetime.datetime(2020, 9, 13, 12, 26, 40, tzinfo=datetime.timezone.utc)
    assert activity == Activity(activity.to_dict())
    assert try_enum(ActivityType, 42) == 42
