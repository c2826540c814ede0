from __future__ import annotations

import datetime
from operator import attrgetter
from typing import TypeVar, Any, Union, Dict, Callable, Optional, Iterable

from aiohttp import ClientResponse

try:
    import ujson as _json
except ImportError:
    import json as _json

from .errors import InvalidData

__all__ = (
    "MISSING",
    "json_or_text",
    "to_json",
    "find",
    "get",
    "parse_time",
)

T = TypeVar("T")


class _MissingSentinel:
    def __eq__(self, other):
        return False

    def __bool__(self):
        return False

    def __repr__(self):
        return "..."


MISSING: Any = _MissingSentinel()


def to_json(obj: Any) -> str:
    return _json.dumps(obj)


async def json_or_text(response: ClientResponse) -> Union[Dict[str, Any], str]:
    text = await response.text(encoding="utf-8")
    try:
        if response.headers["content-type"] == "application/json":
            return _json.loads(text)
    except KeyError:
        # Thanks Cloudflare
        pass

    return text


def parse_time(timestamp: str) -> datetime.datetime:
    """Parses an ISO 8601 timestamp as sent by the API into an aware
    :class:`datetime.datetime`.

    Raises
    -------
    InvalidData
        The timestamp could not be parsed.
    """
    if not isinstance(timestamp, str):
        raise InvalidData(f"expected an ISO 8601 timestamp, received {timestamp!r}")

    # fromisoformat only learned to read `Z` in 3.11
    value = timestamp[:-1] + "+00:00" if timestamp.endswith("Z") else timestamp

    try:
        parsed = datetime.datetime.fromisoformat(value)
    except ValueError as exc:
        raise InvalidData(f"could not parse timestamp {timestamp!r}") from exc

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)

    return parsed


def find(predicate: Callable[[T], Any], seq: Iterable[T]) -> Optional[T]:
    """A helper to return the first element found in the sequence
    that meets the predicate. For example: ::

        role = pyguild.utils.find(lambda r: r.name == 'Mods', guild.roles)

    would find the first :class:`~pyguild.Role` whose name is 'Mods' and return it.
    If an entry is not found, then ``None`` is returned.

    This is different from :func:`py:filter` due to the fact it stops the moment it finds
    a valid entry.

    Parameters
    -----------
    predicate
        A function that returns a boolean-like result.
    seq: :class:`collections.abc.Iterable`
        The iterable to search through.
    """

    for element in seq:
        if predicate(element):
            return element

    return None


def get(iterable: Iterable[T], **attrs: Any) -> Optional[T]:
    """A helper that returns the first element in the iterable that meets
    all the traits passed in ``attrs``. This is an alternative for
    :func:`~pyguild.utils.find`.

    Nested attributes can be reached with a double underscore, e.g.
    ``get(guild.members, user__username='Mighty')``.
    """
    getters = [(attrgetter(attr.replace("__", ".")), value) for attr, value in attrs.items()]

    for elem in iterable:
        if all(pred(elem) == value for pred, value in getters):
            return elem

    return None
