from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..errors import InvalidArgument

__all__ = (
    "Snowflake",
)


@runtime_checkable
class Snowflake(Protocol):
    """An ABC that details the common operations on a pyguild model.

    Almost every model has an ID, so anything carrying an ``id`` attribute
    (a :class:`~pyguild.Role`, a :class:`~pyguild.User`, a channel object
    from another library...) satisfies this protocol and may be passed
    wherever an object or its id is accepted.
    """

    __slots__ = ()
    id: str


def _get_id(obj: object) -> str:
    if isinstance(obj, Snowflake):
        obj = obj.id

    if obj is None or isinstance(obj, bool) or obj == "":
        raise InvalidArgument(f"expected a model or an ID, got {obj!r}")

    return str(obj)
