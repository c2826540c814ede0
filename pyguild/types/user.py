from __future__ import annotations

from typing import TYPE_CHECKING, Optional, TypedDict

if TYPE_CHECKING:
    from .snowflake import Snowflake

__all__ = (
    "PartialUser",
    "User",
)


class PartialUser(TypedDict):
    id: Snowflake


class _OptionalUser(TypedDict, total=False):
    avatar: Optional[str]
    bot: bool
    system: bool
    global_name: Optional[str]
    public_flags: int


class User(PartialUser, _OptionalUser):
    username: str
    discriminator: str
