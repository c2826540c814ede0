from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, TypedDict

if TYPE_CHECKING:
    from .activity import Activity, ClientStatus, StatusType
    from .snowflake import Snowflake, SnowflakeList
    from .user import PartialUser, User

__all__ = (
    "Nickname",
    "Member",
    "MemberUpdate",
)


class Nickname(TypedDict):
    nick: str


class _MemberOptional(TypedDict, total=False):
    nick: Optional[str]
    premium_since: Optional[str]
    guild_id: Snowflake
    # presence fields merged in by presence updates
    status: StatusType
    game: Optional[Activity]
    activities: List[Activity]
    client_status: ClientStatus


class Member(_MemberOptional):
    user: User
    roles: SnowflakeList
    joined_at: str
    deaf: bool
    mute: bool


class MemberUpdate(TypedDict, total=False):
    nick: str
    roles: SnowflakeList
    channel_id: Optional[Snowflake]
    user: PartialUser
