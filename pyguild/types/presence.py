from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, TypedDict

if TYPE_CHECKING:
    from .activity import Activity, ClientStatus, StatusType
    from .snowflake import Snowflake, SnowflakeList
    from .user import PartialUser

__all__ = ("PresenceUpdate",)


class _PresenceOptional(TypedDict, total=False):
    roles: SnowflakeList
    nick: Optional[str]
    premium_since: Optional[str]
    game: Optional[Activity]


class PresenceUpdate(_PresenceOptional):
    user: PartialUser
    guild_id: Snowflake
    status: StatusType
    activities: List[Activity]
    client_status: ClientStatus
