from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, TypedDict

if TYPE_CHECKING:
    from .member import Member
    from .role import Role
    from .snowflake import Snowflake
    from .user import User

__all__ = (
    "Guild",
    "Ban",
    "BanCreate",
)


class _GuildOptional(TypedDict, total=False):
    icon: Optional[str]
    description: Optional[str]
    members: List[Member]
    member_count: int
    unavailable: bool


class Guild(_GuildOptional):
    id: Snowflake
    name: str
    owner_id: Snowflake
    roles: List[Role]


class Ban(TypedDict):
    reason: Optional[str]
    user: User


BanCreate = TypedDict("BanCreate", {"delete-message-days": int}, total=False)
