from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional

from .mixins import Hashable
from .raw import RawData
from .role import Role

if TYPE_CHECKING:
    from .member import Member
    from ..cache import CacheManager
    from ..types.guild import Guild as GuildPayload
    from ..types.member import Member as MemberPayload
    from ..types.role import Role as RolePayload

__all__ = ("Guild",)


class Guild(Hashable):
    """Represents a Discord guild.

    Roles keep the order in which the API listed them, which is the order
    :attr:`Member.roles` reports them in.
    """
    __slots__ = (
        "_cache",
        "_data",
        "_roles",
        "_members",
    )

    def __init__(self, data: GuildPayload, *, cache: CacheManager):
        self._cache = cache
        self._roles: Dict[str, Role] = {}
        self._members: Dict[str, Member] = {}
        self._data = RawData()
        self._update(data)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<Guild id={self.id} name={self.name!r} roles={len(self._roles)} members={len(self._members)}>"

    def _update(self, data: GuildPayload) -> None:
        data = dict(data)
        roles = data.pop("roles", None)
        members = data.pop("members", None)
        self._data.merge(data)

        if roles is not None:
            self._roles = {}
            for role in roles:
                self._add_role(role)

        for member in members or []:
            self._add_member(self._cache.create_member(member, guild_id=self.id))

    def _add_role(self, data: RolePayload) -> Role:
        role = Role(data, guild=self)
        self._roles[role.id] = role
        return role

    def _remove_role(self, role_id: str) -> Optional[Role]:
        return self._roles.pop(role_id, None)

    def _add_member(self, member: Member) -> None:
        self._members[member.id] = member

    @property
    def id(self) -> str:
        return self._data["id"]

    @property
    def name(self) -> str:
        return self._data.get("name", "")

    @property
    def owner_id(self) -> Optional[str]:
        return self._data.get("owner_id")

    @property
    def icon(self) -> Optional[str]:
        return self._data.get("icon")

    @property
    def roles(self) -> List[Role]:
        """List[:class:`Role`]: The guild's roles in the order the API listed them."""
        return list(self._roles.values())

    @property
    def members(self) -> List[Member]:
        return list(self._members.values())

    def get_role(self, role_id: str, /) -> Optional[Role]:
        return self._roles.get(role_id)

    def get_member(self, user_id: str, /) -> Optional[Member]:
        return self._members.get(user_id)
