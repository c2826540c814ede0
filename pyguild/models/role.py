from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .mixins import Hashable
from .raw import RawData

if TYPE_CHECKING:
    from .guild import Guild
    from ..types.role import Role as RolePayload

__all__ = (
    "Role",
    "PartialRole",
)


class Role(Hashable):
    """Represents a role in a :class:`Guild`"""
    __slots__ = (
        "guild",
        "_data",
    )

    def __init__(self, data: RolePayload, *, guild: Optional[Guild] = None):
        self.guild = guild
        self._data = RawData(data)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<Role id={self.id} name={self.name!r}>"

    def _update(self, data: RolePayload) -> None:
        self._data.merge(data)

    @property
    def id(self) -> str:
        return self._data["id"]

    @property
    def name(self) -> str:
        return self._data.get("name", "")

    @property
    def colour(self) -> int:
        return self._data.get("color", 0)

    @property
    def color(self) -> int:
        return self.colour

    @property
    def hoist(self) -> bool:
        return self._data.get("hoist", False)

    @property
    def position(self) -> int:
        return self._data.get("position", 0)

    @property
    def permissions(self) -> int:
        return int(self._data.get("permissions", 0))

    @property
    def managed(self) -> bool:
        return self._data.get("managed", False)

    @property
    def mentionable(self) -> bool:
        return self._data.get("mentionable", False)

    @property
    def mention(self) -> str:
        return f"<@&{self.id}>"

    def is_resolved(self) -> bool:
        """:class:`bool`: Whether this role was read from its guild's role list."""
        return True


class PartialRole(Role):
    """A stand-in for a role whose guild is not in the cache.

    Only the ID is known, every other attribute reports its default value.
    """
    __slots__ = ()

    def __init__(self, role_id: str):
        super().__init__({"id": role_id})

    def __repr__(self) -> str:
        return f"<PartialRole id={self.id}>"

    def is_resolved(self) -> bool:
        return False
