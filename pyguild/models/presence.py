from __future__ import annotations

import datetime
from typing import TYPE_CHECKING, Dict, List, Literal, Optional, Union

from ..enums import Status, try_enum
from ..utils import parse_time
from .activity import Activity
from .raw import RawData

if TYPE_CHECKING:
    from .guild import Guild
    from .user import User
    from ..cache import CacheManager
    from ..types.presence import PresenceUpdate as PresenceUpdatePayload

__all__ = ("PresenceUpdate",)


class _PresenceFields:
    """Derived fields shared by members and presence updates.

    Every property is computed from ``_data`` when read. Missing ``game`` and
    ``activities`` fall back to empty values without being written back into
    the raw store.
    """
    __slots__ = ()

    _data: RawData

    @property
    def guild_id(self) -> Optional[str]:
        return self._data.get("guild_id")

    @property
    def nick(self) -> Optional[str]:
        return self._data.get("nick")

    @property
    def role_ids(self) -> List[str]:
        """List[:class:`str`]: A copy of the stored role IDs, in stored order."""
        return list(self._data.get("roles") or [])

    @property
    def raw_status(self) -> str:
        return self._data.get("status") or Status.offline.value

    @property
    def status(self) -> Union[Status, str]:
        """:class:`Status`: The member's overall status. Unknown values are returned as-is."""
        return try_enum(Status, self.raw_status)

    @property
    def client_status(self) -> Dict[str, str]:
        """Dict[:class:`str`, :class:`str`]: The status per platform (desktop, mobile, web)."""
        return dict(self._data.get("client_status") or {})

    @property
    def game(self) -> Activity:
        return Activity(self._data.get("game") or {})

    @property
    def activities(self) -> List[Activity]:
        return [Activity(activity) for activity in self._data.get("activities") or []]

    @property
    def premium_since(self) -> Union[datetime.datetime, Literal[False]]:
        """Union[:class:`datetime.datetime`, ``False``]: When the member started boosting
        the guild. ``False`` means the member never boosted it.

        Raises :exc:`InvalidData` if the stored timestamp cannot be parsed.
        """
        premium_since = self._data.get("premium_since")
        if premium_since is None:
            return False
        return parse_time(premium_since)


class PresenceUpdate(_PresenceFields):
    """A presence-shaped view of a member's state.

    This is what :meth:`Member.update_from_presence` hands back to describe
    the member *before* the update was applied, so it can be compared with
    the live member, e.g. to detect status transitions.
    """
    __slots__ = (
        "_cache",
        "_data",
    )

    def __init__(self, data: PresenceUpdatePayload, *, cache: Optional[CacheManager] = None):
        self._cache = cache
        self._data = RawData(data)

    def __repr__(self) -> str:
        return f"<PresenceUpdate user_id={self.user_id} guild_id={self.guild_id} status={self.raw_status!r}>"

    @property
    def raw(self) -> RawData:
        """:class:`RawData`: The fields carried by this update."""
        return self._data

    @property
    def user_id(self) -> Optional[str]:
        user = self._data.get("user") or {}
        return user.get("id")

    @property
    def user(self) -> Optional[User]:
        user_id = self.user_id
        if user_id is None or self._cache is None:
            return None
        return self._cache.get_user(user_id)

    @property
    def guild(self) -> Optional[Guild]:
        if self.guild_id is None or self._cache is None:
            return None
        return self._cache.get_guild(self.guild_id)
