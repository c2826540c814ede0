from __future__ import annotations

import datetime
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

from ..utils import parse_time
from .abc import Snowflake, _get_id
from .mixins import Hashable
from .presence import PresenceUpdate, _PresenceFields
from .raw import RawData
from .role import PartialRole, Role
from .user import User

if TYPE_CHECKING:
    from .ban import Ban
    from .guild import Guild
    from ..cache import CacheManager
    from ..types.member import Member as MemberPayload, MemberUpdate as MemberUpdatePayload
    from ..types.presence import PresenceUpdate as PresenceUpdatePayload

__all__ = ("Member",)


class Member(_PresenceFields, Hashable):
    """Represents a member of a :class:`Guild`.

    A member only keeps the raw fields it received from the API. Every other
    attribute is derived from them when read, together with whatever the
    cache currently knows about the member's user and guild, so changes to
    those are visible immediately.

    .. container:: operations

        .. describe:: x == y

            Checks if two members share the same user ID.

        .. describe:: hash(x)

            Returns the member's hash.

        .. describe:: str(x)

            Returns the member's mention.

    Raises
    -------
    InvalidData
        ``joined_at`` or ``premium_since`` is present but cannot be parsed.
    """
    __slots__ = (
        "_cache",
        "_data",
    )

    def __init__(self, data: MemberPayload, *, cache: CacheManager, guild_id: Optional[str] = None):
        self._cache = cache
        self._data = RawData(data)

        if guild_id is not None and "guild_id" not in self._data:
            self._data["guild_id"] = guild_id

        # accessing these raises if the timestamps are malformed
        self.joined_at
        self.premium_since

    def __str__(self) -> str:
        return self.mention

    def __repr__(self) -> str:
        return f"<Member id={self.id} username={self.username!r} nick={self.nick!r} guild_id={self.guild_id}>"

    # raw store

    @property
    def raw(self) -> RawData:
        """:class:`RawData`: The raw fields backing this member."""
        return self._data

    def _copy(self) -> Member:
        # same fields, detached from this member and not validated again
        member = self.__class__.__new__(self.__class__)
        member._cache = self._cache
        member._data = self._data.snapshot()
        return member

    def _update(self, data: Union[MemberPayload, MemberUpdatePayload]) -> None:
        self._data.merge(data)

    def update_from_presence(self, presence: Union[PresenceUpdate, PresenceUpdatePayload]) -> PresenceUpdate:
        """Merges a presence update into the member.

        This is an internal function and is not meant to be used by a public application.

        Parameters
        -----------
        presence: Union[:class:`PresenceUpdate`, :class:`dict`]
            The incoming presence update or its raw payload.

        Returns
        --------
        :class:`PresenceUpdate`
            The member's presence before the update. It is a full copy, later
            updates to the member do not affect it.
        """
        raw_presence = presence.raw if isinstance(presence, PresenceUpdate) else presence
        old_presence = PresenceUpdate(self._data.snapshot(), cache=self._cache)

        self._data.merge(raw_presence)

        return old_presence

    def updatable_attributes(self) -> Dict[str, Any]:
        """The fields sent to the API when the member is saved."""
        return {"roles": self.role_ids}

    # computed attributes

    @property
    def id(self) -> str:
        """:class:`str`: The ID of the member's user."""
        return self._data["user"]["id"]

    @property
    def user(self) -> User:
        """:class:`User`: The user behind this member.

        This is the cached user when there is one, otherwise a new :class:`User`
        is built from the payload embedded in the member. That user is not
        added to the cache.
        """
        user = self._cache.get_user(self.id)
        if user is not None:
            return user

        return User(self._data["user"], cache=self._cache)

    @property
    def username(self) -> Optional[str]:
        return self.user.username

    @property
    def discriminator(self) -> Optional[str]:
        return self.user.discriminator

    @property
    def guild(self) -> Optional[Guild]:
        """Optional[:class:`Guild`]: The guild of the member, ``None`` if it is not cached."""
        guild_id = self.guild_id
        if guild_id is None:
            return None
        return self._cache.get_guild(guild_id)

    @property
    def roles(self) -> List[Role]:
        """List[:class:`Role`]: The roles of the member.

        When the guild is cached these are the guild's own roles, in the guild's
        order. When it is not, the role data is unknown and each stored ID is
        wrapped in a :class:`PartialRole`, in stored order.
        """
        role_ids = self.role_ids
        guild = self.guild

        if guild is not None:
            return [role for role in guild.roles if role.id in role_ids]

        return [PartialRole(role_id) for role_id in role_ids]

    @property
    def joined_at(self) -> Optional[datetime.datetime]:
        """Optional[:class:`datetime.datetime`]: When the member joined the guild, in UTC.

        ``None`` when the API did not send it.
        """
        joined_at = self._data.get("joined_at")
        if joined_at is None:
            return None
        return parse_time(joined_at)

    @property
    def deaf(self) -> bool:
        return self._data.get("deaf", False)

    @property
    def mute(self) -> bool:
        return self._data.get("mute", False)

    @property
    def display_name(self) -> Optional[str]:
        """Optional[:class:`str`]: The member's nickname if it has one, otherwise the username."""
        return self.nick or self.username

    @property
    def mention(self) -> str:
        if self.nick:
            return f"<@!{self.id}>"
        return f"<@{self.id}>"

    # local mutations

    def add_role(self, role: Union[Role, Snowflake, str]) -> bool:
        """Adds a role to the member.

        Only the local copy is changed, call :meth:`save` to send it to the API.

        Parameters
        -----------
        role: Union[:class:`Role`, :class:`str`]
            The role, or its ID, to add.

        Returns
        --------
        :class:`bool`
            ``False`` if the member already has the role, in which case nothing changes.
        """
        role_id = _get_id(role)
        roles = self._data.get("roles")
        if roles is None:
            roles = self._data["roles"] = []

        if role_id in roles:
            return False

        roles.append(role_id)
        return True

    def remove_role(self, role: Union[Role, Snowflake, str]) -> bool:
        """Removes a role from the member.

        Only the local copy is changed, call :meth:`save` to send it to the API.

        Returns
        --------
        :class:`bool`
            ``False`` if the member did not have the role, in which case nothing changes.
        """
        role_id = _get_id(role)
        roles = self._data.get("roles") or []

        if role_id not in roles:
            return False

        roles.remove(role_id)
        return True

    # API calls

    async def ban(self, delete_message_days: Optional[int] = None, *, reason: Optional[str] = None) -> Ban:
        """|coro|

        Bans the member from its guild.

        Parameters
        -----------
        delete_message_days: Optional[:class:`int`]
            The number of days worth of messages to delete from the member.

        Raises
        -------
        Forbidden
            You do not have the proper permissions to ban.
        HTTPException
            Banning failed.

        Returns
        --------
        :class:`Ban`
            The ban, referencing the member's user and guild as they were once the API answered.
        """
        await self._cache.api.ban(self.guild_id, self.id, delete_message_days, reason=reason)
        return self._cache.create_ban(user=self.user, guild=self.guild, reason=reason)

    async def set_nickname(self, nick: Optional[str] = None, *, reason: Optional[str] = None) -> None:
        """|coro|

        Changes the member's nickname. Passing ``None`` or an empty string removes it.

        The client's own member is renamed through the ``@me/nick`` endpoint,
        which only needs the change nickname permission, every other member
        requires manage nicknames.

        Raises
        -------
        Forbidden
            You do not have the proper permissions to change the nickname.
        HTTPException
            Changing the nickname failed.
        """
        nick = nick or ""

        if self._cache.user_id == self.id:
            await self._cache.api.change_my_nickname(self.guild_id, nick, reason=reason)
        else:
            await self._cache.api.edit_member(self.guild_id, self.id, nick=nick, reason=reason)

        self._data["nick"] = nick or None

    async def move_member(self, channel: Union[Snowflake, str], *, reason: Optional[str] = None) -> None:
        """|coro|

        Moves the member to another voice channel.

        .. note::

            The API only acknowledges the request, returning does not mean the
            member is now in ``channel``.

        Parameters
        -----------
        channel: Union[:class:`abc.Snowflake`, :class:`str`]
            The voice channel, or its ID, to move the member to.
        """
        await self._cache.api.move_member(self.guild_id, self.id, _get_id(channel), reason=reason)

    async def save(self, *, reason: Optional[str] = None) -> None:
        """|coro|

        Sends the member's roles to the API, persisting :meth:`add_role` and
        :meth:`remove_role` changes. A failure leaves the local roles as they are.
        """
        await self._cache.api.edit_member(self.guild_id, self.id, reason=reason, **self.updatable_attributes())
