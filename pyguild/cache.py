from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Dict, Optional, TYPE_CHECKING

from .models.ban import Ban
from .models.guild import Guild
from .models.member import Member
from .models.presence import PresenceUpdate
from .models.user import User

if TYPE_CHECKING:
    from .http import HTTPClient

    from .types.guild import Guild as GuildPayload
    from .types.member import Member as MemberPayload
    from .types.presence import PresenceUpdate as PresenceUpdatePayload
    from .types.user import User as UserPayload

_log = logging.getLogger(__name__)


def _dispatch_nothing(event: str, *args: Any) -> None:
    pass


class CacheManager:
    """Keeps the users and guilds the client knows about.

    Models never own each other: a member stores the IDs of its user and
    guild and looks them up here every time they are needed.
    """

    def __init__(
        self,
        *,
        api: HTTPClient,
        **options: Any,
    ) -> None:
        self.api: HTTPClient = api
        self.dispatch: Callable[..., None] = options.get("dispatch", _dispatch_nothing)
        self.clear()

        # are the functions that the gateway calls for the events
        self.parsers: Dict[str, Callable[[Dict[str, Any]], None]] = {}
        for attr, func in inspect.getmembers(self):
            if attr.startswith("parse_"):
                self.parsers[attr[6:].upper()] = func

    def clear(self) -> None:
        self.user: Optional[User] = None

        self._users: Dict[str, User] = {}
        self._guilds: Dict[str, Guild] = {}

    async def login(self, token: str) -> User:
        """|coro|

        Logs in through the HTTP client and remembers who the client is acting as.
        """
        data = await self.api.static_login(token)
        self.user = self.store_user(data)
        _log.info("Logged in as %s (%s)", self.user, self.user.id)
        return self.user

    @property
    def user_id(self) -> Optional[str]:
        """Optional[:class:`str`]: The ID of the user the client acts as, if logged in."""
        return self.user and self.user.id

    # users

    def get_user(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def store_user(self, data: UserPayload) -> User:
        user_id = data["id"]
        try:
            user = self._users[user_id]
        except KeyError:
            user = User(data, cache=self)
            self._users[user_id] = user
        else:
            user._update(data)

        return user

    # guilds

    def get_guild(self, guild_id: str) -> Optional[Guild]:
        return self._guilds.get(guild_id)

    def store_guild(self, data: GuildPayload) -> Guild:
        guild = self._guilds.get(data["id"])
        if guild is None:
            guild = Guild(data, cache=self)
            self._guilds[guild.id] = guild
        else:
            guild._update(data)

        return guild

    def remove_guild(self, guild_id: str) -> Optional[Guild]:
        return self._guilds.pop(guild_id, None)

    # factories

    def create_member(self, data: MemberPayload, *, guild_id: Optional[str] = None) -> Member:
        return Member(data, cache=self, guild_id=guild_id)

    def create_ban(self, *, user: User, guild: Optional[Guild], reason: Optional[str] = None) -> Ban:
        return Ban(user=user, guild=guild, reason=reason)

    # gateway events

    def parse_guild_create(self, data: GuildPayload) -> None:
        for member in data.get("members", []):
            self.store_user(member["user"])

        guild = self.store_guild(data)
        self.dispatch("guild_join", guild)

    def parse_guild_member_update(self, data: MemberPayload) -> None:
        guild = self.get_guild(data["guild_id"])
        if guild is None:
            _log.debug("GUILD_MEMBER_UPDATE referencing an unknown guild ID: %s. Discarding.", data["guild_id"])
            return

        user_id = data["user"]["id"]
        member = guild.get_member(user_id)
        if member is None:
            _log.debug("GUILD_MEMBER_UPDATE referencing an unknown member ID: %s. Discarding.", user_id)
            return

        self.store_user(data["user"])
        old_member = member._copy()
        member._update(data)
        self.dispatch("member_update", old_member, member)

    def parse_presence_update(self, data: PresenceUpdatePayload) -> None:
        guild = self.get_guild(data["guild_id"])
        if guild is None:
            _log.debug("PRESENCE_UPDATE referencing an unknown guild ID: %s. Discarding.", data["guild_id"])
            return

        user_id = data["user"]["id"]
        member = guild.get_member(user_id)
        if member is None:
            _log.debug("PRESENCE_UPDATE referencing an unknown member ID: %s. Discarding.", user_id)
            return

        presence = PresenceUpdate(data, cache=self)
        old_presence = member.update_from_presence(presence)
        self.dispatch("presence_update", old_presence, member)
