from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .guild import Guild
    from .user import User

__all__ = ("Ban",)


class Ban:
    """Represents a ban of a user from a guild.

    Attributes
    -----------
    user: :class:`User`
        The banned user.
    guild: Optional[:class:`Guild`]
        The guild the user was banned from, ``None`` if it is not cached.
    reason: Optional[:class:`str`]
        The reason of the ban, if any.
    """
    __slots__ = ("user", "guild", "reason")

    def __init__(self, *, user: User, guild: Optional[Guild], reason: Optional[str] = None):
        self.user = user
        self.guild = guild
        self.reason = reason

    def __repr__(self) -> str:
        guild_id = self.guild and self.guild.id
        return f"<Ban user={self.user!r} guild_id={guild_id} reason={self.reason!r}>"
