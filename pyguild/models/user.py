from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .mixins import Hashable
from .raw import RawData

if TYPE_CHECKING:
    from ..cache import CacheManager
    from ..types.user import User as UserPayload

__all__ = ("User",)


class User(Hashable):
    """Represents a Discord user.

    .. container:: operations

        .. describe:: x == y

            Checks if two users are equal.

        .. describe:: hash(x)

            Return the user's hash.

        .. describe:: str(x)

            Returns the user's name with discriminator.
    """
    __slots__ = (
        "_cache",
        "_data",
    )

    def __init__(self, data: UserPayload, *, cache: Optional[CacheManager] = None):
        self._cache = cache
        self._data = RawData(data)

    def __str__(self) -> str:
        if self.discriminator in (None, "0"):
            return self.username
        return f"{self.username}#{self.discriminator}"

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r} discriminator={self.discriminator!r} bot={self.bot}>"

    def _update(self, data: UserPayload) -> None:
        self._data.merge(data)

    @property
    def id(self) -> str:
        return self._data["id"]

    @property
    def username(self) -> Optional[str]:
        return self._data.get("username")

    @property
    def discriminator(self) -> Optional[str]:
        return self._data.get("discriminator")

    @property
    def avatar(self) -> Optional[str]:
        """Optional[:class:`str`]: The avatar hash the user has, if any."""
        return self._data.get("avatar")

    @property
    def bot(self) -> bool:
        return self._data.get("bot", False)

    @property
    def mention(self) -> str:
        """:class:`str`: Returns a string that allows you to mention the given user."""
        return f"<@{self.id}>"
