from __future__ import annotations

import datetime
from typing import TYPE_CHECKING, Optional, Union

from ..enums import ActivityType, try_enum
from .raw import RawData

if TYPE_CHECKING:
    from ..types.activity import Activity as ActivityPayload

__all__ = ("Activity",)


class Activity:
    """Represents an activity a member is playing, streaming or listening to.

    An activity built from an empty payload is falsy, members that are not
    doing anything report such an empty activity for :attr:`Member.game`.
    """
    __slots__ = ("_data",)

    def __init__(self, data: Optional[ActivityPayload] = None):
        self._data = RawData(data or {})

    def __repr__(self) -> str:
        return f"<Activity type={self.type!r} name={self.name!r}>"

    def __bool__(self) -> bool:
        return bool(self._data)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Activity) and self._data == other._data

    def to_dict(self) -> ActivityPayload:
        return dict(self._data)

    @property
    def name(self) -> Optional[str]:
        return self._data.get("name")

    @property
    def type(self) -> Union[ActivityType, int]:
        if "type" not in self._data:
            return ActivityType.unknown
        return try_enum(ActivityType, self._data["type"])

    @property
    def url(self) -> Optional[str]:
        return self._data.get("url")

    @property
    def details(self) -> Optional[str]:
        return self._data.get("details")

    @property
    def state(self) -> Optional[str]:
        return self._data.get("state")

    @property
    def created_at(self) -> Optional[datetime.datetime]:
        """Optional[:class:`datetime.datetime`]: When the activity started, in UTC."""
        created_at = self._data.get("created_at")
        if created_at is None:
            return None
        return datetime.datetime.fromtimestamp(created_at / 1000, tz=datetime.timezone.utc)
