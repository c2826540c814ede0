from __future__ import annotations

from typing import Literal, Optional, TypedDict

__all__ = (
    "ActivityType",
    "ActivityTimestamps",
    "Activity",
    "ClientStatus",
    "StatusType",
)


ActivityType = Literal[0, 1, 2, 3, 4, 5]
StatusType = Literal["idle", "dnd", "online", "offline", "invisible"]


class ActivityTimestamps(TypedDict, total=False):
    start: int
    end: int


class ClientStatus(TypedDict, total=False):
    desktop: StatusType
    mobile: StatusType
    web: StatusType


class Activity(TypedDict, total=False):
    name: str
    type: ActivityType
    url: Optional[str]
    created_at: int
    timestamps: ActivityTimestamps
    application_id: str
    details: Optional[str]
    state: Optional[str]
