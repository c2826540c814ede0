from enum import Enum
from typing import Any, Type, TypeVar, Union

__all__ = (
    "Status",
    "ActivityType",
    "try_enum",
)

E = TypeVar("E", bound=Enum)


class Status(Enum):
    online         = "online"
    offline        = "offline"
    idle           = "idle"
    do_not_disturb = "dnd"
    invisible      = "invisible"

    def __str__(self) -> str:
        return self.value


class ActivityType(Enum):
    unknown   = -1
    playing   = 0
    streaming = 1
    listening = 2
    watching  = 3
    custom    = 4
    competing = 5

    def __int__(self) -> int:
        return self.value


def try_enum(cls: Type[E], val: Any) -> Union[E, Any]:
    """A function that tries to turn the value into enum ``cls``.

    If it fails it returns the raw value instead.
    """
    try:
        return cls(val)
    except ValueError:
        return val
