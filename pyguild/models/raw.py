from __future__ import annotations

import copy
from typing import Any, Dict, Mapping, Optional

__all__ = ("RawData",)


class RawData(Dict[str, Any]):
    """The last known field values of an entity, exactly as received
    from the API.

    Values are copied in, so the store never shares lists or dicts with
    the payload it was built or merged from.

    Nothing is validated here, the models reading these fields are
    responsible for that.
    """

    __slots__ = ()

    def __init__(self, data: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__()
        if data is not None:
            self.merge(data)

    def merge(self, patch: Mapping[str, Any]) -> None:
        """Overwrites the keys present in ``patch`` and leaves every
        other key untouched."""
        for key, value in patch.items():
            self[key] = copy.deepcopy(value)

    def snapshot(self) -> RawData:
        """Returns a deep copy that shares no mutable state with this store."""
        return RawData(self)

    def __repr__(self) -> str:
        return f"<RawData {dict.__repr__(self)}>"
