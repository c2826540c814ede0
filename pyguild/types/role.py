from __future__ import annotations

from typing import TYPE_CHECKING, TypedDict

if TYPE_CHECKING:
    from .snowflake import Snowflake

__all__ = ("Role",)


class _RoleOptional(TypedDict, total=False):
    icon: str
    unicode_emoji: str
    tags: dict


class Role(_RoleOptional):
    id: Snowflake
    name: str
    color: int
    hoist: bool
    position: int
    permissions: str
    managed: bool
    mentionable: bool
