"""Dataclasses describing items, viewers and report types."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

ItemId = Union[int, str]
Number = Union[int, float]


class Role(str, Enum):
    """Access roles recognised by the item filter."""

    ADMIN = "ADMIN"
    USER = "USER"
    NONE = "NONE"

    @classmethod
    def parse(cls, value: object) -> "Role":
        """Map raw role values onto a member; only exact role names grant access."""

        if isinstance(value, Role):
            return value
        if isinstance(value, str) and value in (cls.ADMIN.value, cls.USER.value):
            return cls(value)
        return cls.NONE


class ReportType(str, Enum):
    """Report types with a built-in format."""

    CSV = "CSV"
    HTML = "HTML"


@dataclass(frozen=True)
class Item:
    """A single record supplied by the item source."""

    id: ItemId
    name: str
    value: Number
    priority: bool = False


@dataclass(frozen=True)
class User:
    """The already-authenticated viewer a report is rendered for."""

    name: str
    role: Role

    def __post_init__(self) -> None:
        object.__setattr__(self, "role", Role.parse(self.role))


__all__ = [
    "Item",
    "ItemId",
    "Number",
    "ReportType",
    "Role",
    "User",
]
