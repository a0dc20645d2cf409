"""Shared test doubles: sample catalogs, enums and self-converting values."""

from __future__ import annotations

import enum
from typing import Any

from valuecast.models.descriptors import ScalarKind, SymbolicType


class Color(enum.Enum):
    RED = 0
    GREEN = 1
    BLUE = 2


class FileAccess(enum.IntFlag):
    READ = 1
    WRITE = 2
    EXECUTE = 4


COLORS = SymbolicType.from_members("Color", {"Red": 0, "Green": 1, "Blue": 2})

PERMISSIONS = SymbolicType.from_members(
    "Permissions", {"Read": 1, "Write": 2, "Execute": 4}, is_bitmask=True
)

LEVELS = SymbolicType.from_members("Level", [("Low", 1), ("Minimum", 1), ("High", 9)])

OFFSETS = SymbolicType.from_members(
    "Offset", [("Back", -1), ("Forward", 1)], underlying=ScalarKind.INT8
)

BYTE_CODES = SymbolicType.from_members("ByteCode", {"Nul": 0, "Max": 255}, underlying=ScalarKind.UINT8)

WIDE = SymbolicType.from_members(
    "Wide", [("Zero", 0), ("Top", (1 << 64) - 1)], underlying=ScalarKind.UINT64
)

SIGNED_FLAGS = SymbolicType.from_members(
    "SignedFlags", [("Low", 1), ("Sign", -(1 << 31))], is_bitmask=True
)

EMPTY_CATALOG = SymbolicType(name="Nothing")


class FixedCoercible:
    """Converts itself to a fixed value for any kind."""

    def __init__(self, result: Any) -> None:
        self.result = result
        self.requested: list[ScalarKind] = []

    def to_scalar(self, kind: ScalarKind) -> Any:
        self.requested.append(kind)
        return self.result


class BrokenCoercible:
    """Refuses every conversion."""

    def to_scalar(self, kind: ScalarKind) -> Any:
        raise ValueError(f"no {kind} for you")


__all__ = [
    "BYTE_CODES",
    "COLORS",
    "EMPTY_CATALOG",
    "LEVELS",
    "OFFSETS",
    "PERMISSIONS",
    "SIGNED_FLAGS",
    "WIDE",
    "BrokenCoercible",
    "Color",
    "FileAccess",
    "FixedCoercible",
]
