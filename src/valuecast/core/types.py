"""Type aliases used across valuecast."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from valuecast.models.descriptors import ScalarKind, SymbolicType

TargetType = Union["ScalarKind", "SymbolicType"]
