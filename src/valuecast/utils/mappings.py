"""Typed lookups over string-keyed mappings (settings dicts, attribute bags)."""

from __future__ import annotations

import enum
import operator
from collections.abc import Callable, Mapping
from decimal import Decimal
from typing import Any
from uuid import UUID

from valuecast.conversion.scalar import coerce_or
from valuecast.conversion.symbolic import to_enum
from valuecast.core.types import TargetType
from valuecast.models.descriptors import ScalarKind, SizedInt
from valuecast.utils.text import nullify

# Checked in order: bool before int
_DEFAULT_KINDS: tuple[tuple[type, ScalarKind], ...] = (
    (bool, ScalarKind.BOOL),
    (int, ScalarKind.INT64),
    (float, ScalarKind.FLOAT),
    (Decimal, ScalarKind.DECIMAL),
    (str, ScalarKind.STRING),
    (UUID, ScalarKind.GUID),
)


def infer_target(default: Any) -> TargetType:
    """Target kind implied by a default value's type."""
    if default is None:
        return ScalarKind.ANY
    if isinstance(default, SizedInt):
        return default.kind
    for python_type, kind in _DEFAULT_KINDS:
        if isinstance(default, python_type):
            return kind
    raise TypeError(f"Cannot infer a conversion target from {type(default).__name__}; pass target=")


def get_value(
    mapping: Mapping[str, Any] | None,
    key: str,
    default: Any,
    target: TargetType | str | None = None,
) -> Any:
    """Look up ``key`` and convert it like ``default``; ``default`` on any miss.

    Enum defaults decode the stored value as a member of the same enum.
    """
    if mapping is None or key not in mapping:
        return default

    raw = mapping[key]
    if target is None and isinstance(default, enum.Enum):
        return to_enum(raw, type(default), default)
    if target is None:
        target = infer_target(default)
    return coerce_or(raw, target, default)


def get_nullified_value(mapping: Mapping[str, Any] | None, key: str, default: str | None = None) -> str | None:
    """Trimmed text stored under ``key``; blank values become None."""
    if mapping is None or key not in mapping:
        return default
    raw = mapping[key]
    return None if raw is None else nullify(str(raw))


def compare_mappings(
    first: Mapping[Any, Any] | None,
    second: Mapping[Any, Any] | None,
    equals: Callable[[Any, Any], bool] | None = None,
) -> bool:
    """True when both mappings hold the same keys with equal values."""
    if first is None:
        return second is None
    if second is None:
        return False
    if len(first) != len(second):
        return False
    if equals is None:
        equals = operator.eq

    missing = object()
    for key, value in first.items():
        other = second.get(key, missing)
        if other is missing or not equals(other, value):
            return False
    for key, value in second.items():
        other = first.get(key, missing)
        if other is missing or not equals(other, value):
            return False
    return True
