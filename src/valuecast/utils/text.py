"""Text helpers: nullification, case-insensitive comparison, list splitting."""

from __future__ import annotations

import re
from typing import Any

from valuecast.conversion.scalar import coerce_or
from valuecast.core.types import TargetType


def nullify(text: str | None) -> str | None:
    """Trim ``text``; blank or missing text becomes None."""
    if text is None:
        return None
    text = text.strip()
    return text or None


def equals_ignore_case(text: str | None, other: str | None, trim: bool = False) -> bool:
    if trim:
        text = nullify(text)
        other = nullify(other)

    if text is None:
        return other is None
    if other is None:
        return False
    if len(text) != len(other):
        return False
    return text.casefold() == other.casefold()


def split_to_list(text: str | None, target: TargetType | str, separators: str) -> list[Any]:
    """Split ``text`` on any of ``separators`` and coerce each non-blank item.

    Items that fail to convert are kept as None.
    """
    if text is None or not separators:
        return []

    pattern = "[" + re.escape(separators) + "]"
    items: list[Any] = []
    for part in re.split(pattern, text):
        item = nullify(part)
        if item is None:
            continue
        items.append(coerce_or(item, target, None))
    return items
