"""Deterministic GUIDs derived from text."""

from __future__ import annotations

import hashlib
from uuid import UUID

NIL_GUID = UUID(int=0)


def compute_guid_hash(text: str | None) -> UUID:
    """MD5 of the UTF-8 text, laid out as a little-endian (Windows) GUID."""
    if text is None:
        return NIL_GUID
    digest = hashlib.md5(text.encode("utf-8"), usedforsecurity=False).digest()
    return UUID(bytes_le=digest)
