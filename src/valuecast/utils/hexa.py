"""Hexadecimal byte helpers."""

from __future__ import annotations

INVALID_NIBBLE = 0xFF


def hex_digit_value(char: str) -> int:
    """Value of one hex digit, or ``INVALID_NIBBLE`` for anything else."""
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "A" <= char <= "F":
        return ord(char) - ord("A") + 10
    if "a" <= char <= "f":
        return ord(char) - ord("a") + 10
    return INVALID_NIBBLE


def bytes_from_hex(text: str | None) -> bytes | None:
    """Parse hex digit pairs, with an optional ``0x`` prefix.

    Non-hex characters (spaces, dashes, colons) are skipped, so
    ``"0A-0B"`` and ``"0a0b"`` give the same bytes. A trailing unpaired
    digit is dropped.
    """
    if text is None:
        return None

    if text[:2] in ("0x", "0X"):
        text = text[2:]

    out = bytearray()
    high: int | None = None
    for char in text:
        nibble = hex_digit_value(char)
        if nibble == INVALID_NIBBLE:
            continue
        if high is None:
            high = nibble
        else:
            out.append(high * 16 + nibble)
            high = None
    return bytes(out)


def to_hex_string(data: bytes | bytearray | None) -> str:
    """Lowercase two-digit-per-byte rendering, e.g. a public key token."""
    if not data:
        return ""
    return "".join(f"{byte:02x}" for byte in data)
