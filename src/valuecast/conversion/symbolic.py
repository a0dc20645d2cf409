"""Symbolic decoding: resolve text against a catalog of named constants.

Input is resolved in this order:

1. ``0x``/``0X`` literals are read as unsigned 64-bit hex and reinterpreted
   into the catalog's underlying width.
2. Single tokens match a symbol name (case-insensitive), then a symbol's
   decimal rendering, then any numeric literal that fits the underlying kind.
3. Text containing any of ``, ; + |`` or a space, and any text for a bitmask
   type, is split into tokens whose values are OR-combined. One unknown
   token fails the whole decode.

Catalogs are scanned on every call; nothing is cached.
"""

from __future__ import annotations

import enum
import logging
import re
from typing import Any, TypeVar

from valuecast.conversion.integers import reinterpret, to_int64, to_uint64
from valuecast.conversion.scalar import coerce, coerce_or, format_invariant, try_coerce
from valuecast.core.config import EngineSettings, get_settings
from valuecast.core.exceptions import CoercionError, EmptyInputError, UnknownTokenError
from valuecast.models.descriptors import ScalarKind, SizedInt, SymbolicType
from valuecast.models.results import CoercionResult
from valuecast.utils.text import equals_ignore_case, nullify

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=enum.Enum)

SEPARATORS = ",;+| "
_SEPARATOR_SPLIT = re.compile("[" + re.escape(SEPARATORS) + "]")
_HEX_BODY = re.compile(r"^[0-9a-fA-F]+$")
_UINT64_MAX = (1 << 64) - 1


def decode_symbol(value: Any, symtype: SymbolicType, *, settings: EngineSettings | None = None) -> int:
    """Resolve ``value`` to an integer of ``symtype``'s underlying kind.

    Raises:
        EmptyInputError: the input is blank or has only separators.
        UnknownTokenError: a token is neither a symbol nor a numeric literal.
    """
    if settings is None:
        settings = get_settings()

    text = nullify(format_invariant(value, symtype))
    if text is None:
        raise EmptyInputError(value, symtype)

    if text[:2].lower() == "0x":
        number = _parse_hex(text[2:])
        if number is not None:
            return reinterpret(number, symtype.underlying)
        logger.debug("Hex literal %r for %s did not parse, resolving by name", text, symtype.name)

    if not symtype.members:
        raise UnknownTokenError(value, symtype, text)

    multi_token = symtype.is_bitmask or (
        not settings.strict_symbol_separators and _SEPARATOR_SPLIT.search(text) is not None
    )
    if not multi_token:
        resolved = resolve_token(symtype, text)
        if resolved is None:
            raise UnknownTokenError(value, symtype, text)
        return resolved

    tokens = [token for token in map(nullify, _SEPARATOR_SPLIT.split(text)) if token is not None]
    if not tokens:
        raise EmptyInputError(value, symtype)

    accumulator = 0
    for token in tokens:
        resolved = resolve_token(symtype, token)
        if resolved is None:
            raise UnknownTokenError(value, symtype, token)
        accumulator |= to_uint64(resolved)
    return reinterpret(accumulator, symtype.underlying)


def try_decode_symbol(
    value: Any, symtype: SymbolicType, *, settings: EngineSettings | None = None
) -> CoercionResult:
    try:
        return CoercionResult.success_result(decode_symbol(value, symtype, settings=settings))
    except CoercionError as exc:
        logger.debug("Decoding as %s failed: %s", symtype.name, exc)
        return CoercionResult.failure_result(exc)


def decode_symbol_or(
    value: Any, symtype: SymbolicType, default: Any, *, settings: EngineSettings | None = None
) -> Any:
    return try_decode_symbol(value, symtype, settings=settings).value_or(default)


def resolve_token(symtype: SymbolicType, token: str) -> int | None:
    """Resolve one trimmed, non-empty token; None when nothing matches.

    The first declared member wins both the name and the numeric-text match.
    """
    for member in symtype.members:
        if equals_ignore_case(member.name, token):
            return member.value

    negative = token.startswith("-")
    for member in symtype.members:
        rendering = to_int64(member.value) if negative else to_uint64(member.value)
        if str(rendering) == token:
            return member.value

    if token[0].isdigit() or token[0] in "+-":
        result = try_coerce(token, symtype.underlying)
        if result.success:
            return result.value
    return None


def symbol_to_uint64(value: Any, symtype: SymbolicType | None = None) -> int:
    """Unsigned 64-bit view of a symbol value; signed values sign-extend.

    Strings are decoded against ``symtype`` first when one is given.
    """
    if isinstance(value, str) and symtype is not None:
        value = decode_symbol(value, symtype)
    if isinstance(value, enum.Enum):
        value = value.value
    if isinstance(value, SizedInt):
        value = value.value
    if isinstance(value, int):
        return to_uint64(value)
    return coerce_or(value, ScalarKind.UINT64, 0)


def to_symbol_value(symtype: SymbolicType, value: Any) -> int:
    """Convert ``value`` into ``symtype``'s underlying representation."""
    return coerce(value, symtype.underlying)


def to_enum(
    value: Any, enum_cls: type[E], default: E | None = None, *, settings: EngineSettings | None = None
) -> E | None:
    """Decode ``value`` into a member of ``enum_cls``, or return ``default``.

    Values without a member in a non-flag enum count as failures.
    """
    if isinstance(value, enum_cls):
        return value
    if value is None:
        return default
    symtype = SymbolicType.from_enum(enum_cls)
    result = try_decode_symbol(value, symtype, settings=settings)
    if not result.success:
        return default
    try:
        return enum_cls(result.value)
    except ValueError:
        logger.debug("%s has no member for value %r", enum_cls.__name__, result.value)
        return default


def _parse_hex(body: str) -> int | None:
    body = body.strip()
    if not _HEX_BODY.match(body):
        return None
    number = int(body, 16)
    return number if number <= _UINT64_MAX else None
