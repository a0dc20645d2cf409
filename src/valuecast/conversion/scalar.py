"""Scalar coercion: convert any input to a requested scalar kind.

``coerce`` raises a ``CoercionError`` subclass, ``try_coerce`` returns a
``CoercionResult`` and ``coerce_or`` substitutes a caller default. Symbolic
targets are handed to ``valuecast.conversion.symbolic``.
"""

from __future__ import annotations

import enum
import logging
import math
import re
from decimal import Decimal, InvalidOperation
from typing import Any
from uuid import UUID

from valuecast.conversion.integers import is_reinterpretable, reinterpret
from valuecast.core.config import EngineSettings, get_settings
from valuecast.core.exceptions import CoercionError, UnconvertibleError
from valuecast.core.protocols import SupportsCoercion
from valuecast.core.types import TargetType
from valuecast.models.descriptors import INTEGER_KINDS, ScalarKind, SizedInt, SymbolicType
from valuecast.models.results import CoercionResult

logger = logging.getLogger(__name__)

INTEGER_TEXT = re.compile(r"^[+-]?[0-9]+$")
FLOAT_TEXT = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")
_GUID_D = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
# N, D, B and P layouts: bare digits, hyphenated, braced, parenthesised
GUID_TEXT = re.compile(rf"^(?:[0-9a-fA-F]{{32}}|{_GUID_D}|\{{{_GUID_D}\}}|\({_GUID_D}\))$")
SPECIAL_FLOATS: dict[str, float] = {
    "infinity": math.inf,
    "+infinity": math.inf,
    "-infinity": -math.inf,
    "nan": math.nan,
}

_ZERO_VALUES: dict[ScalarKind, Any] = {
    **{kind: 0 for kind in INTEGER_KINDS},
    ScalarKind.POINTER: 0,
    ScalarKind.BOOL: False,
    ScalarKind.FLOAT: 0.0,
    ScalarKind.DECIMAL: Decimal(0),
    ScalarKind.GUID: UUID(int=0),
}


def resolve_target(target: TargetType | str) -> TargetType:
    """Normalise a target descriptor; plain strings name a ScalarKind."""
    if isinstance(target, (ScalarKind, SymbolicType)):
        return target
    if isinstance(target, str):
        return ScalarKind(target)
    raise TypeError(f"Unsupported conversion target: {target!r}")


def kind_of(value: Any) -> ScalarKind | None:
    """Runtime scalar kind of ``value``.

    Returns None for untyped values: plain ints, enum members and anything
    the engine has no kind for.
    """
    if isinstance(value, SizedInt):
        return value.kind
    if isinstance(value, enum.Enum):
        return None
    if isinstance(value, bool):
        return ScalarKind.BOOL
    if isinstance(value, str):
        return ScalarKind.STRING
    if isinstance(value, float):
        return ScalarKind.FLOAT
    if isinstance(value, Decimal):
        return ScalarKind.DECIMAL
    if isinstance(value, UUID):
        return ScalarKind.GUID
    return None


def format_invariant(value: Any, target: TargetType = ScalarKind.STRING) -> str:
    """Default text form of a value; enum members render as their name.

    Raises:
        UnconvertibleError: ``value`` is an int with more digits than the
            interpreter will render as text.
    """
    if value is None:
        return ""
    if isinstance(value, enum.Enum):
        return value.name if value.name is not None else str(value.value)
    try:
        return str(value)
    except ValueError as exc:
        raise UnconvertibleError(value, target, "too many digits to render as text") from exc


def zero_value(target: TargetType) -> Any:
    if isinstance(target, SymbolicType):
        return 0
    return _ZERO_VALUES[target]


def coerce(value: Any, target: TargetType | str, *, settings: EngineSettings | None = None) -> Any:
    """Convert ``value`` to ``target`` or raise a ``CoercionError``."""
    target = resolve_target(target)
    if settings is None:
        settings = get_settings()

    if target is ScalarKind.ANY:
        return value

    if value is None:
        if target is ScalarKind.STRING:
            raise UnconvertibleError(value, target, "no value")
        return zero_value(target)

    if isinstance(target, SymbolicType):
        from valuecast.conversion.symbolic import decode_symbol

        return decode_symbol(value, target, settings=settings)

    source = kind_of(value)
    if source is target:
        return value.value if isinstance(value, SizedInt) else value

    if target is ScalarKind.GUID:
        return _to_guid(value)

    if target is ScalarKind.POINTER:
        width_kind = ScalarKind.INT64 if settings.pointer_width == 64 else ScalarKind.INT32
        try:
            return coerce(value, width_kind, settings=settings)
        except CoercionError as exc:
            raise UnconvertibleError(value, target, str(exc)) from exc

    if source is not None and target.is_integer and source.is_integer and is_reinterpretable(source, target):
        return reinterpret(value.value, target)

    if isinstance(value, SupportsCoercion):
        try:
            return value.to_scalar(target)
        except Exception as exc:
            raise UnconvertibleError(value, target, str(exc)) from exc

    return _convert_builtin(value, target)


def try_coerce(
    value: Any, target: TargetType | str, *, settings: EngineSettings | None = None
) -> CoercionResult:
    """Convert ``value`` to ``target``, reporting failure in the result."""
    try:
        return CoercionResult.success_result(coerce(value, target, settings=settings))
    except CoercionError as exc:
        logger.debug("Coercion to %s failed: %s", target, exc)
        return CoercionResult.failure_result(exc)


def coerce_or(
    value: Any, target: TargetType | str, default: Any, *, settings: EngineSettings | None = None
) -> Any:
    """Convert ``value`` to ``target``, returning ``default`` on any failure."""
    return try_coerce(value, target, settings=settings).value_or(default)


# ---------------------------------------------------------------------------
# Built-in conversions
# ---------------------------------------------------------------------------

def _convert_builtin(value: Any, kind: ScalarKind) -> Any:
    if isinstance(value, enum.Enum):
        if kind is ScalarKind.STRING:
            return format_invariant(value)
        value = value.value
    if isinstance(value, SizedInt):
        value = value.value

    if kind.is_integer:
        return _to_integer(value, kind)
    if kind is ScalarKind.BOOL:
        return _to_bool(value)
    if kind is ScalarKind.FLOAT:
        return _to_float(value)
    if kind is ScalarKind.DECIMAL:
        return _to_decimal(value)
    if kind is ScalarKind.STRING:
        return format_invariant(value)
    raise UnconvertibleError(value, kind)


def _to_integer(value: Any, kind: ScalarKind) -> int:
    if isinstance(value, int):
        number = int(value)
    elif isinstance(value, (float, Decimal)):
        if not _is_finite(value):
            raise UnconvertibleError(value, kind, "not a finite number")
        number = int(round(value))
    elif isinstance(value, str):
        text = value.strip()
        if not INTEGER_TEXT.match(text):
            raise UnconvertibleError(value, kind, "not an integer literal")
        try:
            number = int(text)
        except ValueError as exc:
            raise UnconvertibleError(value, kind, "integer literal has too many digits") from exc
    else:
        raise UnconvertibleError(value, kind)

    if not kind.contains(number):
        raise UnconvertibleError(value, kind, f"out of range [{kind.min_value}, {kind.max_value}]")
    return number


def _to_bool(value: Any) -> bool:
    if isinstance(value, (int, float, Decimal)):
        return value != 0
    if isinstance(value, str):
        text = value.strip().casefold()
        if text == "true":
            return True
        if text == "false":
            return False
    raise UnconvertibleError(value, ScalarKind.BOOL)


def _to_float(value: Any) -> float:
    if isinstance(value, (int, Decimal)):
        try:
            return float(value)
        except OverflowError as exc:
            raise UnconvertibleError(value, ScalarKind.FLOAT, "out of range") from exc
    if isinstance(value, str):
        text = value.strip()
        special = SPECIAL_FLOATS.get(text.casefold())
        if special is not None:
            return special
        if FLOAT_TEXT.match(text):
            return float(text)
    raise UnconvertibleError(value, ScalarKind.FLOAT)


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, int):
        return Decimal(int(value))
    if isinstance(value, float):
        if not math.isfinite(value):
            raise UnconvertibleError(value, ScalarKind.DECIMAL, "not a finite number")
        return Decimal(repr(value))
    if isinstance(value, str):
        text = value.strip()
        if FLOAT_TEXT.match(text):
            try:
                return Decimal(text)
            except InvalidOperation as exc:
                raise UnconvertibleError(value, ScalarKind.DECIMAL) from exc
    raise UnconvertibleError(value, ScalarKind.DECIMAL)


def _to_guid(value: Any) -> UUID:
    text = format_invariant(value, ScalarKind.GUID).strip()
    if not text:
        raise UnconvertibleError(value, ScalarKind.GUID, "empty input")
    if not GUID_TEXT.match(text):
        raise UnconvertibleError(value, ScalarKind.GUID, "not a GUID in N, D, B or P format")
    return UUID(text.strip("{}()"))


def _is_finite(value: float | Decimal) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)
