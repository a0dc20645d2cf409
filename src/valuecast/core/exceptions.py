"""valuecast exception hierarchy."""

from __future__ import annotations

from typing import Any


class ValueCastError(Exception):
    """Base exception for all valuecast errors."""


class CoercionError(ValueCastError):
    """A value could not be converted to the requested target."""

    def __init__(self, value: Any, target: Any, message: str) -> None:
        self.value = value
        self.target = target
        super().__init__(message)


class UnconvertibleError(CoercionError):
    """Scalar input cannot be interpreted as the requested scalar kind."""

    def __init__(self, value: Any, target: Any, reason: str = "") -> None:
        message = f"Cannot convert {_describe(value)} to {_target_name(target)}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(value, target, message)


class DecodeError(CoercionError):
    """Symbolic decoding failed."""


class EmptyInputError(DecodeError):
    """Input reduces to nothing after trimming or splitting."""

    def __init__(self, value: Any, target: Any) -> None:
        super().__init__(value, target, f"Empty input for {_target_name(target)}")


class UnknownTokenError(DecodeError):
    """A token matched no symbol and is not a numeric literal."""

    def __init__(self, value: Any, target: Any, token: str) -> None:
        self.token = token
        super().__init__(value, target, f"Unknown token {token!r} for {_target_name(target)}")


def _describe(value: Any) -> str:
    # repr() of an int past the interpreter's digit limit raises ValueError
    try:
        return repr(value)
    except ValueError:
        return f"<{type(value).__name__} too large to display>"


def _target_name(target: Any) -> str:
    # ScalarKind is a str; SymbolicType carries a name
    if isinstance(target, str):
        return str(target)
    return str(getattr(target, "name", target))
