"""Conversion outcome model returned by the ``try_*`` entry points."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from valuecast.core.exceptions import CoercionError


class CoercionResult(BaseModel):
    """Outcome of a single conversion: a value or the error, never both."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    success: bool
    value: Any = None
    error: Optional[CoercionError] = None

    @classmethod
    def success_result(cls, value: Any) -> CoercionResult:
        return cls(success=True, value=value)

    @classmethod
    def failure_result(cls, error: CoercionError) -> CoercionResult:
        return cls(success=False, error=error)

    def unwrap(self) -> Any:
        """Return the value, re-raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.value

    def value_or(self, default: Any) -> Any:
        return self.value if self.success else default
