"""Protocol interfaces for values that take part in coercion.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from valuecast.models.descriptors import ScalarKind


@runtime_checkable
class SupportsCoercion(Protocol):
    """A value that knows how to convert itself to a scalar kind.

    Implementations return the converted value or raise; any exception is
    reported to the caller as an UnconvertibleError.
    """

    def to_scalar(self, kind: ScalarKind) -> Any: ...
