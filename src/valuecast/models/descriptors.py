"""Type descriptors: scalar kinds, sized integers and symbolic catalogs.

A conversion target is either a ``ScalarKind`` or a ``SymbolicType``. Both
are immutable and owned by the caller; the engine only reads them.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from enum import StrEnum

from pydantic import BaseModel, model_validator


class ScalarKind(StrEnum):
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    BOOL = "bool"
    FLOAT = "float"
    DECIMAL = "decimal"
    STRING = "string"
    GUID = "guid"
    POINTER = "pointer"
    ANY = "any"

    @property
    def is_integer(self) -> bool:
        """True for the fixed-width integer kinds (pointer excluded)."""
        return self in _INTEGER_LAYOUT

    @property
    def bits(self) -> int:
        return _INTEGER_LAYOUT[self][0]

    @property
    def signed(self) -> bool:
        return _INTEGER_LAYOUT[self][1]

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value


# kind -> (bit width, signed)
_INTEGER_LAYOUT: dict[ScalarKind, tuple[int, bool]] = {
    ScalarKind.INT8: (8, True),
    ScalarKind.INT16: (16, True),
    ScalarKind.INT32: (32, True),
    ScalarKind.INT64: (64, True),
    ScalarKind.UINT8: (8, False),
    ScalarKind.UINT16: (16, False),
    ScalarKind.UINT32: (32, False),
    ScalarKind.UINT64: (64, False),
}

INTEGER_KINDS: tuple[ScalarKind, ...] = tuple(_INTEGER_LAYOUT)
SIGNED_KINDS: tuple[ScalarKind, ...] = tuple(k for k in INTEGER_KINDS if k.signed)
UNSIGNED_KINDS: tuple[ScalarKind, ...] = tuple(k for k in INTEGER_KINDS if not k.signed)


class SizedInt(BaseModel):
    """An integer tagged with its fixed-width runtime kind.

    Plain Python ints carry no width; wrap a value in ``SizedInt`` to say
    "this is an unsigned 32-bit value" so the reinterpretation rules apply.
    """

    model_config = {"frozen": True}

    kind: ScalarKind
    value: int

    @model_validator(mode="after")
    def _check_range(self) -> SizedInt:
        if not self.kind.is_integer:
            raise ValueError(f"{self.kind} is not a fixed-width integer kind")
        if not self.kind.contains(self.value):
            raise ValueError(f"{self.value} does not fit in {self.kind}")
        return self

    @classmethod
    def of(cls, kind: ScalarKind | str, value: int) -> SizedInt:
        return cls(kind=ScalarKind(kind), value=value)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


class Symbol(BaseModel):
    """A named integer constant within a symbolic type."""

    model_config = {"frozen": True}

    name: str
    value: int


class SymbolicType(BaseModel):
    """An ordered catalog of named integer constants.

    Declaration order is significant: name and numeric lookups return the
    first matching member. Values may repeat (aliases); names may not, even
    when they differ only by case.
    """

    model_config = {"frozen": True}

    name: str
    members: tuple[Symbol, ...] = ()
    underlying: ScalarKind = ScalarKind.INT32
    is_bitmask: bool = False

    @model_validator(mode="after")
    def _check_catalog(self) -> SymbolicType:
        if not self.underlying.is_integer:
            raise ValueError(f"underlying kind of {self.name} must be an integer kind, got {self.underlying}")
        seen: set[str] = set()
        for member in self.members:
            folded = member.name.casefold()
            if folded in seen:
                raise ValueError(f"duplicate symbol name {member.name!r} in {self.name}")
            seen.add(folded)
            if not self.underlying.contains(member.value):
                raise ValueError(
                    f"symbol {member.name!r}={member.value} does not fit in {self.underlying}"
                )
        return self

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(m.name for m in self.members)

    @classmethod
    def from_members(
        cls,
        name: str,
        members: Mapping[str, int] | Iterable[tuple[str, int]],
        *,
        underlying: ScalarKind = ScalarKind.INT32,
        is_bitmask: bool = False,
    ) -> SymbolicType:
        """Build a catalog from ``(name, value)`` pairs, keeping their order."""
        pairs = members.items() if isinstance(members, Mapping) else members
        return cls(
            name=name,
            members=tuple(Symbol(name=n, value=v) for n, v in pairs),
            underlying=underlying,
            is_bitmask=is_bitmask,
        )

    @classmethod
    def from_enum(cls, enum_cls: type[enum.Enum], underlying: ScalarKind | None = None) -> SymbolicType:
        """Build a catalog from a Python enum class.

        Aliases are included in declaration order. ``enum.Flag`` subclasses
        become bitmask sets. When ``underlying`` is omitted the narrowest of
        int32, int64 and uint64 that holds every value is used.
        """
        pairs: list[tuple[str, int]] = []
        for member_name, member in enum_cls.__members__.items():
            if not isinstance(member.value, int) or isinstance(member.value, bool):
                raise TypeError(f"{enum_cls.__name__}.{member_name} has a non-integer value")
            pairs.append((member_name, member.value))
        if underlying is None:
            underlying = _infer_underlying(v for _, v in pairs)
        return cls.from_members(
            enum_cls.__name__,
            pairs,
            underlying=underlying,
            is_bitmask=issubclass(enum_cls, enum.Flag),
        )


def _infer_underlying(values: Iterable[int]) -> ScalarKind:
    kind = ScalarKind.INT32
    for value in values:
        if kind is ScalarKind.INT32 and not kind.contains(value):
            kind = ScalarKind.INT64
        if kind is ScalarKind.INT64 and not kind.contains(value):
            kind = ScalarKind.UINT64
    return kind
