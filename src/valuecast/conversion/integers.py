"""Fixed-width integer reinterpretation (unchecked casts).

Converting between an unsigned and a signed fixed-width kind keeps the
two's-complement bit pattern: high-order bits that do not fit the target are
discarded, narrower sources are sign- or zero-extended. The pairs are listed
explicitly so the table stays exhaustive over the eight integer kinds.
"""

from __future__ import annotations

from valuecast.models.descriptors import ScalarKind

I8, I16, I32, I64 = ScalarKind.INT8, ScalarKind.INT16, ScalarKind.INT32, ScalarKind.INT64
U8, U16, U32, U64 = ScalarKind.UINT8, ScalarKind.UINT16, ScalarKind.UINT32, ScalarKind.UINT64

# (source kind, target kind)
REINTERPRET_PAIRS: frozenset[tuple[ScalarKind, ScalarKind]] = frozenset({
    # unsigned -> signed
    (U8, I8), (U8, I16), (U8, I32), (U8, I64),
    (U16, I8), (U16, I16), (U16, I32), (U16, I64),
    (U32, I8), (U32, I16), (U32, I32), (U32, I64),
    (U64, I8), (U64, I16), (U64, I32), (U64, I64),
    # signed -> unsigned
    (I8, U8), (I8, U16), (I8, U32), (I8, U64),
    (I16, U8), (I16, U16), (I16, U32), (I16, U64),
    (I32, U8), (I32, U16), (I32, U32), (I32, U64),
    (I64, U8), (I64, U16), (I64, U32), (I64, U64),
})


def is_reinterpretable(source: ScalarKind, target: ScalarKind) -> bool:
    """True when ``source`` -> ``target`` is an unchecked cross-signedness cast."""
    return (source, target) in REINTERPRET_PAIRS


def reinterpret(value: int, kind: ScalarKind) -> int:
    """Keep the low-order bits of ``value`` that fit ``kind``.

    Never range-checks and never fails for an integer kind:
    ``reinterpret(4294967295, INT32) == -1`` and
    ``reinterpret(-1, UINT16) == 65535``.
    """
    if not kind.is_integer:
        raise TypeError(f"{kind} is not a fixed-width integer kind")
    bits = value & ((1 << kind.bits) - 1)
    if kind.signed and bits > kind.max_value:
        bits -= 1 << kind.bits
    return bits


def to_uint64(value: int) -> int:
    return reinterpret(value, U64)


def to_int64(value: int) -> int:
    return reinterpret(value, I64)
