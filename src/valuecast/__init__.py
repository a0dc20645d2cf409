"""valuecast: scalar coercion and symbolic (enum/flag) decoding."""

from __future__ import annotations

from valuecast.conversion.integers import reinterpret
from valuecast.conversion.scalar import coerce, coerce_or, kind_of, try_coerce
from valuecast.conversion.symbolic import (
    decode_symbol,
    decode_symbol_or,
    resolve_token,
    symbol_to_uint64,
    to_enum,
    to_symbol_value,
    try_decode_symbol,
)
from valuecast.core.config import EngineSettings, get_settings
from valuecast.core.exceptions import (
    CoercionError,
    DecodeError,
    EmptyInputError,
    UnconvertibleError,
    UnknownTokenError,
    ValueCastError,
)
from valuecast.models.descriptors import ScalarKind, SizedInt, Symbol, SymbolicType
from valuecast.models.results import CoercionResult
from valuecast.utils.filetime import (
    to_file_time,
    to_file_time_utc,
    to_positive_file_time,
    to_positive_file_time_utc,
)
from valuecast.utils.hashing import compute_guid_hash
from valuecast.utils.hexa import bytes_from_hex, to_hex_string
from valuecast.utils.mappings import compare_mappings, get_nullified_value, get_value
from valuecast.utils.text import equals_ignore_case, nullify, split_to_list

__version__ = "0.1.0"

__all__ = [
    "CoercionError",
    "CoercionResult",
    "DecodeError",
    "EmptyInputError",
    "EngineSettings",
    "ScalarKind",
    "SizedInt",
    "Symbol",
    "SymbolicType",
    "UnconvertibleError",
    "UnknownTokenError",
    "ValueCastError",
    "bytes_from_hex",
    "coerce",
    "coerce_or",
    "compare_mappings",
    "compute_guid_hash",
    "decode_symbol",
    "decode_symbol_or",
    "equals_ignore_case",
    "get_nullified_value",
    "get_settings",
    "get_value",
    "kind_of",
    "nullify",
    "reinterpret",
    "resolve_token",
    "split_to_list",
    "symbol_to_uint64",
    "to_enum",
    "to_file_time",
    "to_file_time_utc",
    "to_hex_string",
    "to_positive_file_time",
    "to_positive_file_time_utc",
    "to_symbol_value",
    "try_coerce",
    "try_decode_symbol",
]
