"""Tests for scalar kinds, sized integers and symbolic catalogs."""

from __future__ import annotations

import enum

import pytest
from pydantic import ValidationError

from tests.fakes import COLORS, Color, FileAccess
from valuecast.core.exceptions import UnconvertibleError
from valuecast.models.descriptors import ScalarKind, SizedInt, SymbolicType
from valuecast.models.results import CoercionResult


class TestScalarKind:
    def test_integer_layout(self):
        assert ScalarKind.INT8.min_value == -128
        assert ScalarKind.INT8.max_value == 127
        assert ScalarKind.UINT64.max_value == (1 << 64) - 1
        assert ScalarKind.UINT16.signed is False
        assert ScalarKind.INT32.bits == 32

    def test_non_integer_kinds(self):
        assert not ScalarKind.BOOL.is_integer
        assert not ScalarKind.POINTER.is_integer
        assert ScalarKind.UINT8.is_integer

    def test_kinds_compare_as_text(self):
        assert ScalarKind("uint32") is ScalarKind.UINT32
        assert str(ScalarKind.GUID) == "guid"


class TestSizedInt:
    def test_holds_value_in_range(self):
        value = SizedInt.of(ScalarKind.UINT32, 4294967295)
        assert value.kind is ScalarKind.UINT32
        assert int(value) == 4294967295
        assert str(value) == "4294967295"

    def test_rejects_out_of_range_value(self):
        with pytest.raises(ValidationError):
            SizedInt.of(ScalarKind.UINT8, 256)
        with pytest.raises(ValidationError):
            SizedInt.of(ScalarKind.INT8, -129)

    def test_rejects_non_integer_kind(self):
        with pytest.raises(ValidationError):
            SizedInt.of(ScalarKind.BOOL, 1)


class TestSymbolicType:
    def test_preserves_declaration_order(self):
        assert COLORS.names == ("Red", "Green", "Blue")

    def test_allows_aliased_values(self):
        catalog = SymbolicType.from_members("Level", [("Low", 1), ("Minimum", 1)])
        assert [m.value for m in catalog.members] == [1, 1]

    def test_rejects_names_differing_only_by_case(self):
        with pytest.raises(ValidationError):
            SymbolicType.from_members("Dup", [("Red", 0), ("RED", 1)])

    def test_rejects_value_outside_underlying_kind(self):
        with pytest.raises(ValidationError):
            SymbolicType.from_members("Big", {"Huge": 300}, underlying=ScalarKind.UINT8)

    def test_rejects_non_integer_underlying(self):
        with pytest.raises(ValidationError):
            SymbolicType(name="Bad", underlying=ScalarKind.FLOAT)

    def test_is_immutable(self):
        with pytest.raises(ValidationError):
            COLORS.is_bitmask = True


class TestFromEnum:
    def test_plain_enum(self):
        catalog = SymbolicType.from_enum(Color)
        assert catalog.name == "Color"
        assert catalog.names == ("RED", "GREEN", "BLUE")
        assert catalog.is_bitmask is False
        assert catalog.underlying is ScalarKind.INT32

    def test_flag_enum_is_bitmask(self):
        assert SymbolicType.from_enum(FileAccess).is_bitmask is True

    def test_includes_aliases(self):
        class Shape(enum.IntEnum):
            SQUARE = 4
            QUAD = 4

        assert SymbolicType.from_enum(Shape).names == ("SQUARE", "QUAD")

    def test_infers_wider_underlying(self):
        class Big(enum.IntEnum):
            SMALL = 1
            LARGE = 1 << 40

        class Huge(enum.IntEnum):
            TOP = (1 << 64) - 1

        assert SymbolicType.from_enum(Big).underlying is ScalarKind.INT64
        assert SymbolicType.from_enum(Huge).underlying is ScalarKind.UINT64

    def test_rejects_non_integer_values(self):
        class Named(enum.Enum):
            A = "a"

        with pytest.raises(TypeError):
            SymbolicType.from_enum(Named)


class TestCoercionResult:
    def test_success(self):
        result = CoercionResult.success_result(5)
        assert result.success
        assert result.unwrap() == 5
        assert result.value_or(0) == 5

    def test_failure(self):
        error = UnconvertibleError("x", ScalarKind.INT32)
        result = CoercionResult.failure_result(error)
        assert not result.success
        assert result.value_or(-1) == -1
        with pytest.raises(UnconvertibleError):
            result.unwrap()
