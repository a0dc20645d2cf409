"""Tests for text helpers."""

from __future__ import annotations

from tests.fakes import PERMISSIONS
from valuecast.models.descriptors import ScalarKind
from valuecast.utils.text import equals_ignore_case, nullify, split_to_list


class TestNullify:
    def test_trims(self):
        assert nullify("  a b ") == "a b"

    def test_blank_is_none(self):
        assert nullify("") is None
        assert nullify(" \t\n") is None
        assert nullify(None) is None


class TestEqualsIgnoreCase:
    def test_compares_without_case(self):
        assert equals_ignore_case("Read", "READ")
        assert not equals_ignore_case("Read", "Reads")

    def test_none_handling(self):
        assert equals_ignore_case(None, None)
        assert not equals_ignore_case("a", None)
        assert not equals_ignore_case(None, "a")

    def test_trim(self):
        assert equals_ignore_case(" Read ", "read", trim=True)
        assert not equals_ignore_case(" Read ", "read")
        assert equals_ignore_case("   ", None, trim=True)


class TestSplitToList:
    def test_coerces_each_item(self):
        assert split_to_list("1, 2;;x", ScalarKind.INT32, ",;") == [1, 2, None]

    def test_symbolic_items(self):
        assert split_to_list("Read/Write,Execute", PERMISSIONS, "/") == [1, 6]

    def test_missing_input_or_separators(self):
        assert split_to_list(None, ScalarKind.INT32, ",") == []
        assert split_to_list("1,2", ScalarKind.INT32, "") == []
