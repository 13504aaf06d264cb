"""Tests for value classification."""

import collections as _collections

import pytest as _pytest

import policymatch.engine.kinds as kinds

Kind = kinds.Kind


class TestKindOf:
    """Tests for kind_of."""

    @_pytest.mark.parametrize(
        ("value", "kind"),
        [
            (True, Kind.BOOL),
            (False, Kind.BOOL),
            (0, Kind.INT),
            (2**63 - 1, Kind.INT),
            (1.5, Kind.FLOAT),
            ("", Kind.STRING),
            (None, Kind.NULL),
            ({}, Kind.COMPOSITE),
            (_collections.OrderedDict(), Kind.COMPOSITE),
            ([], Kind.COMPOSITE),
            ((1, 2), Kind.COMPOSITE),
            (b"bytes", Kind.UNSUPPORTED),
            ({1, 2}, Kind.UNSUPPORTED),
            (object(), Kind.UNSUPPORTED),
        ],
    )
    def test_classification(self, value: object, kind: Kind) -> None:
        """Every value maps to exactly one kind."""
        assert kinds.kind_of(value) is kind


class TestTypeName:
    """Tests for type_name."""

    def test_names(self) -> None:
        """None is reported as null, everything else by its type."""
        assert kinds.type_name(None) == "null"
        assert kinds.type_name(5) == "int"
        assert kinds.type_name({}) == "dict"
