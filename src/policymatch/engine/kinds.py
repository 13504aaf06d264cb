"""
Classification of loosely-typed values into a closed set of kinds.

Values and patterns reach the matcher as whatever a YAML/JSON decoder
produced. Every comparator works on a `Kind` rather than on ad-hoc
isinstance checks, so the set of cases a handler must cover is explicit.
"""

from __future__ import annotations

import collections.abc as _abc
import enum as _enum
import typing as _typing


class Kind(_enum.Enum):
    """Kinds a value or pattern can have."""

    BOOL = "bool"
    INT = "int"
    """Python int (never bool). Covers both plain and 64-bit integers."""

    FLOAT = "float"
    STRING = "string"
    NULL = "null"
    COMPOSITE = "composite"
    """Mappings and sequences decoded from a document."""

    UNSUPPORTED = "unsupported"


def kind_of(value: _typing.Any) -> Kind:
    """
    Return the kind of a value.

    bool is checked before int because bool is an int subclass.
    """
    if value is None:
        return Kind.NULL
    if isinstance(value, bool):
        return Kind.BOOL
    if isinstance(value, int):
        return Kind.INT
    if isinstance(value, float):
        return Kind.FLOAT
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, (_abc.Mapping, list, tuple)):
        return Kind.COMPOSITE
    return Kind.UNSUPPORTED


def type_name(value: _typing.Any) -> str:
    """Human-readable type name for diagnostics."""
    if value is None:
        return "null"
    return type(value).__name__
