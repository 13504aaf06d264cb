"""
Scalar comparators.

Each comparator takes an already-classified pattern and an arbitrary
value and returns a MatchResult. None of them raise.
"""

from __future__ import annotations

import operator as _operator
import typing as _typing

import policymatch.engine.diagnostics as diagnostics
import policymatch.engine.kinds as kinds
import policymatch.engine.numbers as numbers
import policymatch.engine.operators as operators
import policymatch.engine.wildcard as wildcard

Kind = kinds.Kind
Reason = diagnostics.DiagnosticReason
MatchResult = diagnostics.MatchResult

_RELATIONS: dict[operators.Operator, _typing.Callable[[float, float], bool]] = {
    operators.Operator.EQUAL: _operator.eq,
    operators.Operator.NOT_EQUAL: _operator.ne,
    operators.Operator.MORE: _operator.gt,
    operators.Operator.MORE_EQUAL: _operator.ge,
    operators.Operator.LESS: _operator.lt,
    operators.Operator.LESS_EQUAL: _operator.le,
}


def _expected(expected: str, value: _typing.Any) -> MatchResult:
    return MatchResult.rejected(
        Reason.TYPE_MISMATCH,
        f"Expected {expected}, found {kinds.type_name(value)}",
    )


def compare_bool(value: _typing.Any, pattern: bool) -> MatchResult:
    """Boolean pattern: value must be a bool of the same truth."""
    if kinds.kind_of(value) != Kind.BOOL:
        return _expected("bool", value)
    return MatchResult.of(value == pattern)


def compare_int(value: _typing.Any, pattern: int) -> MatchResult:
    """
    Integer pattern.

    Float values are accepted only when they have no fractional part.
    """
    kind = kinds.kind_of(value)
    if kind == Kind.INT:
        return MatchResult.of(value == pattern)
    if kind == Kind.FLOAT:
        if numbers.is_whole(value):
            return MatchResult.of(int(value) == pattern)
        return MatchResult.rejected(
            Reason.FRACTIONAL_MISMATCH,
            f"Expected int, found float: {value:f}",
        )
    return _expected("int", value)


def compare_float(value: _typing.Any, pattern: float) -> MatchResult:
    """
    Float pattern.

    Int values are accepted only when the pattern has no fractional part.
    """
    kind = kinds.kind_of(value)
    if kind == Kind.FLOAT:
        return MatchResult.of(value == pattern)
    if kind == Kind.INT:
        if numbers.is_whole(pattern):
            return MatchResult.of(int(pattern) == value)
        return MatchResult.rejected(
            Reason.FRACTIONAL_MISMATCH,
            f"Expected float, found int: {value}",
        )
    return _expected("float", value)


def compare_nil(value: _typing.Any) -> MatchResult:
    """Nil pattern: value must be the zero of its own type."""
    kind = kinds.kind_of(value)
    if kind == Kind.NULL:
        return MatchResult.of(True)
    if kind in (Kind.BOOL, Kind.INT, Kind.FLOAT):
        return MatchResult.of(value == 0)
    if kind == Kind.STRING:
        return MatchResult.of(value == "")
    if kind == Kind.COMPOSITE:
        return MatchResult.rejected(
            Reason.UNSUPPORTED_VALUE,
            "Maps and arrays could not be checked with nil pattern",
        )
    return MatchResult.rejected(
        Reason.UNSUPPORTED_VALUE,
        f"Unknown type as value when checking for nil pattern: {kinds.type_name(value)}",
    )


def compare_string(
    value: _typing.Any,
    pattern: str,
    operator: operators.Operator,
) -> MatchResult:
    """
    Pure string pattern: wildcard match, optionally negated.

    Relational operators have no meaning for strings and are rejected
    before the value is looked at.
    """
    if operator not in (operators.Operator.EQUAL, operators.Operator.NOT_EQUAL):
        return MatchResult.rejected(
            Reason.INVALID_OPERATOR,
            "Operators >, >=, <, <= are not applicable to strings",
        )

    if kinds.kind_of(value) != Kind.STRING:
        return _expected("string", value)

    matched = wildcard.wildcard_match(pattern, value)
    if operator == operators.Operator.NOT_EQUAL:
        return MatchResult.of(not matched)
    return MatchResult.of(matched)


def compare_number_with_suffix(
    value: _typing.Any,
    pattern_number: str,
    pattern_suffix: str,
    operator: operators.Operator,
) -> MatchResult:
    """
    Hybrid pattern such as ">=10Gi".

    With a suffix, the value must be a string that splits the same way;
    its suffix is wildcard-matched and its number compared. Without a
    suffix the raw value is compared directly, whatever its kind.
    """
    if not pattern_suffix:
        return compare_number(value, pattern_number, operator)

    if kinds.kind_of(value) != Kind.STRING:
        return MatchResult.rejected(
            Reason.TYPE_MISMATCH,
            f"Number must have suffix: {pattern_suffix}",
        )

    value_number, value_suffix = numbers.split_number(value)
    if not wildcard.wildcard_match(pattern_suffix, value_suffix):
        return MatchResult.rejected(
            Reason.SUFFIX_MISMATCH,
            f"Suffix {value_suffix} has not passed wildcard check: {pattern_suffix}",
        )

    return compare_number(value_number, pattern_number, operator)


def compare_number(
    value: _typing.Any,
    pattern: _typing.Any,
    operator: operators.Operator,
) -> MatchResult:
    """Coerce both operands to float and apply the operator."""
    try:
        float_pattern = numbers.to_float(pattern)
        float_value = numbers.to_float(value)
    except numbers.CoercionError as e:
        return MatchResult.rejected(Reason.COERCION_FAILED, str(e))

    relation = _RELATIONS.get(operator)
    if relation is None:
        return MatchResult.of(False)
    return MatchResult.of(relation(float_value, float_pattern))
