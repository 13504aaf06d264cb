"""
Pattern dispatcher: the entry point of the matching engine.

`evaluate` routes a (value, pattern) pair to the comparator for the
pattern's kind and returns a MatchResult with diagnostics.
`validate_value_with_pattern` is the boolean boundary used by policy
evaluation: it logs every diagnostic as a warning and returns only
whether the value matched.

String patterns support:
- Alternation: "a|b|c" matches if any alternative matches
- Operators: "!", ">", ">=", "<", "<=" as a prefix
- Wildcards: "*" and "?" in the string part
- Number with suffix: ">=10Gi" compares 10 and checks the "Gi" suffix
"""

from __future__ import annotations

import logging as _logging
import typing as _typing

import policymatch.constants as constants
import policymatch.engine.comparators as comparators
import policymatch.engine.diagnostics as diagnostics
import policymatch.engine.kinds as kinds
import policymatch.engine.numbers as numbers
import policymatch.engine.operators as operators

_logger = _logging.getLogger(__name__)

Kind = kinds.Kind
MatchResult = diagnostics.MatchResult
Reason = diagnostics.DiagnosticReason


def _evaluate_composite(value: _typing.Any, pattern: _typing.Any) -> MatchResult:  # noqa: ARG001
    return MatchResult.rejected(
        Reason.UNSUPPORTED_PATTERN,
        "Maps and arrays as patterns are not supported",
    )


def _evaluate_unsupported(value: _typing.Any, pattern: _typing.Any) -> MatchResult:  # noqa: ARG001
    return MatchResult.rejected(
        Reason.UNSUPPORTED_PATTERN,
        f"Unknown type as pattern: {kinds.type_name(pattern)}",
    )


def evaluate_string_alternative(value: _typing.Any, pattern: str) -> MatchResult:
    """
    Evaluate a single alternative of a string pattern.

    The operator prefix is parsed first; what remains is split into a
    number and a suffix. Without a number the pattern is a plain
    wildcard string.
    """
    operator, remainder = operators.parse_operator(pattern)
    number, suffix = numbers.split_number(remainder)

    if not number:
        return comparators.compare_string(value, suffix, operator)

    return comparators.compare_number_with_suffix(value, number, suffix, operator)


def evaluate_string_pattern(value: _typing.Any, pattern: str) -> MatchResult:
    """
    Evaluate a string pattern with alternation.

    Returns on the first matching alternative. Diagnostics of every
    alternative tried up to that point are kept.
    """
    collected: list[diagnostics.MatchDiagnostic] = []

    for statement in pattern.split(constants.ALTERNATION_SEPARATOR):
        result = evaluate_string_alternative(value, statement.strip())
        collected.extend(result.diagnostics)
        if result.matched:
            return MatchResult(True, tuple(collected))

    return MatchResult(False, tuple(collected))


_HANDLERS: dict[Kind, _typing.Callable[[_typing.Any, _typing.Any], MatchResult]] = {
    Kind.BOOL: comparators.compare_bool,
    Kind.INT: comparators.compare_int,
    Kind.FLOAT: comparators.compare_float,
    Kind.STRING: evaluate_string_pattern,
    Kind.NULL: lambda value, pattern: comparators.compare_nil(value),  # noqa: ARG005
    Kind.COMPOSITE: _evaluate_composite,
    Kind.UNSUPPORTED: _evaluate_unsupported,
}


def evaluate(value: _typing.Any, pattern: _typing.Any) -> MatchResult:
    """
    Match a value against a pattern and explain the outcome.

    Args:
        value: Value taken from a document (scalar, None or composite).
        pattern: Pattern literal, operator expression or wildcard string.

    Returns:
        MatchResult with the outcome and any diagnostics.
    """
    return _HANDLERS[kinds.kind_of(pattern)](value, pattern)


def validate_value_with_pattern(value: _typing.Any, pattern: _typing.Any) -> bool:
    """
    Check whether a value satisfies a pattern.

    Never raises. Every reason for a negative outcome other than a plain
    mismatch is logged as a warning.

    Args:
        value: Value taken from a document.
        pattern: Pattern to check it against.

    Returns:
        True if the value matches the pattern.
    """
    result = evaluate(value, pattern)
    for diagnostic in result.diagnostics:
        _logger.warning("%s", diagnostic.message)
    return result.matched


validate = validate_value_with_pattern
