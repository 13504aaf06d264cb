"""
Value-against-pattern matching engine.

Example usage:
    import policymatch.engine as engine

    engine.validate_value_with_pattern("10Gi", ">=5Gi")  # True
    result = engine.evaluate(5, "foo")
    result.reasons  # (DiagnosticReason.TYPE_MISMATCH,)
"""

from policymatch.engine.diagnostics import (
    DiagnosticReason,
    MatchDiagnostic,
    MatchResult,
)
from policymatch.engine.kinds import Kind, kind_of
from policymatch.engine.numbers import CoercionError, split_number, to_float
from policymatch.engine.operators import Operator, parse_operator
from policymatch.engine.pattern import (
    evaluate,
    validate,
    validate_value_with_pattern,
)
from policymatch.engine.wildcard import wildcard_match

__all__ = [
    "CoercionError",
    "DiagnosticReason",
    "Kind",
    "MatchDiagnostic",
    "MatchResult",
    "Operator",
    "evaluate",
    "kind_of",
    "parse_operator",
    "split_number",
    "to_float",
    "validate",
    "validate_value_with_pattern",
    "wildcard_match",
]
