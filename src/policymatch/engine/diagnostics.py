"""
Match results and the diagnostics that explain negative outcomes.

The engine never raises on bad input. Each comparator returns a
MatchResult; when it fails for a reason other than a plain mismatch
it attaches a MatchDiagnostic. The public boundary logs diagnostics
and collapses the result to a bool.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import enum as _enum
import typing as _typing


class DiagnosticReason(_enum.Enum):
    """Why a comparison could not be performed or was rejected."""

    TYPE_MISMATCH = "type_mismatch"
    """Value kind is not compatible with the pattern kind."""

    FRACTIONAL_MISMATCH = "fractional_mismatch"
    """Integer compared with a float that has a fractional part."""

    UNSUPPORTED_PATTERN = "unsupported_pattern"
    """Pattern is a map, a sequence or an unknown type."""

    UNSUPPORTED_VALUE = "unsupported_value"
    """Value cannot be checked against a nil pattern."""

    INVALID_OPERATOR = "invalid_operator"
    """Relational operator used with a plain string pattern."""

    SUFFIX_MISMATCH = "suffix_mismatch"
    """Value suffix does not match the pattern suffix."""

    COERCION_FAILED = "coercion_failed"
    """Operand could not be converted to a number."""


@_dataclasses.dataclass(frozen=True)
class MatchDiagnostic:
    """A single explanation attached to a match result."""

    reason: DiagnosticReason
    message: str

    def __str__(self) -> str:
        return self.message


@_dataclasses.dataclass(frozen=True)
class MatchResult:
    """Outcome of matching a value against a pattern."""

    matched: bool
    diagnostics: tuple[MatchDiagnostic, ...] = ()

    def __bool__(self) -> bool:
        return self.matched

    @property
    def reasons(self) -> tuple[DiagnosticReason, ...]:
        """Reasons of all attached diagnostics, in order."""
        return tuple(d.reason for d in self.diagnostics)

    def to_dict(self) -> dict[str, _typing.Any]:
        """Convert to a JSON-serializable dict."""
        return {
            "matched": self.matched,
            "diagnostics": [
                {"reason": d.reason.value, "message": d.message}
                for d in self.diagnostics
            ],
        }

    @classmethod
    def of(cls, matched: bool) -> MatchResult:
        """Result without diagnostics."""
        return _MATCHED if matched else _NOT_MATCHED

    @classmethod
    def rejected(cls, reason: DiagnosticReason, message: str) -> MatchResult:
        """Negative result carrying one diagnostic."""
        return cls(False, (MatchDiagnostic(reason, message),))


_MATCHED = MatchResult(True)
_NOT_MATCHED = MatchResult(False)
