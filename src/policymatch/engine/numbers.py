"""
Numeric helpers: splitting "10Gi"-style strings and coercing to float.
"""

from __future__ import annotations

import re as _re
import typing as _typing

import policymatch.engine.kinds as kinds

# Leading number (digits, optional fraction), then the rest verbatim.
_NUMBER_PREFIX_RE = _re.compile(r"(\d*(?:\.\d+)?)(.*)", _re.ASCII | _re.DOTALL)

_DECIMAL_RE = _re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)", _re.ASCII)


class CoercionError(ValueError):
    """Raised when a value cannot be converted to a number."""

    pass


def split_number(text: str) -> tuple[str, str]:
    """
    Split a string into its leading number and the remaining suffix.

    Examples:
        "10Gi"  -> ("10", "Gi")
        "1.5"   -> ("1.5", "")
        "Gi"    -> ("", "Gi")
        "10."   -> ("10", ".")

    Returns:
        Tuple of (number, suffix). Either part may be empty.
    """
    # The regex matches every string, possibly with both groups empty.
    match = _typing.cast(_re.Match[str], _NUMBER_PREFIX_RE.match(text))
    return match.group(1), match.group(2)


def to_float(value: _typing.Any) -> float:
    """
    Convert an int, float or decimal string to float.

    Raises:
        CoercionError: If the value is of another kind, is an int too
            large for a float, or is a string that is not a plain decimal
            number.
    """
    kind = kinds.kind_of(value)
    if kind in (kinds.Kind.INT, kinds.Kind.FLOAT):
        try:
            return float(value)
        except OverflowError as e:
            raise CoercionError("Integer is too large to convert to a number") from e
    if kind == kinds.Kind.STRING:
        if _DECIMAL_RE.fullmatch(value) is None:
            raise CoercionError(f"Could not convert {value!r} to a number")
        return float(value)
    raise CoercionError(f"Could not convert {kinds.type_name(value)} to a number")


def is_whole(number: float) -> bool:
    """Check that a float has no fractional part (nan and inf do not)."""
    return number.is_integer()
