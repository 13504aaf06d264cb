"""Relational operators that may prefix a string pattern."""

from __future__ import annotations

import enum as _enum


class Operator(_enum.Enum):
    """
    Selection operators, valued by their pattern prefix.

    EQUAL has an empty prefix and is the default when nothing matches.
    """

    EQUAL = ""
    NOT_EQUAL = "!"
    MORE = ">"
    MORE_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="

    @property
    def prefix(self) -> str:
        """The prefix encoding of this operator."""
        return self.value


# Two-character operators must come before their one-character prefixes.
_PARSE_ORDER: tuple[Operator, ...] = (
    Operator.MORE_EQUAL,
    Operator.LESS_EQUAL,
    Operator.MORE,
    Operator.LESS,
    Operator.NOT_EQUAL,
)


def parse_operator(pattern: str) -> tuple[Operator, str]:
    """
    Parse the leading operator of a pattern.

    Patterns shorter than two characters never carry an operator, so
    a lone "!" or ">" is matched literally.

    Args:
        pattern: A single pattern alternative.

    Returns:
        Tuple of (operator, pattern with the operator prefix removed).
    """
    if len(pattern) < 2:
        return Operator.EQUAL, pattern

    for operator in _PARSE_ORDER:
        if pattern.startswith(operator.prefix):
            return operator, pattern[len(operator.prefix) :]

    return Operator.EQUAL, pattern
