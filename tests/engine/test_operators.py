"""Tests for operator prefix parsing."""

import pytest as _pytest

import policymatch.engine.operators as operators

Operator = operators.Operator


class TestParseOperator:
    """Tests for parse_operator."""

    @_pytest.mark.parametrize(
        ("pattern", "operator", "remainder"),
        [
            (">=10", Operator.MORE_EQUAL, "10"),
            ("<=10", Operator.LESS_EQUAL, "10"),
            (">10", Operator.MORE, "10"),
            ("<10", Operator.LESS, "10"),
            ("!foo", Operator.NOT_EQUAL, "foo"),
            ("foo", Operator.EQUAL, "foo"),
            (">=", Operator.MORE_EQUAL, ""),
            ("<=5Gi", Operator.LESS_EQUAL, "5Gi"),
            ("!=5", Operator.NOT_EQUAL, "=5"),
            ("=>5", Operator.EQUAL, "=>5"),
            (">>5", Operator.MORE, ">5"),
        ],
    )
    def test_table(self, pattern: str, operator: Operator, remainder: str) -> None:
        """Operators are parsed longest prefix first."""
        assert operators.parse_operator(pattern) == (operator, remainder)

    @_pytest.mark.parametrize("pattern", ["", "a", ">", "<", "!"])
    def test_short_patterns_have_no_operator(self, pattern: str) -> None:
        """Patterns shorter than two characters are taken literally."""
        assert operators.parse_operator(pattern) == (Operator.EQUAL, pattern)

    def test_more_equal_not_truncated(self) -> None:
        """'>=' is never read as '>' followed by a literal '='."""
        operator, remainder = operators.parse_operator(">=10")
        assert operator is Operator.MORE_EQUAL
        assert not remainder.startswith("=")


class TestOperator:
    """Tests for the Operator enum."""

    def test_prefixes(self) -> None:
        """Each operator is encoded by its prefix."""
        assert {op.prefix for op in Operator} == {"", "!", ">", ">=", "<", "<="}

    def test_equal_is_empty_prefix(self) -> None:
        """EQUAL is the implicit default."""
        assert Operator("") is Operator.EQUAL
