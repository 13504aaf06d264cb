"""Tests for case files."""

import pathlib as _pathlib

import pytest as _pytest

import policymatch.cases as cases
import policymatch.engine as engine

CASES_YAML = """\
cases:
  - name: storage quota
    value: 10Gi
    pattern: ">=5Gi"
    expect: true
  - name: wrong unit
    value: 10Gi
    pattern: ">=5Mi"
    expect: true
  - value: app.log
    pattern: "*.txt"
"""


@_pytest.fixture
def case_path(tmp_path: _pathlib.Path) -> _pathlib.Path:
    path = tmp_path / "cases.yaml"
    path.write_text(CASES_YAML)
    return path


class TestLoadCases:
    """Tests for load_cases."""

    def test_loads_yaml(self, case_path: _pathlib.Path) -> None:
        """Cases are parsed with their YAML types."""
        loaded = cases.load_cases(case_path)
        assert len(loaded.cases) == 3
        assert loaded.cases[0].name == "storage quota"
        assert loaded.cases[0].value == "10Gi"
        assert loaded.cases[2].expect is None

    def test_loads_json(self, tmp_path: _pathlib.Path) -> None:
        """JSON files are accepted."""
        path = tmp_path / "cases.json"
        path.write_text('{"cases": [{"value": 5, "pattern": ">=3", "expect": true}]}')
        loaded = cases.load_cases(path)
        assert loaded.cases[0].value == 5

    def test_empty_file(self, tmp_path: _pathlib.Path) -> None:
        """Empty files contain no cases."""
        path = tmp_path / "cases.yaml"
        path.write_text("")
        assert cases.load_cases(path).cases == []

    def test_missing_value_is_null(self, tmp_path: _pathlib.Path) -> None:
        """A case without a value checks null."""
        path = tmp_path / "cases.yaml"
        path.write_text("cases:\n  - pattern: null\n    expect: true\n")
        assert cases.load_cases(path).cases[0].value is None

    @_pytest.mark.parametrize(
        "content",
        [
            "cases:\n  - value: 1\n",
            "cases:\n  - value: 1\n    pattern: 1\n    extra: x\n",
            "- value: 1\n",
            "cases: [unclosed\n",
        ],
    )
    def test_invalid(self, tmp_path: _pathlib.Path, content: str) -> None:
        """Schema and syntax errors raise CaseFileError."""
        path = tmp_path / "cases.yaml"
        path.write_text(content)
        with _pytest.raises(cases.CaseFileError) as exc_info:
            cases.load_cases(path)
        assert exc_info.value.path == path


class TestRunCases:
    """Tests for run_cases."""

    def test_outcomes(self, case_path: _pathlib.Path) -> None:
        """Each case is evaluated against its expectation."""
        outcomes = cases.run_cases(cases.load_cases(case_path))

        assert [o.result.matched for o in outcomes] == [True, False, False]
        assert [o.passed for o in outcomes] == [True, False, True]
        assert outcomes[1].result.reasons == (engine.DiagnosticReason.SUFFIX_MISMATCH,)

    def test_labels(self, case_path: _pathlib.Path) -> None:
        """Unnamed cases are labelled by position."""
        outcomes = cases.run_cases(cases.load_cases(case_path))
        assert [o.label for o in outcomes] == ["storage quota", "wrong unit", "case 3"]

    def test_to_dict(self, case_path: _pathlib.Path) -> None:
        """Outcomes serialize with the result fields."""
        outcome = cases.run_cases(cases.load_cases(case_path))[1]
        data = outcome.to_dict()
        assert data["name"] == "wrong unit"
        assert data["passed"] is False
        assert data["matched"] is False
        assert data["diagnostics"][0]["reason"] == "suffix_mismatch"
