"""
Pattern regression cases.

Policy authors keep example values next to the patterns they write and
check them in bulk. Case files are YAML (or JSON, which YAML accepts):

    cases:
      - name: storage quota
        value: 10Gi
        pattern: ">=5Gi"
        expect: true
"""

from __future__ import annotations

import dataclasses as _dataclasses
import logging as _logging
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import yaml as _yaml

import policymatch.engine as engine

_logger = _logging.getLogger(__name__)


class CaseFileError(Exception):
    """Error loading or validating a case file."""

    def __init__(self, path: _pathlib.Path, message: str) -> None:
        self.path = path
        super().__init__(f"Error in case file {path}: {message}")


class MatchCase(_pydantic.BaseModel):
    """A single value/pattern pair with an optional expected outcome."""

    model_config = _pydantic.ConfigDict(extra="forbid")

    name: str | None = None
    """Label shown in reports. Defaults to the case index."""

    value: _typing.Any = None
    """Value to match. A missing value is null."""

    pattern: _typing.Any
    """Pattern to match the value against."""

    expect: bool | None = None
    """Expected outcome. None means the case is informational."""


class CaseFile(_pydantic.BaseModel):
    """Contents of a case file."""

    model_config = _pydantic.ConfigDict(extra="forbid")

    cases: list[MatchCase] = _pydantic.Field(default_factory=list)


@_dataclasses.dataclass(frozen=True)
class CaseOutcome:
    """Result of running one case."""

    index: int
    case: MatchCase
    result: engine.MatchResult

    @property
    def label(self) -> str:
        return self.case.name or f"case {self.index}"

    @property
    def passed(self) -> bool:
        """True when there is no expectation or the expectation holds."""
        return self.case.expect is None or self.case.expect == self.result.matched

    def to_dict(self) -> dict[str, _typing.Any]:
        """Convert to a JSON-serializable dict."""
        return {
            "name": self.label,
            "value": self.case.value,
            "pattern": self.case.pattern,
            "expect": self.case.expect,
            "passed": self.passed,
            **self.result.to_dict(),
        }


def load_cases(path: _pathlib.Path) -> CaseFile:
    """
    Load and validate a case file.

    Raises:
        CaseFileError: If the file cannot be read, is malformed, or does
            not follow the case file schema.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CaseFileError(path, f"cannot read file: {e}") from e

    try:
        data = _yaml.safe_load(content)
    except _yaml.YAMLError as e:
        raise CaseFileError(path, f"invalid YAML: {e}") from e

    if data is None:
        return CaseFile()

    try:
        return CaseFile.model_validate(data)
    except _pydantic.ValidationError as e:
        raise CaseFileError(path, str(e)) from e


def run_cases(case_file: CaseFile) -> list[CaseOutcome]:
    """Evaluate every case in order."""
    outcomes = []
    for index, case in enumerate(case_file.cases, start=1):
        outcome = CaseOutcome(index, case, engine.evaluate(case.value, case.pattern))
        if not outcome.passed:
            _logger.debug(
                "%s: expected %s, got %s", outcome.label, case.expect, outcome.result.matched
            )
        outcomes.append(outcome)
    return outcomes
