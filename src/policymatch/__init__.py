"""
policymatch - value-against-pattern matching for policy engines

Decides whether a value taken from a JSON/YAML document satisfies a
pattern such as "*.txt", ">=10Gi" or "a|b|c".
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("policymatch")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)
__author__ = "policymatch Contributors"

from policymatch.engine import (  # noqa: E402
    MatchResult,
    evaluate,
    validate,
    validate_value_with_pattern,
)

__all__ = [
    "__version__",
    "__version_info__",
    "MatchResult",
    "evaluate",
    "validate",
    "validate_value_with_pattern",
]
