"""
Glob-style wildcard matching.

Only two metacharacters are recognised:
- `*` matches any run of characters, including an empty one
- `?` matches exactly one character

Everything else, including `[`, matches literally and case-sensitively.
"""

from __future__ import annotations

import fnmatch as _fnmatch


def _escape_brackets(pattern: str) -> str:
    """Turn fnmatch character classes off by escaping `[`."""
    return pattern.replace("[", "[[]")


def wildcard_match(pattern: str, text: str) -> bool:
    """
    Check whether text matches a wildcard pattern.

    An empty pattern matches only the empty string.
    """
    if not pattern:
        return text == pattern
    if pattern == "*":
        return True
    return _fnmatch.fnmatchcase(text, _escape_brackets(pattern))
