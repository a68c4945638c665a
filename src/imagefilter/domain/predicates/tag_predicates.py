"""Default tag matching rule.

Used when no TagMatcher is injected. Exact comparison unless the
required value contains a glob wildcard.
"""

from __future__ import annotations

from fnmatch import fnmatchcase
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

_WILDCARDS = frozenset("*?")


def _lookup(
    key: str,
    candidate_tags: Mapping[str, str | None],
    name: str,
    description: str | None,
) -> str | None:
    """Find candidate value for key. Tags win over name/description."""
    if key in candidate_tags:
        return candidate_tags[key]
    match key.lower():
        case "name":
            return name
        case "description":
            return description
        case _:
            return None


def _value_matches(actual: str, required: str) -> bool:
    if _WILDCARDS & set(required):
        return fnmatchcase(actual, required)
    return actual == required


def match_tags(
    candidate_tags: Mapping[str, str | None],
    name: str,
    description: str | None,
    required: Mapping[str, str],
) -> bool:
    """Check that every required tag is satisfied.

    Key lookup: candidate tags first, then pseudo-keys "name" and
    "description" (case-insensitive) fall back to image name/description.
    Value: glob (fnmatch, case-sensitive) if it contains * or ?, else equality.

    Args:
        candidate_tags: Image tags
        name: Image name
        description: Image description
        required: Required key -> value mapping

    Returns:
        True if all required tags match. Empty required = True.
    """
    for key, required_value in required.items():
        actual = _lookup(key, candidate_tags, name, description)
        if actual is None or not _value_matches(actual, required_value):
            return False
    return True
