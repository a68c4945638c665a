"""Tag matcher type alias.

Tag matcher: decides whether an image's tags (plus name and description)
satisfy a requested tag mapping. Opaque to the evaluator.
"""

from collections.abc import Callable, Mapping
from typing import TypeAlias

TagMatcher: TypeAlias = Callable[
    [Mapping[str, str | None], str, str | None, Mapping[str, str]],
    bool,
]
