"""Image criterion predicates.

One factory per FilterSpec criterion. Each returns a pure predicate
over ImageRecord; combination rules live in domain.evaluation.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from imagefilter.domain.exceptions import InvalidPatternError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from imagefilter.domain.model.enums import ImageClass
    from imagefilter.domain.ports.image import ImageRecord
    from imagefilter.domain.ports.tag_matcher import TagMatcher
    from imagefilter.domain.predicates.base import ImagePredicate


def compile_regex(regex: str) -> re.Pattern[str]:
    """Compile criterion regex.

    Compiled patterns are cached by the re module, so repeated evaluation
    of the same spec does not recompile.

    Args:
        regex: Regular expression pattern

    Returns:
        Compiled pattern

    Raises:
        InvalidPatternError: If regex does not compile
    """
    try:
        return re.compile(regex)
    except re.error as e:
        raise InvalidPatternError(pattern=regex, reason=str(e)) from e


def has_image_class(image_class: ImageClass) -> ImagePredicate:
    """Create predicate: image has exactly this class.

    Args:
        image_class: Required image class

    Returns:
        Predicate function
    """

    def predicate(image: ImageRecord) -> bool:
        return image.image_class == image_class

    return predicate


def is_owned_by(account_number: str) -> ImagePredicate:
    """Create predicate: image owner equals account number.

    Args:
        account_number: Required owning account

    Returns:
        Predicate function
    """

    def predicate(image: ImageRecord) -> bool:
        return image.provider_owner_id == account_number

    return predicate


def matches_regex(regex: str) -> ImagePredicate:
    """Create predicate: regex matches name, description or any tag value.

    The pattern must match the whole string (re.fullmatch).
    Tags are checked in mapping order; first hit wins. None values are skipped.

    Args:
        regex: Regular expression pattern

    Returns:
        Predicate function. Raises InvalidPatternError when called
        if regex does not compile.
    """

    def predicate(image: ImageRecord) -> bool:
        compiled = compile_regex(regex)
        if compiled.fullmatch(image.name) is not None:
            return True
        if image.description is not None and compiled.fullmatch(image.description) is not None:
            return True
        return any(
            value is not None and compiled.fullmatch(value) is not None
            for value in image.tags.values()
        )

    return predicate


def satisfies_tags(tags: Mapping[str, str], tag_matcher: TagMatcher) -> ImagePredicate:
    """Create predicate: tag matcher accepts image for required tags.

    Errors raised by tag_matcher propagate unchanged.

    Args:
        tags: Required tags
        tag_matcher: Matching rule

    Returns:
        Predicate function
    """

    def predicate(image: ImageRecord) -> bool:
        return tag_matcher(image.tags, image.name, image.description, tags)

    return predicate
