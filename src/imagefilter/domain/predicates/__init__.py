"""Domain predicates."""

from imagefilter.domain.predicates.base import ImagePredicate
from imagefilter.domain.predicates.image_predicates import (
    compile_regex,
    has_image_class,
    is_owned_by,
    matches_regex,
    satisfies_tags,
)
from imagefilter.domain.predicates.tag_predicates import match_tags

__all__ = [
    # Type aliases
    "ImagePredicate",
    # Image predicates
    "compile_regex",
    "has_image_class",
    "is_owned_by",
    "matches_regex",
    "satisfies_tags",
    # Tag matching
    "match_tags",
]
