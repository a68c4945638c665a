"""FilterSpec adapter.

Turns a FilterSpec into a plain Filter so it composes with all_of/any_of.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from imagefilter.domain.evaluation import build_stages, evaluate

if TYPE_CHECKING:
    from imagefilter.domain.model.filter_spec import FilterSpec
    from imagefilter.domain.ports.image import ImageRecord
    from imagefilter.domain.ports.tag_matcher import TagMatcher
    from imagefilter.infrastructure.filters.types import Filter


def from_spec(spec: FilterSpec, tag_matcher: TagMatcher | None = None) -> Filter:
    """Create filter equivalent to spec.matches.

    Stages are built once and reused for every image.

    Args:
        spec: Filter specification
        tag_matcher: Tag matching rule. None = default match_tags.

    Returns:
        Filter that returns spec.matches(image, tag_matcher)
    """
    stages = build_stages(spec, tag_matcher)
    mode = spec.match_mode

    def _filter(image: ImageRecord) -> bool:
        return evaluate(stages, mode, image)

    return _filter
