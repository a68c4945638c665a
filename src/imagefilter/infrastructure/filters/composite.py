"""Composite image filters.

Combine spec-derived filters across specs, e.g. "machine images owned by
acct1 or acct2, except deprecated ones".
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from imagefilter.domain.ports.image import ImageRecord
    from imagefilter.infrastructure.filters.types import Filter


def all_of(*filters: Filter) -> Filter:
    """Keep an image only when every filter keeps it.

    Filters run in order and stop at the first rejection, so put the
    cheap class/owner filters before regex or tag filters.

    Args:
        *filters: Image filters, typically from from_spec().

    Returns:
        Image filter. No filters = keeps every image.
    """

    def _filter(image: ImageRecord) -> bool:
        return all(f(image) for f in filters)

    return _filter


def any_of(*filters: Filter) -> Filter:
    """Keep an image when at least one filter keeps it.

    Args:
        *filters: Image filters, typically from from_spec().

    Returns:
        Image filter. No filters = rejects every image.
    """

    def _filter(image: ImageRecord) -> bool:
        return any(f(image) for f in filters)

    return _filter


def negate(flt: Filter) -> Filter:
    """Keep exactly the images that flt rejects."""

    def _filter(image: ImageRecord) -> bool:
        return not flt(image)

    return _filter
