"""In-memory image source."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from imagefilter.domain.ports.image import ImageRecord


class InMemoryImageSource:
    """Image source over a fixed collection.

    Satisfies ImageSource protocol. Pages are slices of the collection
    in original order. Useful for cached listings and tests.
    """

    def __init__(self, images: Iterable[ImageRecord]) -> None:
        """Initialize source.

        Args:
            images: Images to list (copied into a tuple)

        Raises:
            TypeError: If images is None
        """
        if images is None:
            raise TypeError("images must not be None")
        self._images = tuple(images)

    def __len__(self) -> int:
        """Number of images in source."""
        return len(self._images)

    def list_images(self, page_size: int) -> Iterator[Sequence[ImageRecord]]:
        """Yield images in pages of at most page_size.

        Args:
            page_size: Maximum images per page

        Raises:
            ValueError: If page_size < 1
        """
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        for start in range(0, len(self._images), page_size):
            yield self._images[start : start + page_size]
