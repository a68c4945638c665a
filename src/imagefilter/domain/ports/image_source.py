"""Image source protocol for paged listings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from imagefilter.domain.ports.image import ImageRecord


class ImageSource(Protocol):
    """Contract for image listings.

    Users implement this Protocol to page through a provider's listing API.
    InMemoryImageSource is the built-in adapter.
    """

    def list_images(self, page_size: int) -> Iterable[Sequence[ImageRecord]]:
        """Yield pages of images.

        Args:
            page_size: Maximum images per page (>= 1)

        Returns:
            Iterable of pages, each a sequence of at most page_size images
        """
        ...
