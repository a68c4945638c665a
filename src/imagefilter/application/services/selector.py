"""Image selection service.

ImageSelector pages through an ImageSource and keeps the images
that satisfy a FilterSpec.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from imagefilter.domain.model.selection import SelectionResult, SelectorConfig
from imagefilter.infrastructure.filters.spec import from_spec

if TYPE_CHECKING:
    from collections.abc import Iterator

    from imagefilter.domain.model.filter_spec import FilterSpec
    from imagefilter.domain.ports.image import ImageRecord
    from imagefilter.domain.ports.image_source import ImageSource
    from imagefilter.domain.ports.reporter import ReporterProtocol
    from imagefilter.domain.ports.tag_matcher import TagMatcher

logger = logging.getLogger(__name__)


class ImageSelector:
    """Facade for filtering image listings.

    Composition-based: accepts source, tag matcher and reporter as dependencies.
    Each candidate is evaluated in memory; nothing is pushed to the source.

    Example:
        selector = ImageSelector(InMemoryImageSource(images))
        result = selector.select(FilterSpec.instance(ImageClass.MACHINE))
        print(f"Matched: {result.match_count}")
    """

    def __init__(
        self,
        source: ImageSource,
        config: SelectorConfig | None = None,
        *,
        tag_matcher: TagMatcher | None = None,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize selector.

        Args:
            source: Paged image listing
            config: Selector configuration. Uses defaults if None.
            tag_matcher: Tag matching rule. None = default match_tags.
            reporter: Optional reporter called after each select()

        Raises:
            TypeError: If source is None
        """
        if source is None:
            raise TypeError("source must not be None")
        self._source = source
        self._config = config or SelectorConfig()
        self._tag_matcher = tag_matcher
        self._reporter = reporter

    @property
    def config(self) -> SelectorConfig:
        """Active configuration."""
        return self._config

    def select(self, spec: FilterSpec) -> SelectionResult:
        """Select images matching spec.

        Reads pages until the listing ends or max_matches is reached.

        Args:
            spec: Filter specification

        Returns:
            SelectionResult with matches in listing order

        Raises:
            InvalidPatternError: If spec regex does not compile
        """
        flt = from_spec(spec, self._tag_matcher)
        limit = self._config.max_matches
        matched: list[ImageRecord] = []
        examined = 0
        pages = 0
        truncated = False

        for page in self._source.list_images(self._config.page_size):
            pages += 1
            logger.debug("page %d: %d candidates", pages, len(page))
            for image in page:
                examined += 1
                if not flt(image):
                    logger.debug("rejected %s (%s)", image.image_id, image.name)
                    continue
                matched.append(image)
                if limit is not None and len(matched) >= limit:
                    truncated = True
                    break
            if truncated:
                break

        result = SelectionResult(
            spec=spec,
            matched=tuple(matched),
            examined=examined,
            pages=pages,
            truncated=truncated,
        )
        logger.info(
            "selected %d of %d images (%d pages) for %s",
            result.match_count,
            result.examined,
            result.pages,
            spec,
        )

        if self._reporter is not None:
            self._reporter.report(result)

        return result

    def iter_matches(self, spec: FilterSpec) -> Iterator[ImageRecord]:
        """Lazily yield images matching spec.

        Pages are requested only as iteration proceeds.
        Stops after max_matches images if configured.

        Args:
            spec: Filter specification

        Yields:
            Matching images in listing order
        """
        flt = from_spec(spec, self._tag_matcher)
        limit = self._config.max_matches
        count = 0
        for page in self._source.list_images(self._config.page_size):
            for image in page:
                if flt(image):
                    yield image
                    count += 1
                    if limit is not None and count >= limit:
                        return
