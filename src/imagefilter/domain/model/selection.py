"""Image selection configuration and result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from imagefilter.domain.exceptions import InvalidConfigError

if TYPE_CHECKING:
    from imagefilter.domain.model.filter_spec import FilterSpec
    from imagefilter.domain.ports.image import ImageRecord

DEFAULT_PAGE_SIZE = 100


@dataclass(frozen=True, slots=True)
class SelectorConfig:
    """Configuration for ImageSelector.

    Immutable configuration object with FAIL-FIRST validation.
    None = unlimited.

    Attributes:
        max_matches: Stop after this many matches. None = read whole listing.
        page_size: Images requested per listing page.
    """

    max_matches: int | None = None
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_matches is not None and self.max_matches < 1:
            raise InvalidConfigError("max_matches", self.max_matches, "must be >= 1")
        if self.page_size < 1:
            raise InvalidConfigError("page_size", self.page_size, "must be >= 1")


@dataclass(frozen=True, slots=True)
class SelectionResult:
    """Images kept by one selection run.

    Attributes:
        spec: Spec that was applied
        matched: Matching images in listing order
        examined: Candidates evaluated (>= len(matched))
        pages: Listing pages read
        truncated: True if selection stopped at max_matches
    """

    spec: FilterSpec
    matched: tuple[ImageRecord, ...]
    examined: int
    pages: int
    truncated: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.examined < len(self.matched):
            raise ValueError(
                f"examined ({self.examined}) must be >= matched ({len(self.matched)})"
            )
        if self.pages < 0:
            raise ValueError(f"pages must be >= 0, got {self.pages}")

    @property
    def match_count(self) -> int:
        """Number of matching images."""
        return len(self.matched)

    @property
    def rejected_count(self) -> int:
        """Number of examined images that did not match."""
        return self.examined - len(self.matched)
