"""pytest fixtures for image filtering.

Provides fixtures for tests that filter image listings.
User overrides image_tag_matcher in their conftest.py.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from imagefilter.application.services import ImageSelector
from imagefilter.domain.model.machine_image import MachineImage
from imagefilter.domain.predicates.tag_predicates import match_tags
from imagefilter.infrastructure.adapters.in_memory import InMemoryImageSource

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from imagefilter.domain.model.selection import SelectorConfig
    from imagefilter.domain.ports.image import ImageRecord
    from imagefilter.domain.ports.tag_matcher import TagMatcher


@pytest.fixture
def image_tag_matcher() -> TagMatcher:
    """Tag matcher used by image_selector_factory.

    Override in conftest.py to test against a provider-specific rule.

    Returns:
        Default match_tags
    """
    return match_tags


@pytest.fixture
def image_factory() -> Callable[..., MachineImage]:
    """Factory building MachineImage with defaults.

    Each call without image_id gets a fresh id (img-1, img-2, ...).

    Returns:
        Callable accepting MachineImage keyword arguments
    """
    counter = 0

    def make(**kwargs: Any) -> MachineImage:
        nonlocal counter
        counter += 1
        kwargs.setdefault("image_id", f"img-{counter}")
        kwargs.setdefault("name", f"image-{counter}")
        return MachineImage(**kwargs)

    return make


@pytest.fixture
def image_selector_factory(
    image_tag_matcher: TagMatcher,
) -> Callable[..., ImageSelector]:
    """Factory building ImageSelector over in-memory images.

    Returns:
        Callable (images, config=None) -> ImageSelector
    """

    def make(images: Iterable[ImageRecord], config: SelectorConfig | None = None) -> ImageSelector:
        return ImageSelector(
            InMemoryImageSource(images),
            config,
            tag_matcher=image_tag_matcher,
        )

    return make
