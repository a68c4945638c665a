"""pytest plugin for imagefilter.

Provides fixtures for image filtering tests:
    image_tag_matcher: Tag matching rule (override in conftest.py)
    image_factory: Builds MachineImage with defaults
    image_selector_factory: Builds ImageSelector over a list of images
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from imagefilter.presentation.pytest_plugin.fixtures import (
    image_factory,
    image_selector_factory,
    image_tag_matcher,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "image_factory",
    "image_selector_factory",
    "image_tag_matcher",
]


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "images: mark test as image filtering test",
    )
