"""Application layer for image selection.

Components:
- services: Main facade (ImageSelector)
- reporters: Output formatting (PlainText, Console)
"""

from imagefilter.application.reporters import (
    BaseReporter,
    ConsoleConfig,
    ConsoleReporter,
    PlainTextReporter,
)
from imagefilter.application.services import ImageSelector

__all__ = [
    # Reporters
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "PlainTextReporter",
    # Services
    "ImageSelector",
]
