"""Reporters for image selection results.

PlainTextReporter uses stdlib only; ConsoleReporter renders with rich.
"""

from imagefilter.application.reporters._base import BaseReporter
from imagefilter.application.reporters.console import ConsoleConfig, ConsoleReporter
from imagefilter.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "PlainTextReporter",
]
