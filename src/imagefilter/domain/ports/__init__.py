"""Domain ports: contracts for collaborators outside the core."""

from imagefilter.domain.ports.image import ImageRecord
from imagefilter.domain.ports.image_source import ImageSource
from imagefilter.domain.ports.reporter import ReporterProtocol
from imagefilter.domain.ports.tag_matcher import TagMatcher

__all__ = [
    "ImageRecord",
    "ImageSource",
    "ReporterProtocol",
    "TagMatcher",
]
