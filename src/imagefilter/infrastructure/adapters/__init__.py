"""Infrastructure adapters for external interfaces."""

from imagefilter.infrastructure.adapters.in_memory import InMemoryImageSource

__all__ = [
    "InMemoryImageSource",
]
