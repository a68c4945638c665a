"""Application services for image selection.

ImageSelector is the main facade for filtering image listings.
"""

from imagefilter.application.services.selector import ImageSelector

__all__ = [
    "ImageSelector",
]
