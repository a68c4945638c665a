"""imagefilter - composable filter predicates for cloud machine images."""

__version__ = "0.1.0"

from imagefilter.domain.exceptions import (
    ImageFilterError,
    InvalidPatternError,
    MissingArgumentError,
)
from imagefilter.domain.model import (
    FilterSpec,
    FilterSpecBuilder,
    ImageClass,
    MachineImage,
    MatchMode,
)

__all__ = [
    "FilterSpec",
    "FilterSpecBuilder",
    "ImageClass",
    "ImageFilterError",
    "InvalidPatternError",
    "MachineImage",
    "MatchMode",
    "MissingArgumentError",
    "__version__",
]
