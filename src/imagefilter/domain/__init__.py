"""imagefilter domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, re, fnmatch, logging, collections.abc
"""

from imagefilter.domain.evaluation import Evaluation, Stage, StageOutcome
from imagefilter.domain.exceptions import (
    ImageFilterError,
    InvalidConfigError,
    InvalidPatternError,
    MissingArgumentError,
)
from imagefilter.domain.model import (
    CriterionKind,
    FilterSpec,
    FilterSpecBuilder,
    ImageClass,
    MachineImage,
    MatchMode,
    SelectionResult,
    SelectorConfig,
    Verdict,
)
from imagefilter.domain.ports import ImageRecord, ImageSource, TagMatcher

__all__ = [
    # Exceptions
    "ImageFilterError",
    "InvalidConfigError",
    "InvalidPatternError",
    "MissingArgumentError",
    # Enums
    "CriterionKind",
    "ImageClass",
    "MatchMode",
    "Verdict",
    # Value objects
    "MachineImage",
    "FilterSpec",
    "SelectionResult",
    "SelectorConfig",
    # Builders
    "FilterSpecBuilder",
    # Evaluation
    "Evaluation",
    "Stage",
    "StageOutcome",
    # Ports
    "ImageRecord",
    "ImageSource",
    "TagMatcher",
]
