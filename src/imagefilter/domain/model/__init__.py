"""Domain model entities."""

from imagefilter.domain.model.enums import CriterionKind, ImageClass, MatchMode, Verdict
from imagefilter.domain.model.filter_spec import FilterSpec, FilterSpecBuilder
from imagefilter.domain.model.machine_image import MachineImage
from imagefilter.domain.model.selection import SelectionResult, SelectorConfig

__all__ = [
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
]
