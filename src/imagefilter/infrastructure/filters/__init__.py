"""Infrastructure layer: stateless image filter functions.

Filters are pure functions: Filter = Callable[[ImageRecord], bool]
True = keep image, False = drop image.

Usage:
    from imagefilter.infrastructure.filters import all_of, from_spec, negate

    # Single spec
    flt = from_spec(FilterSpec.instance(ImageClass.MACHINE))
    kept = [i for i in images if flt(i)]

    # Composed specs
    flt = all_of(from_spec(prod_spec), negate(from_spec(legacy_spec)))
"""

from imagefilter.infrastructure.filters.composite import all_of, any_of, negate
from imagefilter.infrastructure.filters.spec import from_spec
from imagefilter.infrastructure.filters.types import Filter

__all__ = [
    "Filter",
    "all_of",
    "any_of",
    "from_spec",
    "negate",
]
