"""Filter type alias.

Python 3.12 PEP 695 type alias syntax.
Filter function: takes ImageRecord, returns True to keep.
"""

from collections.abc import Callable
from typing import TypeAlias

from imagefilter.domain.ports.image import ImageRecord

Filter: TypeAlias = Callable[[ImageRecord], bool]
