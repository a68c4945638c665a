"""Predicate type aliases."""

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from imagefilter.domain.ports.image import ImageRecord

ImagePredicate = Callable[["ImageRecord"], bool]
