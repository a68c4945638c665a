"""Machine image value object."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from imagefilter.domain.model.enums import ImageClass


@dataclass(frozen=True, slots=True)
class MachineImage:
    """Machine image record as listed by a cloud provider.

    Immutable value object with FAIL-FIRST validation.
    Satisfies ImageRecord protocol.

    Attributes:
        image_id: Provider image identifier (must not be empty)
        name: Image name (must not be empty)
        image_class: Image classification
        provider_owner_id: Owning account number, None if unknown
        description: Free-text description, None if not set
        tags: Metadata tags (read-only copy)
    """

    image_id: str
    name: str
    image_class: ImageClass = ImageClass.MACHINE
    provider_owner_id: str | None = None
    description: str | None = None
    tags: Mapping[str, str | None] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.image_id:
            raise ValueError("image_id must not be empty")
        if not self.name:
            raise ValueError("name must not be empty")
        if not isinstance(self.image_class, ImageClass):
            raise TypeError(f"image_class must be ImageClass, got {type(self.image_class).__name__}")
        for key in self.tags:
            if not isinstance(key, str):
                raise TypeError(f"tag keys must be str, got {type(key).__name__}")
        # Copy so later changes to the caller's dict are not visible
        object.__setattr__(self, "tags", MappingProxyType(dict(self.tags)))

    def __str__(self) -> str:
        """Format as image_id (name)."""
        return f"{self.image_id} ({self.name})"
