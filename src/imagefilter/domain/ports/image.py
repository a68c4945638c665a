"""Image record protocol.

Read-only view of a machine image consumed by the evaluator.
Any provider entity with these attributes can be filtered.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from imagefilter.domain.model.enums import ImageClass


class ImageRecord(Protocol):
    """Contract for filterable images.

    MachineImage is the built-in implementation.
    Provider adapters may expose their own entities directly.
    """

    @property
    def image_id(self) -> str:
        """Provider image id."""
        ...

    @property
    def image_class(self) -> ImageClass:
        """Image classification."""
        ...

    @property
    def provider_owner_id(self) -> str | None:
        """Owning account number."""
        ...

    @property
    def name(self) -> str:
        """Image name."""
        ...

    @property
    def description(self) -> str | None:
        """Image description."""
        ...

    @property
    def tags(self) -> Mapping[str, str | None]:
        """Metadata tags."""
        ...
