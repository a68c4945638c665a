"""Reporter protocol for selection output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from imagefilter.domain.model.selection import SelectionResult


class ReporterProtocol(Protocol):
    """Contract for selection reporters.

    Users implement this Protocol to customize output format.
    imagefilter provides PlainTextReporter as default.
    """

    def report(self, result: SelectionResult) -> None:
        """Report selection result.

        Implementation decides output format and destination.

        Args:
            result: Completed selection
        """
        ...
