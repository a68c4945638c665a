"""Base reporter class for selection output.

Provides default implementation of ReporterProtocol.
Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from imagefilter.domain.model.selection import SelectionResult


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    Example:
        class CountReporter(BaseReporter):
            def report(self, result: SelectionResult) -> None:
                print(f"Matched: {result.match_count}")
    """

    @abstractmethod
    def report(self, result: SelectionResult) -> None:
        """Report selection result.

        Args:
            result: Completed selection
        """
