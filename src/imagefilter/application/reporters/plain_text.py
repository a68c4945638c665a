"""Plain text reporter using print().

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from imagefilter.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from imagefilter.domain.model.selection import SelectionResult


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, result: SelectionResult) -> None:
        """Report selection result as plain text."""
        self._write("=" * 70)
        self._write("Image Selection Results")
        self._write("=" * 70)
        self._write()
        self._write(f"Filter: {result.spec}")
        self._write(f"  Pages: {result.pages}")
        self._write(f"  Examined: {result.examined}")
        self._write(f"  Matched: {result.match_count}")
        self._write(f"  Rejected: {result.rejected_count}")
        if result.truncated:
            self._write("  Stopped at max_matches")

        if result.matched:
            self._write()
            self._write("-" * 70)
            self._write(f"Matched images ({result.match_count}):")
            self._write("-" * 70)
            for i, image in enumerate(result.matched, start=1):
                self._write(
                    f"{i}. {image.image_id} {image.name} "
                    f"[{image.image_class.name}] owner={image.provider_owner_id}"
                )

        self._write("=" * 70)

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)
