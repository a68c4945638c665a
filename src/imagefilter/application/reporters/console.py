"""Console reporter: SelectionResult / Evaluation → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from imagefilter.domain.model.enums import Verdict

if TYPE_CHECKING:
    from collections.abc import Mapping

    from imagefilter.domain.evaluation import Evaluation
    from imagefilter.domain.model.selection import SelectionResult
    from imagefilter.domain.ports.image import ImageRecord

_VERDICT_STYLES = {
    Verdict.PASS_CONTINUE: "green",
    Verdict.FAIL_NOW: "red",
    Verdict.SUCCEED_NOW: "bold green",
}


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        max_rows: Max matched images to display. None = unlimited.
        show_tags: Show tags column.
        width: Console width in characters.
        color: Emit ANSI styles. False = plain text.
    """

    max_rows: int | None = None
    show_tags: bool = True
    width: int = 120
    color: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_rows is not None and self.max_rows < 0:
            raise ValueError(f"max_rows must be >= 0, got {self.max_rows}")
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")


def format_tags(tags: Mapping[str, str | None]) -> str:
    """Format tags as sorted key=value list, "-" if empty."""
    return ", ".join(f"{k}={v}" for k, v in sorted(tags.items())) or "-"


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    Not a ReporterProtocol: call render() on a SelectionResult.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def _console(self, output: StringIO) -> Console:
        return Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            highlight=False,
            width=self._config.width,
        )

    def render(self, result: SelectionResult) -> str:
        """Format selection result as rich formatted string.

        Args:
            result: Selection to format.

        Returns:
            Formatted string with summary and matched images table.
        """
        output = StringIO()
        console = self._console(output)

        console.print()
        console.rule("[bold]IMAGE SELECTION[/bold]")
        console.print()
        console.print(f"[bold]Filter:[/bold] {escape(str(result.spec))}")
        console.print(
            f"[bold]Matched:[/bold] {result.match_count} of {result.examined} "
            f"({result.pages} pages)"
        )
        if result.truncated:
            console.print("[yellow]Stopped at max_matches[/yellow]")
        console.print()

        if result.matched:
            self._render_images(console, result.matched)

        return output.getvalue()

    def explain(self, evaluation: Evaluation, image: ImageRecord) -> str:
        """Format evaluation trace as rich formatted string.

        Args:
            evaluation: Trace from FilterSpec.explain()
            image: Evaluated image

        Returns:
            Formatted string with one row per executed stage.
        """
        output = StringIO()
        console = self._console(output)

        verdict = "[green]MATCH[/green]" if evaluation.matched else "[red]NO MATCH[/red]"
        console.print(f"[bold]{escape(image.name)}[/bold]: {verdict} (mode {evaluation.mode.name})")

        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("Stage", style="cyan")
        table.add_column("Kind")
        table.add_column("Hit")
        table.add_column("Verdict")
        for outcome in evaluation.outcomes:
            style = _VERDICT_STYLES[outcome.verdict]
            table.add_row(
                outcome.name,
                outcome.kind.name,
                "yes" if outcome.hit else "no",
                f"[{style}]{outcome.verdict.name}[/{style}]",
            )
        if evaluation.outcomes:
            console.print(table)

        decided_by = evaluation.decided_by or "terminal fallback"
        console.print(f"[dim]Decided by: {decided_by}[/dim]")
        return output.getvalue()

    def _render_images(self, console: Console, images: tuple[ImageRecord, ...]) -> None:
        """Render matched images table."""
        shown = images
        if self._config.max_rows is not None:
            shown = images[: self._config.max_rows]

        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("Name", style="cyan")
        table.add_column("Class", style="yellow")
        table.add_column("Owner", style="dim")
        table.add_column("Description")
        if self._config.show_tags:
            table.add_column("Tags", style="dim")

        for image in shown:
            row = [
                escape(image.name),
                image.image_class.name,
                escape(image.provider_owner_id or "-"),
                escape(image.description or "-"),
            ]
            if self._config.show_tags:
                row.append(escape(format_tags(image.tags)))
            table.add_row(*row)

        console.print(table)
        hidden = len(images) - len(shown)
        if hidden:
            console.print(f"[dim]... {hidden} more[/dim]")
