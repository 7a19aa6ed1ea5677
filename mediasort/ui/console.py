"""Operator-facing output of an organization run."""

from typing import Dict, Mapping, Optional, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from mediasort.models.outcome import MoveOutcome, MoveResult

# level -> (colour, prefix)
NOTICE_STYLES: Dict[str, Tuple[str, str]] = {
    "info": ("blue", "ℹ️ "),
    "warning": ("yellow", "⚠️ "),
    "error": ("red", "❌"),
    "success": ("green", "✓"),
}

OUTCOME_STYLES: Dict[MoveOutcome, str] = {
    MoveOutcome.MOVED: "green",
    MoveOutcome.SKIPPED_ALREADY_IN_PLACE: "dim",
    MoveOutcome.SKIPPED_DRY_RUN: "yellow",
    MoveOutcome.SKIPPED_CONFLICT: "yellow",
    MoveOutcome.FAILED_SOURCE_MISSING: "red",
    MoveOutcome.FAILED_VERIFICATION: "red",
    MoveOutcome.FAILED_EXCEPTION: "red",
}


class ConsoleUI:
    """
    What the operator sees of a run.

    Diagnostics go through loguru; this class only renders notices,
    move outcomes and the panels of the CLI.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def print(self, renderable) -> None:
        """Print any Rich renderable."""
        self.console.print(renderable)

    def ask(self, prompt: str) -> str:
        """Read one line typed by the operator."""
        return self.console.input(prompt)

    def notify(self, level: str, message: str) -> None:
        """
        Print a one-line notice.

        Args:
            level: One of "info", "warning", "error" or "success".
            message: Text of the notice (Rich markup allowed).
        """
        style, prefix = NOTICE_STYLES[level]
        self.console.print(f"[{style}]{prefix} {message}[/{style}]")

    def print_panel(self, content: str, title: str = "", border_style: str = "blue") -> None:
        """Print content in a bordered panel."""
        self.console.print(Panel(content, title=title, border_style=border_style))

    def print_dry_run_banner(self) -> None:
        """Announce that nothing will be touched."""
        self.print_panel(
            "[bold]DRY RUN ENABLED[/bold]\n\n"
            "• No file will be moved and no folder created\n"
            "• Intended moves are logged and summarized",
            border_style="yellow",
        )

    @staticmethod
    def outcome_label(outcome: MoveOutcome) -> str:
        """Outcome name in its colour."""
        style = OUTCOME_STYLES[outcome]
        return f"[{style}]{outcome.value}[/{style}]"

    def print_outcome_counts(self, counts: Mapping[MoveOutcome, int]) -> None:
        """Print a table with one row per outcome that occurred."""
        table = Table(title="Outcomes", show_header=True, header_style="bold magenta")
        table.add_column("Outcome")
        table.add_column("Count", justify="right")
        for outcome in MoveOutcome:
            if counts.get(outcome):
                table.add_row(self.outcome_label(outcome), str(counts[outcome]))
        self.console.print(table)

    def print_failure(self, name: str, result: MoveResult) -> None:
        """Report a file whose move failed."""
        detail = f" ({result.error})" if result.error else ""
        self.notify("error", f"{name}: {self.outcome_label(result.outcome)}{detail}")


console = ConsoleUI()
