"""Display functions for organization output."""

from collections import Counter
from typing import TYPE_CHECKING, Dict, List

from rich.tree import Tree

from mediasort.models.outcome import MoveOutcome
from mediasort.models.summary import RunSummary
from mediasort.ui.console import ConsoleUI, console

if TYPE_CHECKING:
    from mediasort.pipeline.organizer import FileReport

HIDDEN_FROM_TREE = (MoveOutcome.SKIPPED_ALREADY_IN_PLACE, MoveOutcome.SKIPPED_CONFLICT)


def format_file_count(count: int) -> str:
    """
    Format file count with pluralization.

    Args:
        count: Number of files.

    Returns:
        Formatted string like "5 files" or "1 file".
    """
    return f"{count} file{'s' if count != 1 else ''}"


def generate_tree_structure(reports: List["FileReport"]) -> Dict[str, List[str]]:
    """
    Group planned or performed moves by destination folder.

    Files already in place or held back by a name conflict are left out.
    Files are listed under the name they get at the destination.

    Args:
        reports: Per-file reports of a run.

    Returns:
        Dict mapping "YYYY/MM_MON" folders to file names.
    """
    tree_structure: Dict[str, List[str]] = {}

    for report in reports:
        if report.result.outcome in HIDDEN_FROM_TREE:
            continue
        folder = report.destination.relative.as_posix()
        tree_structure.setdefault(folder, []).append(report.result.target.name)

    return tree_structure


def display_tree(
    tree_structure: Dict[str, List[str]],
    max_files_per_folder: int = 5,
    ui: ConsoleUI = console,
) -> None:
    """
    Display the destination tree.

    Args:
        tree_structure: Dict mapping folder paths to file lists.
        max_files_per_folder: Maximum files to show per folder.
        ui: Console to print to.
    """
    root_tree = Tree("📁 [bold cyan]Destination structure[/bold cyan]")

    for folder_path in sorted(tree_structure):
        files = tree_structure[folder_path]
        folder_node = root_tree.add(
            f"📁 [bold cyan]{folder_path}[/bold cyan] "
            f"[dim]({format_file_count(len(files))})[/dim]"
        )

        for file in files[:max_files_per_folder]:
            folder_node.add(f"[dim]{file}[/dim]")

        remaining = len(files) - max_files_per_folder
        if remaining > 0:
            folder_node.add(f"[dim]... and {remaining} more[/dim]")

    ui.print(root_tree)


def display_outcomes(reports: List["FileReport"], ui: ConsoleUI = console) -> None:
    """
    Display a table of outcome counts.

    Args:
        reports: Per-file reports of a run.
        ui: Console to print to.
    """
    counts = Counter(report.result.outcome for report in reports)
    if counts:
        ui.print_outcome_counts(counts)


def display_failures(reports: List["FileReport"], ui: ConsoleUI = console) -> None:
    """List files whose move failed."""
    for report in reports:
        if report.result.outcome.is_failure:
            ui.print_failure(report.media.name, report.result)


def display_summary(summary: RunSummary, ui: ConsoleUI = console) -> None:
    """
    Display final run summary.

    Args:
        summary: Counters of the run.
        ui: Console to print to.
    """
    mode_text = " [dim](SIMULATION)[/dim]" if summary.dry_run else ""

    lines = [
        f"[blue]Processed:[/blue] {summary.processed}",
        f"[green]Moved:[/green] {summary.moved}",
        f"[yellow]Skipped:[/yellow] {summary.skipped}",
        f"[cyan]With metadata:[/cyan] {summary.with_metadata}",
        f"[magenta]Without metadata:[/magenta] {summary.without_metadata}",
    ]
    if summary.failed > 0:
        lines.append(f"[red]Failed:[/red] {summary.failed}")
    if summary.dry_run:
        lines.append(
            "\n[yellow]DRY RUN: no file was moved. "
            "Run again without --dry-run to apply.[/yellow]"
        )

    ui.print_panel(
        "\n".join(lines),
        title=f"Summary{mode_text}",
        border_style="yellow" if summary.dry_run else "green",
    )
