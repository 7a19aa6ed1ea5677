"""Entry point for the mediasort package.

This module provides the command-line entry point for the media organization tool.
Run with: python -m mediasort
"""

import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from mediasort.config.cli import CLIArgs, parse_arguments, args_to_cli_args
from mediasort.config.settings import LOG_RETENTION, LOG_ROTATION
from mediasort.exceptions import InvalidSourceFolderError
from mediasort.filesystem import enumerate_media_files, validate_source_folder
from mediasort.pipeline import MediaOrganizer
from mediasort.ui import (
    ConsoleUI,
    ask_source_folder,
    display_failures,
    display_outcomes,
    display_summary,
    display_tree,
    generate_tree_structure,
)


def setup_logging(debug: bool = False, log_file: Optional[Path] = None) -> None:
    """
    Configure loguru logging.

    Args:
        debug: If True, enable debug-level logging on stderr.
        log_file: File to log to at debug level (None to disable).
    """
    logger.remove()
    level = "DEBUG" if debug else "INFO"
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    if log_file is not None:
        logger.add(
            str(log_file),
            rotation=LOG_ROTATION,
            retention=LOG_RETENTION,
            level="DEBUG",
        )


def display_configuration(cli_args: CLIArgs, source: Path, console: ConsoleUI) -> None:
    """
    Display the current configuration to the user.

    Args:
        cli_args: Parsed CLI arguments.
        source: Validated source folder.
        console: Console UI instance.
    """
    mode_status = "[yellow]SIMULATION[/yellow]" if cli_args.dry_run else "[green]Normal[/green]"
    log_display = cli_args.log_file if cli_args.log_file else "disabled"

    console.print_panel(
        f"[bold]Run configuration[/bold]\n"
        f"Source: [cyan]{source}[/cyan]\n"
        f"Layout: [cyan]{source}/YYYY/MM_MON/[/cyan]\n"
        f"On conflict: {cli_args.on_conflict.value}\n"
        f"Log file: {log_display}\n"
        f"Mode: {mode_status}",
        title="Media Organizer",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the media organization tool.

    Args:
        argv: Command-line arguments (None for sys.argv).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    namespace = parse_arguments(argv)
    cli_args = args_to_cli_args(namespace)

    setup_logging(cli_args.debug, cli_args.log_file)

    console = ConsoleUI()

    try:
        source = cli_args.source_dir or ask_source_folder(console)
    except (KeyboardInterrupt, EOFError):
        console.notify("warning", "Cancelled")
        return 130

    try:
        root = validate_source_folder(source)
    except InvalidSourceFolderError as e:
        logger.error(str(e))
        console.notify("error", str(e))
        return 1

    if cli_args.dry_run:
        console.print_dry_run_banner()

    display_configuration(cli_args, root, console)

    files = enumerate_media_files(root)
    if not files:
        console.notify("warning", f"No media files found in {root}")
        return 0

    console.notify("info", f"{len(files)} media files found")

    organizer = MediaOrganizer(
        root,
        dry_run=cli_args.dry_run,
        on_conflict=cli_args.on_conflict,
        show_progress=cli_args.show_progress,
    )
    summary = organizer.process_files(files)

    if cli_args.dry_run:
        display_tree(generate_tree_structure(organizer.reports), ui=console)
    display_outcomes(organizer.reports, ui=console)
    display_failures(organizer.reports, ui=console)
    display_summary(summary, ui=console)

    if summary.failed:
        console.notify("warning", f"{summary.failed} file(s) could not be moved, see the log for details")
    else:
        console.notify("success", "Media organization complete")
    logger.info("Media organization complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
