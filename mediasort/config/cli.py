"""Command-line interface argument parsing."""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from mediasort.config.settings import DEFAULT_LOG_FILE
from mediasort.filesystem.mover import ConflictPolicy


@dataclass
class CLIArgs:
    """
    Parsed command-line arguments.

    Attributes:
        source_dir: Folder to organize (None to prompt for it).
        dry_run: If True, simulate without making changes.
        on_conflict: What to do when the destination file exists.
        debug: If True, enable debug logging.
        log_file: Log file path (None to disable file logging).
        show_progress: If True, display a progress bar.
    """

    source_dir: Optional[Path] = None
    dry_run: bool = False
    on_conflict: ConflictPolicy = ConflictPolicy.OVERWRITE
    debug: bool = False
    log_file: Optional[Path] = DEFAULT_LOG_FILE
    show_progress: bool = True


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='mediasort',
        description="""
        Moves photos and videos found directly in SOURCE into
        SOURCE/YYYY/MM_MON folders according to their acquisition date.
        """
    )

    parser.add_argument(
        'source',
        nargs='?',
        default=None,
        help="folder to organize (prompted for when omitted)"
    )

    parser.add_argument(
        '-n', '--dry-run',
        action='store_true',
        help="simulation mode - no file modifications"
    )

    parser.add_argument(
        '--on-conflict',
        choices=[policy.value for policy in ConflictPolicy],
        default=ConflictPolicy.OVERWRITE.value,
        help="action when a file with the same name exists at the destination "
             "(default: overwrite)"
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help="enable debug logging"
    )

    log_group = parser.add_mutually_exclusive_group()

    log_group.add_argument(
        '--log-file',
        default=str(DEFAULT_LOG_FILE),
        help=f"log file path (default: {DEFAULT_LOG_FILE})"
    )

    log_group.add_argument(
        '--no-log-file',
        action='store_true',
        help="do not write a log file"
    )

    parser.add_argument(
        '--no-progress',
        action='store_true',
        help="hide the progress bar"
    )

    return parser


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: List of argument strings (None for sys.argv).

    Returns:
        Parsed Namespace object.
    """
    parser = create_parser()
    return parser.parse_args(args)


def args_to_cli_args(namespace: argparse.Namespace) -> CLIArgs:
    """
    Convert argparse Namespace to CLIArgs dataclass.

    Args:
        namespace: Parsed argparse Namespace.

    Returns:
        CLIArgs instance.
    """
    return CLIArgs(
        source_dir=Path(namespace.source) if namespace.source else None,
        dry_run=namespace.dry_run,
        on_conflict=ConflictPolicy(namespace.on_conflict),
        debug=namespace.debug,
        log_file=None if namespace.no_log_file else Path(namespace.log_file),
        show_progress=not namespace.no_progress,
    )
