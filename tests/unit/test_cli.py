"""Tests for CLI argument parsing."""

from pathlib import Path

import pytest

from mediasort.config.cli import (
    CLIArgs,
    create_parser,
    parse_arguments,
    args_to_cli_args,
)
from mediasort.config.settings import DEFAULT_LOG_FILE
from mediasort.filesystem.mover import ConflictPolicy


class TestCreateParser:
    """Tests for create_parser function."""

    def test_prog_name(self):
        """Parser is named after the tool."""
        assert create_parser().prog == "mediasort"


class TestParseArguments:
    """Tests for parse_arguments function."""

    def test_defaults(self):
        """No arguments gives defaults."""
        args = parse_arguments([])

        assert args.source is None
        assert args.dry_run is False
        assert args.on_conflict == "overwrite"
        assert args.debug is False
        assert args.no_log_file is False
        assert args.no_progress is False

    def test_source_and_dry_run(self):
        """Positional source and dry-run flag."""
        args = parse_arguments(["/photos", "--dry-run"])

        assert args.source == "/photos"
        assert args.dry_run is True

    def test_short_dry_run(self):
        """-n is an alias for --dry-run."""
        assert parse_arguments(["-n"]).dry_run is True

    def test_on_conflict_choices(self):
        """Conflict policy accepts known values."""
        assert parse_arguments(["--on-conflict", "rename"]).on_conflict == "rename"

    def test_rejects_unknown_policy(self):
        """Unknown policies are rejected."""
        with pytest.raises(SystemExit):
            parse_arguments(["--on-conflict", "merge"])

    def test_log_options_are_exclusive(self):
        """--log-file and --no-log-file cannot be combined."""
        with pytest.raises(SystemExit):
            parse_arguments(["--log-file", "x.log", "--no-log-file"])


class TestArgsToCliArgs:
    """Tests for args_to_cli_args function."""

    def test_converts_defaults(self):
        """Default namespace converts to default CLIArgs."""
        cli_args = args_to_cli_args(parse_arguments([]))

        assert cli_args == CLIArgs()
        assert cli_args.log_file == DEFAULT_LOG_FILE

    def test_converts_all_options(self):
        """Every option is carried over."""
        cli_args = args_to_cli_args(parse_arguments([
            "/photos", "-n", "--on-conflict", "skip", "--debug",
            "--log-file", "run.log", "--no-progress",
        ]))

        assert cli_args.source_dir == Path("/photos")
        assert cli_args.dry_run is True
        assert cli_args.on_conflict is ConflictPolicy.SKIP
        assert cli_args.debug is True
        assert cli_args.log_file == Path("run.log")
        assert cli_args.show_progress is False

    def test_no_log_file(self):
        """--no-log-file disables file logging."""
        cli_args = args_to_cli_args(parse_arguments(["--no-log-file"]))
        assert cli_args.log_file is None
