"""Tests for the mediasort package entry point."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from mediasort.__main__ import (
    setup_logging,
    display_configuration,
    main,
)
from mediasort.config.cli import CLIArgs
from mediasort.filesystem.mover import ConflictPolicy


@pytest.fixture
def quiet_main():
    """Run main() without touching logging and with a mock console."""
    with patch("mediasort.__main__.setup_logging"), \
            patch("mediasort.__main__.ConsoleUI") as mock_console_cls:
        yield mock_console_cls.return_value


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_with_file(self):
        """Adds a console sink and a file sink."""
        with patch("mediasort.__main__.logger") as mock_logger:
            setup_logging(debug=False, log_file=Path("run.log"))
            mock_logger.remove.assert_called_once()
            assert mock_logger.add.call_count == 2

    def test_setup_logging_without_file(self):
        """Only the console sink is added without a log file."""
        with patch("mediasort.__main__.logger") as mock_logger:
            setup_logging(debug=True, log_file=None)
            assert mock_logger.add.call_count == 1
            assert mock_logger.add.call_args[1]["level"] == "DEBUG"


class TestDisplayConfiguration:
    """Tests for display_configuration function."""

    def test_displays_normal_mode(self):
        """Displays configuration in normal mode."""
        console = MagicMock()

        display_configuration(CLIArgs(), Path("/photos"), console)

        content = console.print_panel.call_args[0][0]
        assert "Normal" in content
        assert "/photos" in content

    def test_displays_simulation_mode(self):
        """Displays configuration in simulation mode."""
        console = MagicMock()
        cli_args = CLIArgs(dry_run=True, on_conflict=ConflictPolicy.RENAME, log_file=None)

        display_configuration(cli_args, Path("/photos"), console)

        content = console.print_panel.call_args[0][0]
        assert "SIMULATION" in content
        assert "rename" in content
        assert "disabled" in content


class TestMain:
    """Tests for main function."""

    def test_missing_folder_aborts(self, tmp_path, quiet_main):
        """A missing source folder exits with an error before any work."""
        with patch("mediasort.__main__.MediaOrganizer") as mock_organizer:
            code = main([str(tmp_path / "missing"), "--no-log-file"])

        assert code == 1
        quiet_main.notify.assert_called_once()
        assert quiet_main.notify.call_args[0][0] == "error"
        mock_organizer.assert_not_called()

    def test_no_files_exits_early(self, tmp_path, quiet_main):
        """An empty folder exits without processing."""
        with patch("mediasort.__main__.MediaOrganizer") as mock_organizer:
            code = main([str(tmp_path), "--no-log-file"])

        assert code == 0
        quiet_main.notify.assert_called_once()
        assert quiet_main.notify.call_args[0][0] == "warning"
        mock_organizer.assert_not_called()

    def test_prompts_for_folder_when_omitted(self, tmp_path, quiet_main):
        """The operator is asked for the folder."""
        with patch("mediasort.__main__.ask_source_folder", return_value=tmp_path) as mock_ask:
            code = main(["--no-log-file"])

        assert code == 0
        mock_ask.assert_called_once()

    def test_cancelled_prompt(self, quiet_main):
        """Ctrl-C at the prompt exits cleanly."""
        with patch("mediasort.__main__.ask_source_folder", side_effect=KeyboardInterrupt):
            assert main(["--no-log-file"]) == 130

    def test_dry_run_leaves_files(self, tmp_path, quiet_main):
        """Dry run reports but moves nothing."""
        (tmp_path / "photo.jpg").write_bytes(b"not really a jpeg")

        code = main([str(tmp_path), "--dry-run", "--no-log-file", "--no-progress"])

        assert code == 0
        assert (tmp_path / "photo.jpg").exists()
        assert sorted(p.name for p in tmp_path.iterdir()) == ["photo.jpg"]
        quiet_main.print_dry_run_banner.assert_called_once()
        quiet_main.print_panel.assert_called()

    def test_moves_files(self, tmp_path, quiet_main):
        """A normal run moves files into year/month folders."""
        (tmp_path / "photo.jpg").write_bytes(b"not really a jpeg")

        code = main([str(tmp_path), "--no-log-file", "--no-progress"])

        assert code == 0
        assert not (tmp_path / "photo.jpg").exists()
        assert len(list(tmp_path.glob("*/*/photo.jpg"))) == 1
        quiet_main.notify.assert_any_call("success", "Media organization complete")
