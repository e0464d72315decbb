"""
Tests for docuflow.utils.commands.
"""
import subprocess
from unittest.mock import MagicMock, patch

import pytest

from docuflow.utils.commands import (
    CommandError,
    check_command,
    command_exists,
    run_command,
)


class TestRunCommand:
    """Tests for run_command."""

    @patch("docuflow.utils.commands.subprocess.run")
    def test_returns_output(self, mock_run):
        """Should return stdout, stderr and the exit code."""
        mock_run.return_value = MagicMock(stdout="out\n", stderr="", returncode=0)

        result = run_command(["echo", "out"])

        assert result == ("out\n", "", 0)
        mock_run.assert_called_once_with(
            ["echo", "out"],
            capture_output=True,
            text=True,
            timeout=300,
            cwd=None,
        )

    @patch("docuflow.utils.commands.subprocess.run")
    def test_uncaptured_output(self, mock_run):
        """Should map missing output to empty strings."""
        mock_run.return_value = MagicMock(stdout=None, stderr=None, returncode=2)

        result = run_command(["supabase", "login"], capture=False)

        assert result == ("", "", 2)
        assert mock_run.call_args.kwargs["capture_output"] is False

    @patch("docuflow.utils.commands.subprocess.run")
    def test_timeout(self, mock_run):
        """Should report a timeout as a failure."""
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="git", timeout=5)

        assert run_command(["git", "push"], timeout=5) == ("", "Command timed out", 1)

    @patch("docuflow.utils.commands.subprocess.run")
    def test_missing_executable(self, mock_run):
        """Should report a missing executable with exit code 127."""
        mock_run.side_effect = FileNotFoundError()

        stdout, stderr, code = run_command(["supabase", "projects", "list"])

        assert code == 127
        assert "supabase" in stderr


class TestCheckCommand:
    """Tests for check_command."""

    @patch("docuflow.utils.commands.run_command")
    def test_returns_stdout(self, mock_run):
        """Should return stdout on success."""
        mock_run.return_value = ("true\n", "", 0)
        assert check_command(["git", "rev-parse"]) == "true\n"

    @patch("docuflow.utils.commands.run_command")
    def test_raises_on_failure(self, mock_run):
        """Should raise CommandError with the exit code and stderr."""
        mock_run.return_value = ("", "fatal: bad\n", 128)

        with pytest.raises(CommandError) as exc_info:
            check_command(["git", "status"])

        assert exc_info.value.returncode == 128
        assert exc_info.value.stderr == "fatal: bad\n"
        assert "git status" in str(exc_info.value)


class TestCommandExists:
    """Tests for command_exists."""

    @patch("docuflow.utils.commands.shutil.which")
    def test_found(self, mock_which):
        mock_which.return_value = "/usr/local/bin/supabase"
        assert command_exists("supabase") is True

    @patch("docuflow.utils.commands.shutil.which")
    def test_not_found(self, mock_which):
        mock_which.return_value = None
        assert command_exists("supabase") is False
