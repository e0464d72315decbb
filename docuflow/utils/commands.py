"""
Subprocess utilities.

Helpers for checking that external tools are installed and running them
with a timeout.
"""

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 300


class CommandError(Exception):
    """Raised when an external command fails."""

    def __init__(self, cmd: list[str], returncode: int, stderr: str = ""):
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command failed ({returncode}): {' '.join(cmd)}"
        if stderr:
            message += f"\n{stderr.strip()}"
        super().__init__(message)


def command_exists(name: str) -> bool:
    """Return True if an executable is on PATH."""
    return shutil.which(name) is not None


def run_command(
    cmd: list[str],
    timeout: Optional[int] = DEFAULT_TIMEOUT,
    capture: bool = True,
    cwd: Optional[Path] = None,
) -> tuple[str, str, int]:
    """
    Run a command and return its output.

    Args:
        cmd: Command and arguments
        timeout: Timeout in seconds (None waits forever)
        capture: Capture stdout/stderr; when False the command
            inherits the terminal (for interactive commands)
        cwd: Working directory

    Returns:
        Tuple of (stdout, stderr, return_code)
    """
    logger.debug(f"Running: {' '.join(cmd)}")

    try:
        result = subprocess.run(
            cmd,
            capture_output=capture,
            text=True,
            timeout=timeout,
            cwd=cwd,
        )
    except subprocess.TimeoutExpired:
        return "", "Command timed out", 1
    except FileNotFoundError:
        return "", f"Command not found: {cmd[0]}", 127

    return result.stdout or "", result.stderr or "", result.returncode


def check_command(
    cmd: list[str],
    timeout: Optional[int] = DEFAULT_TIMEOUT,
    capture: bool = True,
    cwd: Optional[Path] = None,
) -> str:
    """
    Run a command and raise CommandError on a non-zero exit.

    Returns:
        Captured stdout
    """
    stdout, stderr, code = run_command(cmd, timeout=timeout, capture=capture, cwd=cwd)
    if code != 0:
        raise CommandError(cmd, code, stderr)
    return stdout
