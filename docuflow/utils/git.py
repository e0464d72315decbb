"""
Git helpers for remote configuration.
"""

import logging
from pathlib import Path
from typing import Optional

from docuflow.utils.commands import run_command

logger = logging.getLogger(__name__)

GIT_TIMEOUT = 300


class GitError(Exception):
    """Raised when a git command fails."""

    pass


def run_git_command(
    args: list[str],
    repo_path: Optional[Path] = None,
    capture: bool = True,
) -> tuple[str, str, int]:
    """
    Run a git command and return output.

    Args:
        args: Git command arguments
        repo_path: Path to repository (default: current directory)
        capture: Capture output instead of streaming to the terminal

    Returns:
        Tuple of (stdout, stderr, return_code)
    """
    cmd = ["git"]
    if repo_path:
        cmd += ["-C", str(repo_path)]
    cmd += args

    return run_command(cmd, timeout=GIT_TIMEOUT, capture=capture)


def is_work_tree(repo_path: Optional[Path] = None) -> bool:
    stdout, _, code = run_git_command(["rev-parse", "--is-inside-work-tree"], repo_path)
    return code == 0 and stdout.strip() == "true"


def get_remote_url(name: str = "origin", repo_path: Optional[Path] = None) -> Optional[str]:
    """Return the URL of a remote, or None if it is not configured."""
    stdout, _, code = run_git_command(["remote", "get-url", name], repo_path)
    if code != 0:
        return None
    return stdout.strip() or None


def describe_remotes(repo_path: Optional[Path] = None) -> str:
    """Return `git remote -v` output."""
    stdout, _, _ = run_git_command(["remote", "-v"], repo_path)
    return stdout.rstrip()


def configure_remote(url: str, name: str = "origin", repo_path: Optional[Path] = None) -> str:
    """
    Add a remote, or point an existing one at a new URL.

    Args:
        url: Remote repository URL
        name: Remote name
        repo_path: Path to repository

    Returns:
        "updated" or "added"

    Raises:
        GitError: If git rejects the change
    """
    if get_remote_url(name, repo_path) is not None:
        args, action = ["remote", "set-url", name, url], "updated"
    else:
        args, action = ["remote", "add", name, url], "added"

    _, stderr, code = run_git_command(args, repo_path)
    if code != 0:
        raise GitError(f"git remote {args[1]} failed: {stderr.strip()}")

    logger.debug(f"Remote '{name}' {action}: {url}")
    return action


def push(
    remote: str,
    ref: str,
    set_upstream: bool = False,
    repo_path: Optional[Path] = None,
) -> None:
    """
    Push a branch or tag.

    Raises:
        GitError: If the push fails
    """
    args = ["push"]
    if set_upstream:
        args.append("-u")
    args += [remote, ref]

    _, _, code = run_git_command(args, repo_path, capture=False)
    if code != 0:
        raise GitError(f"git push {remote} {ref} failed (exit code {code})")
