#!/usr/bin/env python3
"""
Connect the local repository to a GitHub remote.

Adds the remote (or updates its URL after confirmation) and optionally
pushes the main branch and a checkpoint tag.

Original: setup-remote.sh (bash)

Usage:
    python setup_remote.py
    python setup_remote.py --url git@github.com:username/docuflow.git --yes
    python setup_remote.py --tag checkpoint/2025-11-06-initial-repo-setup
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from docuflow.utils.git import (
    GitError,
    configure_remote,
    describe_remotes,
    get_remote_url,
    is_work_tree,
    push,
)
from docuflow.utils.logging_setup import configure_script_logging

logger = logging.getLogger(__name__)

URL_EXAMPLES = [
    "https://github.com/username/docuflow.git",
    "git@github.com:username/docuflow.git",
]


def confirm(question: str, assume_yes: bool = False) -> bool:
    """Ask a y/n question; only y or Y counts as yes."""
    if assume_yes:
        return True
    try:
        reply = input(f"{question} (y/n) ")
    except EOFError:
        return False
    return reply.strip()[:1] in ("y", "Y")


def ask_url(url: Optional[str]) -> str:
    """Return the URL from the command line or prompt for it."""
    if url:
        return url.strip()

    print("Please provide your GitHub repository URL.")
    print("Examples:")
    for example in URL_EXAMPLES:
        print(f"  - {example}")
    print("")
    try:
        return input("GitHub repository URL: ").strip()
    except EOFError:
        return ""


def push_commands(remote: str, branch: str, tag: Optional[str]) -> list[str]:
    commands = [f"git push -u {remote} {branch}"]
    if tag:
        commands.append(f"git push {remote} {tag}")
    return commands


def push_to_remote(remote: str, branch: str, tag: Optional[str]) -> None:
    """
    Push the branch, then the tag.

    Raises:
        GitError: If either push fails
    """
    logger.info("Pushing to remote...")
    push(remote, branch, set_upstream=True)
    if tag:
        push(remote, tag)

    logger.info("Successfully pushed to remote!")
    print(f"   Branch: {branch}")
    if tag:
        print(f"   Tag: {tag}")


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Set up the GitHub remote for this repository"
    )
    parser.add_argument(
        "--url",
        help="Repository URL (prompted for when omitted)",
    )
    parser.add_argument(
        "--remote",
        default="origin",
        help="Remote name (default: origin)",
    )
    parser.add_argument(
        "--branch",
        default="main",
        help="Branch to push (default: main)",
    )
    parser.add_argument(
        "--tag",
        help="Checkpoint tag to push after the branch",
    )
    parser.add_argument(
        "-y", "--yes",
        action="store_true",
        help="Answer yes to every question",
    )
    push_group = parser.add_mutually_exclusive_group()
    push_group.add_argument(
        "--push",
        dest="push",
        action="store_true",
        default=None,
        help="Push without asking",
    )
    push_group.add_argument(
        "--no-push",
        dest="push",
        action="store_false",
        help="Do not push",
    )
    parser.set_defaults(push=None)
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args()

    configure_script_logging(args.verbose)

    if not is_work_tree():
        logger.error("Not inside a git repository")
        return 1

    logger.info("Setting up GitHub remote repository")

    existing = get_remote_url(args.remote)
    if existing is not None:
        logger.warning(f"Remote '{args.remote}' already exists:")
        print(describe_remotes())
        print("")
        if not confirm("Do you want to update it?", args.yes):
            print("Cancelled.")
            return 0

    url = ask_url(args.url)
    if not url:
        logger.error("No URL provided. Exiting.")
        return 1

    try:
        action = configure_remote(url, args.remote)
    except GitError as e:
        logger.error(str(e))
        return 1

    if action == "updated":
        logger.info(f"Updated remote '{args.remote}' to: {url}")
    else:
        logger.info(f"Added remote '{args.remote}': {url}")

    print("")
    print("Remote configuration:")
    print(describe_remotes())
    print("")

    should_push = args.push
    if should_push is None:
        should_push = confirm("Push to remote now?", args.yes)

    if should_push:
        try:
            push_to_remote(args.remote, args.branch, args.tag)
        except GitError as e:
            logger.error(str(e))
            return 1
    else:
        print("To push later, run:")
        for command in push_commands(args.remote, args.branch, args.tag):
            print(f"  {command}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
