"""
Supabase CLI wrapper.

Thin wrapper around the `supabase` command used by the deployment scripts.
Interactive commands (login, link, deploy) inherit the terminal so the
operator sees the CLI's own output and prompts.
"""

import logging
from typing import Optional

from docuflow.utils.commands import CommandError, check_command, command_exists, run_command

logger = logging.getLogger(__name__)

SUPABASE_EXECUTABLE = "supabase"

INSTALL_HINTS = [
    "npm install -g supabase",
    "brew install supabase/tap/supabase",
]


class SupabaseCLIError(Exception):
    """Raised when a Supabase CLI command fails."""

    pass


class SupabaseCLI:
    """Runs Supabase CLI commands for one project."""

    def __init__(
        self,
        project_ref: str,
        executable: str = SUPABASE_EXECUTABLE,
        timeout: Optional[int] = 600,
    ):
        self.project_ref = project_ref
        self.executable = executable
        self.timeout = timeout

    def _run(self, args: list[str], capture: bool = True) -> tuple[str, str, int]:
        return run_command([self.executable] + args, timeout=self.timeout, capture=capture)

    def is_installed(self) -> bool:
        return command_exists(self.executable)

    def is_authenticated(self) -> bool:
        """Check login state by listing projects."""
        _, _, code = self._run(["projects", "list"])
        return code == 0

    def login(self) -> bool:
        """Run the interactive login flow."""
        _, _, code = self._run(["login"], capture=False)
        return code == 0

    def link(self) -> bool:
        """
        Link the working directory to the project.

        Returns:
            False if linking failed (often because it is already linked)
        """
        _, _, code = self._run(["link", "--project-ref", self.project_ref], capture=False)
        return code == 0

    def deploy_function(self, name: str, verify_jwt: bool = False) -> None:
        """
        Deploy an Edge Function.

        Args:
            name: Function directory name under supabase/functions
            verify_jwt: Require a valid JWT on invocation

        Raises:
            SupabaseCLIError: If the deploy command fails
        """
        args = ["functions", "deploy", name]
        if not verify_jwt:
            args.append("--no-verify-jwt")

        try:
            check_command([self.executable] + args, timeout=self.timeout, capture=False)
        except CommandError as e:
            raise SupabaseCLIError(f"Failed to deploy {name} (exit code {e.returncode})") from e

    def set_secret(self, name: str, value: str) -> None:
        """
        Set an Edge Function secret.

        Raises:
            SupabaseCLIError: If the secrets command fails
        """
        try:
            check_command(
                [self.executable, "secrets", "set", f"{name}={value}"],
                timeout=self.timeout,
            )
        except CommandError as e:
            raise SupabaseCLIError(f"Failed to set {name}: {e.stderr.strip()}") from e
