#!/usr/bin/env python3
"""
Set Edge Function secrets for Supabase.

Pushes ENCRYPTION_KEY (required) and the Microsoft and Google OAuth client
credentials (optional) used by process-emails and refresh-tokens. Values are
taken from the environment, or prompted for when missing.

Original: set-edge-function-secrets.sh (bash)

Usage:
    python set_edge_function_secrets.py
    ENCRYPTION_KEY=... python set_edge_function_secrets.py --no-input

Environment Variables:
    ENCRYPTION_KEY: Key used to encrypt OAuth tokens (required)
    MICROSOFT_CLIENT_ID / MICROSOFT_CLIENT_SECRET: Outlook token refresh
    GOOGLE_CLIENT_ID / GOOGLE_CLIENT_SECRET: Gmail token refresh
    SUPABASE_PROJECT_REF: Project to link
"""

import argparse
import getpass
import logging
import sys
from pathlib import Path
from typing import Optional

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from docuflow.core.settings import ConfigurationError
from docuflow.utils.config import get_config_value, load_settings
from docuflow.utils.logging_setup import configure_script_logging
from docuflow.utils.supabase_cli import SupabaseCLI, SupabaseCLIError

logger = logging.getLogger(__name__)

# (label, id variable, secret variable, used for)
OAUTH_PROVIDERS = [
    ("Microsoft", "MICROSOFT_CLIENT_ID", "MICROSOFT_CLIENT_SECRET", "Outlook token refresh"),
    ("Google", "GOOGLE_CLIENT_ID", "GOOGLE_CLIENT_SECRET", "Gmail token refresh"),
]


def prompt_value(
    name: str,
    prompt: str,
    interactive: bool,
    hidden: bool = True,
) -> Optional[str]:
    """Read a value from the environment, falling back to a prompt."""
    value = get_config_value(name)
    if value or not interactive:
        return value

    logger.warning(f"{name} not found in environment")
    try:
        value = getpass.getpass(prompt) if hidden else input(prompt)
    except EOFError:
        return None
    return value.strip() or None


def set_encryption_key(cli: SupabaseCLI, interactive: bool) -> bool:
    """Set the required ENCRYPTION_KEY secret."""
    key = prompt_value("ENCRYPTION_KEY", "Enter ENCRYPTION_KEY: ", interactive)
    if not key:
        logger.error("ENCRYPTION_KEY is required")
        print("You can set it by:")
        print("  export ENCRYPTION_KEY='your-key-here'")
        print("  python set_edge_function_secrets.py")
        return False

    logger.info("Setting ENCRYPTION_KEY...")
    try:
        cli.set_secret("ENCRYPTION_KEY", key)
    except SupabaseCLIError as e:
        logger.error(f"Failed to set ENCRYPTION_KEY: {e}")
        return False

    logger.info("ENCRYPTION_KEY set successfully")
    return True


def set_oauth_credentials(
    cli: SupabaseCLI,
    label: str,
    id_name: str,
    secret_name: str,
    purpose: str,
    interactive: bool,
) -> bool:
    """
    Set an optional OAuth client id/secret pair.

    Returns:
        True if both secrets were set, False if skipped or failed
    """
    client_id = prompt_value(
        id_name,
        f"{label} Client ID for {purpose} (Enter to skip): ",
        interactive,
        hidden=False,
    )
    if not client_id:
        logger.info(f"Skipping {label} OAuth credentials")
        return False

    client_secret = prompt_value(secret_name, f"Enter {secret_name}: ", interactive)
    if not client_secret:
        logger.warning(f"{secret_name} not provided, skipping {label} OAuth credentials")
        return False

    logger.info(f"Setting {label} OAuth credentials...")
    try:
        cli.set_secret(id_name, client_id)
        cli.set_secret(secret_name, client_secret)
    except SupabaseCLIError as e:
        logger.warning(f"Failed to set {label} OAuth credentials: {e}")
        return False

    logger.info(f"{label} OAuth credentials set successfully")
    return True


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Set Supabase Edge Function secrets for Docuflow"
    )
    parser.add_argument(
        "--project-ref",
        help="Supabase project reference (default: from environment)",
    )
    parser.add_argument(
        "--no-input",
        action="store_true",
        help="Never prompt; only use values from the environment",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args()

    configure_script_logging(args.verbose)

    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error(str(e))
        return 1

    cli = SupabaseCLI(args.project_ref or settings.project_ref, timeout=settings.cli_timeout)
    interactive = not args.no_input

    if not cli.is_installed():
        logger.error("Supabase CLI is not installed")
        return 1

    if not cli.link():
        logger.warning("Project may already be linked")

    if not set_encryption_key(cli, interactive):
        return 1

    for label, id_name, secret_name, purpose in OAUTH_PROVIDERS:
        set_oauth_credentials(cli, label, id_name, secret_name, purpose, interactive)

    logger.info("Secrets configuration complete")
    print("")
    print("Note: SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY are usually")
    print("auto-configured by Supabase. Verify them in the Dashboard:")
    print("  Project Settings -> Edge Functions -> Secrets")
    print("")
    print("If you use Outlook accounts, MICROSOFT_CLIENT_ID and")
    print("MICROSOFT_CLIENT_SECRET must be set or token refresh will fail.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
