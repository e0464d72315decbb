#!/usr/bin/env python3
"""
Deploy Edge Functions to Supabase.

This script checks for the Supabase CLI, makes sure the operator is logged
in, links the Docuflow project and deploys one or more Edge Functions.

Original: deploy-edge-function.sh, deploy-validation-functions.sh (bash)

Usage:
    python deploy_edge_function.py
    python deploy_edge_function.py validate-document send-renewal-reminders
    python deploy_edge_function.py process-emails --project-ref abcdefgh

Environment Variables:
    SUPABASE_PROJECT_REF: Project to link (default: Docuflow production)
    CLI_TIMEOUT: Timeout for CLI commands in seconds (default: 600)
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from docuflow.core.settings import ConfigurationError
from docuflow.utils.config import load_settings
from docuflow.utils.logging_setup import configure_script_logging
from docuflow.utils.supabase_cli import INSTALL_HINTS, SupabaseCLI, SupabaseCLIError

logger = logging.getLogger(__name__)

DEFAULT_FUNCTIONS = ["process-emails"]


def print_next_steps(functions: list[str]) -> None:
    """Print what to do after a successful deploy."""
    print("")
    print("Next steps:")
    print("1. Set ENCRYPTION_KEY secret:")
    print("   supabase secrets set ENCRYPTION_KEY=your-encryption-key")
    print("")
    print("2. Test the function:")
    for name in functions:
        print(f"   supabase functions invoke {name} --no-verify-jwt")
    print("")
    print("3. View logs:")
    for name in functions:
        print(f"   supabase functions logs {name}")


def ensure_authenticated(cli: SupabaseCLI) -> bool:
    """Log in if the CLI has no session."""
    if cli.is_authenticated():
        logger.info("Authenticated with Supabase")
        return True

    logger.warning("Not logged in to Supabase")
    logger.info("Logging in...")
    if not cli.login():
        logger.error("Supabase login failed")
        return False

    logger.info("Authenticated with Supabase")
    return True


def deploy_functions(
    cli: SupabaseCLI,
    functions: list[str],
    verify_jwt: bool = False,
) -> bool:
    """
    Link the project and deploy each function in order.

    Stops at the first failed deploy.

    Returns:
        True if every function deployed
    """
    logger.info(f"Linking to project: {cli.project_ref}")
    if not cli.link():
        logger.warning("Project may already be linked")

    for name in functions:
        logger.info(f"Deploying {name} Edge Function...")
        try:
            cli.deploy_function(name, verify_jwt=verify_jwt)
        except SupabaseCLIError as e:
            logger.error(f"Deployment failed: {e}")
            return False
        logger.info(f"{name} deployed successfully")

    return True


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Deploy Docuflow Edge Functions to Supabase"
    )
    parser.add_argument(
        "functions",
        nargs="*",
        default=DEFAULT_FUNCTIONS,
        help="Edge Function names (default: process-emails)",
    )
    parser.add_argument(
        "--project-ref",
        help="Supabase project reference (default: from environment)",
    )
    parser.add_argument(
        "--verify-jwt",
        action="store_true",
        help="Require a valid JWT when invoking the functions",
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

    project_ref = args.project_ref or settings.project_ref
    cli = SupabaseCLI(project_ref, timeout=settings.cli_timeout)

    logger.info("Docuflow Edge Function Deployment")

    if not cli.is_installed():
        logger.error("Supabase CLI is not installed")
        print("Install it with:")
        for hint in INSTALL_HINTS:
            print(f"  {hint}")
        return 1

    logger.info("Supabase CLI found")

    if not ensure_authenticated(cli):
        return 1

    if not deploy_functions(cli, args.functions, verify_jwt=args.verify_jwt):
        return 1

    logger.info("Edge Function deployment complete")
    print_next_steps(args.functions)
    return 0


if __name__ == "__main__":
    sys.exit(main())
