#!/usr/bin/env python3
"""
Run a SQL migration against the Docuflow Supabase project.

The migration is sent through the `exec_sql` RPC function with the service
role key. Most projects do not expose that function, so when the call fails
the script prints the SQL and the steps to run it in the SQL Editor.

With --direct the migration is applied over DATABASE_URL instead, in a
single transaction.

Original: run-migration.js, run-status-tracking-migration.js (node)

Usage:
    python run_migration.py
    python run_migration.py 20250112000001_add_renewal_reminders_cron_job.sql
    python run_migration.py 20250106000000_add_document_request_status_tracking --per-statement
    python run_migration.py path/to/fix.sql --direct

Environment Variables:
    NEXT_PUBLIC_SUPABASE_URL or SUPABASE_URL: Project URL
    SUPABASE_SERVICE_ROLE_KEY: Service role key (bypasses RLS)
    DATABASE_URL: Postgres URL (only with --direct)
    MIGRATIONS_DIR: Migration directory (default: supabase/migrations)
"""

import argparse
import logging
import sys
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from docuflow.core.settings import ConfigurationError, Settings
from docuflow.utils.config import load_settings
from docuflow.utils.database import execute_sql
from docuflow.utils.logging_setup import configure_script_logging
from docuflow.utils.migrations import (
    Migration,
    MigrationError,
    frame_sql,
    load_migration,
    manual_instructions,
    resolve_migration_path,
    split_statements,
)
from docuflow.utils.supabase_api import (
    RpcUnavailableError,
    SupabaseAPIError,
    SupabaseClient,
)

logger = logging.getLogger(__name__)

DEFAULT_MIGRATION = "20240101000006_create_link_organization_function.sql"

# Progress is logged every N statements in per-statement mode
PROGRESS_EVERY = 5


def report_missing_credentials(missing: list[str]) -> None:
    """Explain which variables are needed and how to set them."""
    logger.error("Missing Supabase credentials!")
    print("Required environment variables:", file=sys.stderr)
    for name in missing:
        print(f"  - {name}", file=sys.stderr)
    print("", file=sys.stderr)
    print("You can set them like:", file=sys.stderr)
    print('  export SUPABASE_URL="your-project-url"', file=sys.stderr)
    print('  export SUPABASE_SERVICE_ROLE_KEY="your-service-role-key"', file=sys.stderr)
    print("", file=sys.stderr)
    print("Or create a .env.local file with these values.", file=sys.stderr)


def print_manual_fallback(migration: Migration, project_ref: str) -> None:
    """Print the SQL with instructions for running it by hand."""
    print("")
    print("Cannot execute SQL through the Supabase API.")
    print("")
    print("Please run this SQL in your Supabase Dashboard:")
    for line in manual_instructions(project_ref, migration_path=migration.path):
        print(line)
    print("")
    print(frame_sql(migration.sql))


def run_statements(client: SupabaseClient, statements: list[str]) -> tuple[int, int]:
    """
    Execute statements one at a time through exec_sql.

    Individual statement errors are counted and execution continues.

    Returns:
        Tuple of (executed, errors)

    Raises:
        RpcUnavailableError: If exec_sql does not exist
        SupabaseAPIError: If a request could not be sent at all
    """
    executed = 0
    errors = 0

    for number, statement in enumerate(statements, start=1):
        try:
            client.exec_sql(statement)
        except RpcUnavailableError:
            raise
        except SupabaseAPIError as e:
            if e.status_code is None:
                raise
            logger.error(f"Error in statement {number}: {e}")
            errors += 1
            continue

        executed += 1
        if number % PROGRESS_EVERY == 0:
            logger.info(f"Executed {number}/{len(statements)} statements...")

    return executed, errors


def run_migration(
    migration: Migration,
    settings: Settings,
    per_statement: bool = False,
    direct: bool = False,
) -> bool:
    """
    Execute a migration.

    Returns:
        True on success; False after printing the manual fallback
    """
    if direct:
        logger.info("Executing migration over DATABASE_URL...")
        try:
            execute_sql(settings.database_url, migration.sql)
        except SQLAlchemyError as e:
            logger.error(f"Direct execution failed: {e}")
            print_manual_fallback(migration, settings.project_ref)
            return False
        logger.info("Migration executed successfully!")
        return True

    client = SupabaseClient(
        settings.project_url,
        settings.supabase_service_role_key,
        timeout=settings.request_timeout,
    )

    try:
        if per_statement:
            statements = split_statements(migration.sql)
            logger.info(f"Found {len(statements)} SQL statements to execute")
            executed, errors = run_statements(client, statements)
            if errors:
                logger.warning(f"Migration completed with {errors} errors")
                logger.warning(f"Executed: {executed} statements")
                logger.warning("Please review errors above and fix if needed")
                return False
            logger.info("Migration executed successfully!")
            logger.info(f"Executed: {executed} statements")
            return True

        logger.info("Executing migration...")
        data = client.exec_sql(migration.sql)
    except RpcUnavailableError as e:
        logger.warning(f"RPC method not available: {e}")
        print_manual_fallback(migration, settings.project_ref)
        return False
    except SupabaseAPIError as e:
        logger.error(f"Error running migration: {e}")
        print_manual_fallback(migration, settings.project_ref)
        return False

    logger.info("Migration executed successfully!")
    print(f"Response: {data}")
    return True


def migrations_dir_for(args: argparse.Namespace, settings: Settings) -> Path:
    migrations_dir = Path(args.migrations_dir or settings.migrations_dir)
    if args.root and not migrations_dir.is_absolute():
        migrations_dir = args.root / migrations_dir
    return migrations_dir


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Run a SQL migration on the Docuflow Supabase project"
    )
    parser.add_argument(
        "migration",
        nargs="?",
        default=DEFAULT_MIGRATION,
        help=f"Migration file name or path (default: {DEFAULT_MIGRATION})",
    )
    parser.add_argument(
        "--migrations-dir",
        help="Directory holding migration files (default: supabase/migrations)",
    )
    parser.add_argument(
        "--root",
        type=Path,
        help="Repository root for .env.local and migrations (default: cwd)",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--per-statement",
        action="store_true",
        help="Send each statement as a separate exec_sql call",
    )
    mode.add_argument(
        "--direct",
        action="store_true",
        help="Apply the migration over DATABASE_URL instead of the API",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args()

    configure_script_logging(args.verbose)

    try:
        settings = load_settings(args.root)
        if args.direct:
            settings.require("database_url")
        else:
            settings.require("project_url", "supabase_service_role_key")
    except ConfigurationError as e:
        if e.missing:
            report_missing_credentials(e.missing)
        else:
            logger.error(str(e))
        return 1

    path = resolve_migration_path(args.migration, migrations_dir_for(args, settings))
    try:
        migration = load_migration(path)
    except MigrationError as e:
        logger.error(f"Error running migration: {e}")
        return 1

    logger.info(f"Running migration: {migration.name}")
    logger.info(f"Migration size: {migration.size_kb:.2f} KB")
    print("Migration SQL:")
    print(migration.sql)
    print("")

    ok = run_migration(
        migration,
        settings,
        per_statement=args.per_statement,
        direct=args.direct,
    )
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
