#!/usr/bin/env python3
"""
Print a migration for manual execution in the Supabase SQL Editor.

Nothing is executed; the SQL is framed for copy-paste and followed by
step-by-step instructions.

Original: scripts/deployment/copy-migration.sh (bash)

Usage:
    python show_migration.py 20250106000000_add_document_request_status_tracking
    python show_migration.py supabase/migrations/ALL_MIGRATIONS.sql --cli-hint
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
from docuflow.utils.migrations import print_manual_migration, resolve_migration_path

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Print a migration with SQL Editor instructions"
    )
    parser.add_argument(
        "migration",
        help="Migration file name or path",
    )
    parser.add_argument(
        "--title",
        help="Heading printed above the SQL",
    )
    parser.add_argument(
        "--cli-hint",
        action="store_true",
        help="Also show the `supabase db push` alternative",
    )
    parser.add_argument(
        "--migrations-dir",
        help="Directory holding migration files (default: supabase/migrations)",
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

    path = resolve_migration_path(
        args.migration,
        Path(args.migrations_dir or settings.migrations_dir),
    )

    ok = print_manual_migration(
        path,
        title=args.title or f"Migration: {path.stem}",
        project_ref=settings.project_ref,
        include_cli=args.cli_hint,
    )
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
