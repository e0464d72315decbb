#!/usr/bin/env python3
"""
Print the employee directory migration.

Adds the profile fields used by the employee directory. The SQL is printed
for the Supabase SQL Editor, with `supabase db push` as the alternative for
a linked CLI.

Original: run-employee-directory-migration.js (node)

Usage:
    python run_employee_directory_migration.py
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from docuflow.utils.logging_setup import configure_script_logging
from docuflow.utils.migrations import DEFAULT_MIGRATIONS_DIR, print_manual_migration

logger = logging.getLogger(__name__)

MIGRATION_FILE = DEFAULT_MIGRATIONS_DIR / "20240101000007_add_employee_directory_fields.sql"
TITLE = "Employee Directory Migration"
FOOTER = "After running the migration, the employee directory will be fully functional!"


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Print the employee directory migration"
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=Path("."),
        help="Repository root (default: current directory)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args()

    configure_script_logging(args.verbose)

    ok = print_manual_migration(
        args.root / MIGRATION_FILE,
        title=TITLE,
        include_cli=True,
        footer=FOOTER,
    )
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
