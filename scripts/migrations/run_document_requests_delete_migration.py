#!/usr/bin/env python3
"""
Print the document requests delete-policy migration.

Adds the RLS policy that lets users delete document requests. The SQL is
printed for manual execution in the Supabase SQL Editor; nothing is run.

Original: run-document-requests-delete-migration.js (node)

Usage:
    python run_document_requests_delete_migration.py
    python run_document_requests_delete_migration.py --root /path/to/docuflow
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

MIGRATION_FILE = DEFAULT_MIGRATIONS_DIR / "20250104000001_add_document_requests_delete_policy.sql"
TITLE = "Document Requests Delete Policy Migration"
FOOTER = "After running, you can delete document requests successfully!"


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Print the document requests delete-policy migration"
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

    ok = print_manual_migration(args.root / MIGRATION_FILE, title=TITLE, footer=FOOTER)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
