"""
Docuflow Utility Library.

This package provides reusable helpers for the Docuflow operator scripts.

Modules:
--------
logging_setup
    Logging configuration utilities.
config
    .env.local loading and settings construction.
commands
    Subprocess helpers.
supabase_cli
    Supabase CLI wrapper (login, link, deploy, secrets).
git
    Git remote and push helpers.
migrations
    Migration file loading, statement splitting and manual instructions.
supabase_api
    HTTP client for RPC calls and Edge Function invocation.
edge_functions
    Edge Function response inspection.
database
    Direct SQL execution over DATABASE_URL.
"""

from docuflow.utils.logging_setup import configure_script_logging
from docuflow.utils.config import (
    build_settings,
    load_env_files,
    load_settings,
    mask_secret,
)
from docuflow.utils.commands import (
    CommandError,
    check_command,
    command_exists,
    run_command,
)
from docuflow.utils.migrations import (
    Migration,
    MigrationError,
    load_migration,
    resolve_migration_path,
    split_statements,
)
from docuflow.utils.supabase_api import (
    RpcUnavailableError,
    SupabaseAPIError,
    SupabaseClient,
)

__all__ = [
    # logging_setup
    "configure_script_logging",
    # config
    "build_settings",
    "load_env_files",
    "load_settings",
    "mask_secret",
    # commands
    "CommandError",
    "check_command",
    "command_exists",
    "run_command",
    # migrations
    "Migration",
    "MigrationError",
    "load_migration",
    "resolve_migration_path",
    "split_statements",
    # supabase_api
    "RpcUnavailableError",
    "SupabaseAPIError",
    "SupabaseClient",
]
