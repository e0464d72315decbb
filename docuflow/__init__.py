"""
Docuflow Operations Tooling

Shared library for the operator scripts that deploy, migrate and smoke-test
the Docuflow web application on Supabase.

Packages:
- core: Settings loaded from the environment
- utils: Logging, env files, subprocess, Supabase CLI, git, migrations,
  HTTP and database helpers

Usage:
    # Deploy the process-emails Edge Function
    python scripts/deploy/deploy_edge_function.py process-emails

    # Smoke-test a deployed Edge Function
    python scripts/testing/check_process_emails.py

Environment Variables:
    NEXT_PUBLIC_SUPABASE_URL / SUPABASE_URL: Supabase project URL
    SUPABASE_SERVICE_ROLE_KEY: Service role key (bypasses RLS)
    SUPABASE_PROJECT_REF: Project reference used by the CLI
    DATABASE_URL: Optional direct Postgres connection URL
"""

__version__ = "0.1.0"
