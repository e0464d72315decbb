"""
Docuflow Deployment Scripts

This package contains scripts for deploying Docuflow to Supabase and
wiring up the repository.

Scripts:
- deploy_edge_function.py: Deploy Edge Functions with the Supabase CLI
- set_edge_function_secrets.py: Set ENCRYPTION_KEY and OAuth secrets
- setup_remote.py: Add or update the GitHub remote and push

Usage:

Deploy process-emails:
    python deploy_edge_function.py

Deploy the validation functions:
    python deploy_edge_function.py validate-document send-renewal-reminders

Environment Variables:
    SUPABASE_PROJECT_REF: Project reference to link
    ENCRYPTION_KEY: Token encryption key pushed as a secret
"""
