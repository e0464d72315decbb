"""
Docuflow Migration Scripts

Scripts for applying SQL migrations to the Docuflow Supabase database.
Migration files live in supabase/migrations/ and are owned by the schema,
not by these scripts.

Scripts:
- run_migration.py: Execute a migration via exec_sql RPC (or DATABASE_URL),
  falling back to manual instructions
- show_migration.py: Print any migration with SQL Editor instructions
- run_document_requests_delete_migration.py: Print the delete-policy migration
- run_employee_directory_migration.py: Print the employee directory migration

Environment Variables:
    NEXT_PUBLIC_SUPABASE_URL / SUPABASE_URL: Project URL
    SUPABASE_SERVICE_ROLE_KEY: Service role key
    DATABASE_URL: Direct Postgres URL (run_migration.py --direct)
"""
