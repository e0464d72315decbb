"""
Docuflow Smoke-Test Scripts

Scripts that call deployed Edge Functions and report on the response.

Scripts:
- check_process_emails.py: Call one function and check errorDetails/errors
- verify_edge_functions.py: Check which functions are deployed
- check_oauth_env.py: Check the Microsoft OAuth and ENCRYPTION_KEY settings

Environment Variables:
    NEXT_PUBLIC_SUPABASE_URL / SUPABASE_URL: Project URL
    SUPABASE_SERVICE_ROLE_KEY: Service role key
"""
