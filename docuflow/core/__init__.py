"""
Docuflow Core Package

This package contains configuration shared by the Docuflow scripts.

Modules:
- settings: Typed settings read from environment variables

Environment Variables:
    NEXT_PUBLIC_SUPABASE_URL: Supabase project URL (preferred)
    SUPABASE_URL: Supabase project URL (fallback)
    SUPABASE_SERVICE_ROLE_KEY: Service role key
"""
