# supabase_client.py - Supabase client initialization

from supabase import create_client, Client
from config import SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY, SUPABASE_ANON_KEY

# Global Supabase client instances
_supabase_admin: Client = None
_supabase_client: Client = None

def get_supabase_admin() -> Client:
    """
    Get Supabase client with service role key (admin privileges).
    Use for backend operations that require elevated permissions.
    """
    global _supabase_admin

    if _supabase_admin is None:
        if not SUPABASE_URL or not SUPABASE_SERVICE_ROLE_KEY:
            raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set in environment variables")

        _supabase_admin = create_client(SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY)

    return _supabase_admin

def get_supabase_client() -> Client:
    """
    Get Supabase client with anonymous key (limited permissions).
    Contact inquiries go through this one, same as the public web form.
    """
    global _supabase_client

    if _supabase_client is None:
        if not SUPABASE_URL or not SUPABASE_ANON_KEY:
            raise ValueError("SUPABASE_URL and SUPABASE_ANON_KEY must be set in environment variables")

        _supabase_client = create_client(SUPABASE_URL, SUPABASE_ANON_KEY)

    return _supabase_client

def get_table(table_name: str):
    """Get a reference to a Supabase table, preferring the anon client."""
    supabase = get_supabase_client() if SUPABASE_ANON_KEY else get_supabase_admin()
    return supabase.table(table_name)
