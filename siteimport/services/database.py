"""
Database client and utilities
"""

from typing import Optional

from supabase import Client, create_client

from siteimport.config import Config

_supabase_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Get or create the service-role Supabase client (singleton pattern)

    Also used as a FastAPI dependency so tests can override it.
    """
    global _supabase_client

    if _supabase_client is None:
        Config.validate()
        _supabase_client = create_client(
            Config.SUPABASE_URL,
            Config.SUPABASE_SERVICE_ROLE_KEY,
        )

    return _supabase_client


def reset_supabase_client():
    """Reset the Supabase client (useful for testing)"""
    global _supabase_client
    _supabase_client = None
