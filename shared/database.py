"""
Client factory for Supabase.

The mobile client signs users in with the public anon key; every
session coordinator shares one client so the auth session it holds is
the one used for profile reads and writes.
"""

from typing import Optional
from supabase import create_client, Client

from .config import get_settings

# Module-level client cache
_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Get the shared Supabase client.

    Returns:
        Supabase client configured with the anon key

    Raises:
        RuntimeError: If Supabase is not configured
    """
    global _client

    if _client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_anon_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_ANON_KEY environment variables."
            )
        _client = create_client(
            settings.supabase_url,
            settings.supabase_anon_key,
        )

    return _client


def reset_client_cache() -> None:
    """
    Reset the cached client.

    Useful for testing or when configuration changes.
    """
    global _client
    _client = None
