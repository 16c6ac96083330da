"""
Database client factory for Supabase.

Provides the service-role client used by all repositories. Rows are
accessed through PostgREST, so every request carries the configured
client timeout instead of waiting on the network indefinitely.
"""

from typing import Optional
from supabase import create_client, Client, ClientOptions

from .config import get_settings

# Module-level client cache
_service_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    Admin workflows write to users, trips and the verification ledger on
    behalf of other accounts, so they always use the service role.

    Returns:
        Supabase client configured with service role key
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
            options=ClientOptions(
                postgrest_client_timeout=settings.storage_timeout_seconds,
            ),
        )

    return _service_client


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _service_client
    _service_client = None
