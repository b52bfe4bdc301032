"""
Supabase client factory.

The whole layer shares one Supabase client created with the project's
public (anon) key. Row Level Security does the rest:

1. NEVER use the service_role key from this layer
2. The signed-in user's session lives inside the client (supabase-py
   stores and refreshes it after sign_in / sign_up)
3. RLS policies enforce user_id = auth.uid() on every table
"""

import logging
from typing import Optional

from supabase import Client, create_client

from fintrack.config import settings

logger = logging.getLogger(__name__)

_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Get or create the process-wide Supabase client.

    Lazy initialization so importing fintrack never opens a connection.
    Queries made before a sign-in run as the anonymous role and RLS
    returns no rows for them.

    Returns:
        The shared Supabase client.

    Raises:
        ValueError: If SUPABASE_URL or SUPABASE_ANON_KEY is not configured.

    Example:
        >>> from fintrack.db import get_supabase_client
        >>> from fintrack.services import sign_in, get_income
        >>> client = get_supabase_client()
        >>> await sign_in(client, "me@example.com", "secret")
        >>> result = await get_income(client, user_id)
    """
    global _client

    if _client is None:
        if not settings.SUPABASE_URL or not settings.SUPABASE_ANON_KEY:
            raise ValueError(
                "SUPABASE_URL and SUPABASE_ANON_KEY must be configured "
                "before creating the Supabase client."
            )

        _client = create_client(
            supabase_url=settings.SUPABASE_URL,
            supabase_key=settings.SUPABASE_ANON_KEY
        )
        logger.debug("Created shared Supabase client (RLS enforced)")

    return _client


def reset_supabase_client() -> None:
    """Drop the cached client so the next call builds a fresh one."""
    global _client
    _client = None
