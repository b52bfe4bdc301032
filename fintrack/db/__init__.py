"""
Database access layer for fintrack.

All database operations MUST:
- Go through the shared Supabase client
- Respect Row Level Security (RLS): user_id = auth.uid()
- Return backend errors inside a result object instead of raising

DO NOT define table schemas or RLS policies here; they live in
supabase/migrations/.
"""

from .client import get_supabase_client, reset_supabase_client
from .results import BACKEND_ERRORS, MonthlyData, QueryResult

__all__ = [
    "get_supabase_client",
    "reset_supabase_client",
    "BACKEND_ERRORS",
    "MonthlyData",
    "QueryResult",
]
