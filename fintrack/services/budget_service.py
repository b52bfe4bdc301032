"""
Budget persistence service.

CRITICAL RULES:
1. A budget caps spending for one category from start_date onwards
2. budget_limit > 0 is a database CHECK constraint; a violating insert or
   update returns the backend's constraint error (code 23514) unchanged
3. Lists are ordered by creation time, newest first
4. RLS is enforced automatically via the Supabase client session
"""

from typing import List, Union

from supabase import Client

from fintrack.db.results import QueryResult
from fintrack.schemas.budgets import Budget, BudgetCreateRequest, BudgetUpdateRequest
from fintrack.services.crud import Record, delete_row, fetch_row, insert_row, list_rows, update_row
from fintrack.utils.constants import TABLES

BUDGETS_TABLE = TABLES['BUDGETS']


async def get_budgets(
    supabase_client: Client,
    user_id: str
) -> QueryResult[List[Budget]]:
    """
    Fetch all budgets for the user, most recently created first.

    Args:
        supabase_client: Authenticated Supabase client
        user_id: The authenticated user's ID

    Returns:
        QueryResult with the list of Budget rows

    Security:
        - RLS enforces user_id = auth.uid()
        - User can only access their own budgets
    """
    return await list_rows(supabase_client, BUDGETS_TABLE, Budget, user_id, order_by="created_at")


async def get_budget_by_id(
    supabase_client: Client,
    budget_id: str
) -> QueryResult[Budget]:
    """Fetch a single budget; a missing or foreign id yields a not-found error."""
    return await fetch_row(supabase_client, BUDGETS_TABLE, Budget, budget_id)


async def add_budget(
    supabase_client: Client,
    budget: Union[BudgetCreateRequest, Record]
) -> QueryResult[Budget]:
    """
    Insert a budget.

    Args:
        supabase_client: Authenticated Supabase client
        budget: Record without id/created_at/updated_at

    Returns:
        QueryResult holding the persisted row, or the backend's
        check-constraint error when budget_limit <= 0
    """
    return await insert_row(supabase_client, BUDGETS_TABLE, Budget, budget)


async def update_budget(
    supabase_client: Client,
    budget_id: str,
    updates: Union[BudgetUpdateRequest, Record]
) -> QueryResult[Budget]:
    """Apply a partial update to one budget and return the updated row."""
    return await update_row(supabase_client, BUDGETS_TABLE, Budget, budget_id, updates)


async def delete_budget(
    supabase_client: Client,
    budget_id: str
) -> QueryResult[None]:
    """Delete one budget. Only the error status is returned."""
    return await delete_row(supabase_client, BUDGETS_TABLE, budget_id)
