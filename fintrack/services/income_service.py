"""
Income persistence service.

CRITICAL RULES:
1. All operations MUST respect RLS (user_id = auth.uid())
2. Lists are ordered by income date, newest first
3. Errors are returned in QueryResult.error, never raised
"""

from typing import List, Union

from supabase import Client

from fintrack.db.results import QueryResult
from fintrack.schemas.income import Income, IncomeCreateRequest, IncomeUpdateRequest
from fintrack.services.crud import Record, delete_row, fetch_row, insert_row, list_rows, update_row
from fintrack.utils.constants import TABLES

INCOME_TABLE = TABLES['INCOME']


async def get_income(
    supabase_client: Client,
    user_id: str
) -> QueryResult[List[Income]]:
    """
    Fetch all income records for the user, newest date first.

    Args:
        supabase_client: Authenticated Supabase client
        user_id: The authenticated user's ID

    Returns:
        QueryResult with the list of Income rows (empty for a new account)

    Security:
        - RLS enforces user_id = auth.uid()
        - User can only access their own income
    """
    return await list_rows(supabase_client, INCOME_TABLE, Income, user_id, order_by="date")


async def get_income_by_id(
    supabase_client: Client,
    income_id: str
) -> QueryResult[Income]:
    """Fetch a single income record; a missing or foreign id yields a not-found error."""
    return await fetch_row(supabase_client, INCOME_TABLE, Income, income_id)


async def add_income(
    supabase_client: Client,
    income: Union[IncomeCreateRequest, Record]
) -> QueryResult[Income]:
    """
    Insert an income record.

    Args:
        supabase_client: Authenticated Supabase client
        income: Record without id/created_at/updated_at

    Returns:
        QueryResult holding the persisted row, including generated fields
    """
    return await insert_row(supabase_client, INCOME_TABLE, Income, income)


async def update_income(
    supabase_client: Client,
    income_id: str,
    updates: Union[IncomeUpdateRequest, Record]
) -> QueryResult[Income]:
    """Apply a partial update to one income record and return the updated row."""
    return await update_row(supabase_client, INCOME_TABLE, Income, income_id, updates)


async def delete_income(
    supabase_client: Client,
    income_id: str
) -> QueryResult[None]:
    """Delete one income record. Only the error status is returned."""
    return await delete_row(supabase_client, INCOME_TABLE, income_id)
