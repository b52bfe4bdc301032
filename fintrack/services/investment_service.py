"""
Investment persistence service.

Investments are plain records of money put into a platform; no
valuation or returns are tracked.
"""

from typing import List, Union

from supabase import Client

from fintrack.db.results import QueryResult
from fintrack.schemas.investments import Investment, InvestmentCreateRequest, InvestmentUpdateRequest
from fintrack.services.crud import Record, delete_row, fetch_row, insert_row, list_rows, update_row
from fintrack.utils.constants import TABLES

INVESTMENTS_TABLE = TABLES['INVESTMENTS']


async def get_investments(
    supabase_client: Client,
    user_id: str
) -> QueryResult[List[Investment]]:
    """
    Fetch all investments for the user, newest date first.

    Args:
        supabase_client: Authenticated Supabase client
        user_id: The authenticated user's ID

    Returns:
        QueryResult with the list of Investment rows
    """
    return await list_rows(supabase_client, INVESTMENTS_TABLE, Investment, user_id, order_by="date")


async def get_investment_by_id(
    supabase_client: Client,
    investment_id: str
) -> QueryResult[Investment]:
    """Fetch a single investment; a missing or foreign id yields a not-found error."""
    return await fetch_row(supabase_client, INVESTMENTS_TABLE, Investment, investment_id)


async def add_investment(
    supabase_client: Client,
    investment: Union[InvestmentCreateRequest, Record]
) -> QueryResult[Investment]:
    return await insert_row(supabase_client, INVESTMENTS_TABLE, Investment, investment)


async def update_investment(
    supabase_client: Client,
    investment_id: str,
    updates: Union[InvestmentUpdateRequest, Record]
) -> QueryResult[Investment]:
    """Apply a partial update to one investment and return the updated row."""
    return await update_row(supabase_client, INVESTMENTS_TABLE, Investment, investment_id, updates)


async def delete_investment(
    supabase_client: Client,
    investment_id: str
) -> QueryResult[None]:
    """Delete one investment. Only the error status is returned."""
    return await delete_row(supabase_client, INVESTMENTS_TABLE, investment_id)
