"""
Expense persistence service.

Expenses are listed by date (newest first). The category column also
feeds the expenses-by-category analytics query.
"""

from typing import List, Union

from supabase import Client

from fintrack.db.results import QueryResult
from fintrack.schemas.expenses import Expense, ExpenseCreateRequest, ExpenseUpdateRequest
from fintrack.services.crud import Record, delete_row, fetch_row, insert_row, list_rows, update_row
from fintrack.utils.constants import TABLES

EXPENSES_TABLE = TABLES['EXPENSES']


async def get_expenses(
    supabase_client: Client,
    user_id: str
) -> QueryResult[List[Expense]]:
    """
    Fetch all expenses for the user, newest date first.

    Security:
        - RLS enforces user_id = auth.uid()
    """
    return await list_rows(supabase_client, EXPENSES_TABLE, Expense, user_id, order_by="date")


async def get_expense_by_id(
    supabase_client: Client,
    expense_id: str
) -> QueryResult[Expense]:
    return await fetch_row(supabase_client, EXPENSES_TABLE, Expense, expense_id)


async def add_expense(
    supabase_client: Client,
    expense: Union[ExpenseCreateRequest, Record]
) -> QueryResult[Expense]:
    """Insert an expense and return the persisted row."""
    return await insert_row(supabase_client, EXPENSES_TABLE, Expense, expense)


async def update_expense(
    supabase_client: Client,
    expense_id: str,
    updates: Union[ExpenseUpdateRequest, Record]
) -> QueryResult[Expense]:
    """Apply a partial update to one expense and return the updated row."""
    return await update_row(supabase_client, EXPENSES_TABLE, Expense, expense_id, updates)


async def delete_expense(
    supabase_client: Client,
    expense_id: str
) -> QueryResult[None]:
    return await delete_row(supabase_client, EXPENSES_TABLE, expense_id)
