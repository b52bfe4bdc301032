"""
Savings goal persistence service.

CRITICAL RULES:
1. Goals are listed by creation time (newest first), not by deadline
2. current_amount is whatever the user last saved; nothing recomputes it
3. RLS is enforced automatically via the Supabase client session
"""

from typing import List, Union

from supabase import Client

from fintrack.db.results import QueryResult
from fintrack.schemas.savings import SavingsGoal, SavingsGoalCreateRequest, SavingsGoalUpdateRequest
from fintrack.services.crud import Record, delete_row, fetch_row, insert_row, list_rows, update_row
from fintrack.utils.constants import TABLES

SAVINGS_TABLE = TABLES['SAVINGS']


async def get_savings_goals(
    supabase_client: Client,
    user_id: str
) -> QueryResult[List[SavingsGoal]]:
    """
    Fetch all savings goals for the user, most recently created first.

    Security:
        - RLS enforces user_id = auth.uid()
        - User can only access their own goals
    """
    return await list_rows(supabase_client, SAVINGS_TABLE, SavingsGoal, user_id, order_by="created_at")


async def get_savings_goal_by_id(
    supabase_client: Client,
    goal_id: str
) -> QueryResult[SavingsGoal]:
    return await fetch_row(supabase_client, SAVINGS_TABLE, SavingsGoal, goal_id)


async def add_savings_goal(
    supabase_client: Client,
    goal: Union[SavingsGoalCreateRequest, Record]
) -> QueryResult[SavingsGoal]:
    """
    Insert a savings goal.

    A goal created without a deadline is stored with deadline = NULL and
    current_amount defaults to 0.
    """
    return await insert_row(supabase_client, SAVINGS_TABLE, SavingsGoal, goal)


async def update_savings_goal(
    supabase_client: Client,
    goal_id: str,
    updates: Union[SavingsGoalUpdateRequest, Record]
) -> QueryResult[SavingsGoal]:
    """
    Apply a partial update to one savings goal.

    Typical use is recording progress: `{"current_amount": 1200}`.
    """
    return await update_row(supabase_client, SAVINGS_TABLE, SavingsGoal, goal_id, updates)


async def delete_savings_goal(
    supabase_client: Client,
    goal_id: str
) -> QueryResult[None]:
    return await delete_row(supabase_client, SAVINGS_TABLE, goal_id)
