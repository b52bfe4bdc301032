"""
Analytics queries for the dashboard charts.

The two queries return raw rows; aggregation is the caller's job.
summarize_by_month() and totals_by_category() are pure helpers for
callers that want the usual chart shapes.
"""

import logging
from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, List, Optional

from supabase import Client

from fintrack.db.results import MonthlyData, QueryResult
from fintrack.schemas.analytics import CategoryAmount, CategoryTotal, DatedAmount, MonthlySummary
from fintrack.services.crud import select_owned
from fintrack.utils.constants import MONTHLY_WINDOW_MONTHS, TABLES
from fintrack.utils.dates import month_key, months_ago, to_iso_date

logger = logging.getLogger(__name__)


async def get_monthly_data(
    supabase_client: Client,
    user_id: str,
    today: Optional[date] = None
) -> MonthlyData:
    """
    Fetch income and expense (amount, date) pairs for the trailing six months.

    The window starts on the same calendar day six months before `today`
    (clamped to the end of shorter months) and includes that day.

    Two independent queries are issued one after the other. A failure in
    one does not stop the other; each side carries its own error and the
    results are returned uncombined.

    Args:
        supabase_client: Authenticated Supabase client
        user_id: The authenticated user's ID
        today: Reference date (defaults to date.today())

    Returns:
        MonthlyData with income_data/expense_data and their errors
    """
    since = to_iso_date(months_ago(MONTHLY_WINDOW_MONTHS, today))
    logger.info(f"Fetching monthly data for user {user_id} since {since}")

    income = await select_owned(
        supabase_client, TABLES['INCOME'], DatedAmount, user_id, "amount, date", since=since
    )
    expenses = await select_owned(
        supabase_client, TABLES['EXPENSES'], DatedAmount, user_id, "amount, date", since=since
    )

    return MonthlyData(
        income_data=income.data,
        expense_data=expenses.data,
        income_error=income.error,
        expense_error=expenses.error,
    )


async def get_expenses_by_category(
    supabase_client: Client,
    user_id: str
) -> QueryResult[List[CategoryAmount]]:
    """Fetch (category, amount) pairs for all of the user's expenses, unaggregated."""
    return await select_owned(
        supabase_client, TABLES['EXPENSES'], CategoryAmount, user_id, "category, amount"
    )


def summarize_by_month(monthly: MonthlyData) -> List[MonthlySummary]:
    """
    Fold MonthlyData into per-month income/expense/net totals, oldest month first.

    A side that failed (data is None) contributes nothing.
    """
    income_totals = _sum_by_month(monthly.income_data or [])
    expense_totals = _sum_by_month(monthly.expense_data or [])

    summaries = []
    for month in sorted(set(income_totals) | set(expense_totals)):
        income = round(income_totals.get(month, 0.0), 2)
        expenses = round(expense_totals.get(month, 0.0), 2)
        summaries.append(
            MonthlySummary(month=month, income=income, expenses=expenses, net=round(income - expenses, 2))
        )
    return summaries


def totals_by_category(rows: Iterable[CategoryAmount]) -> List[CategoryTotal]:
    """Sum expense amounts per category, largest total first."""
    totals: Dict[str, float] = defaultdict(float)
    for row in rows:
        totals[row.category] += row.amount

    ranked = sorted(totals.items(), key=lambda item: (-item[1], item[0]))
    return [CategoryTotal(category=category, total=round(total, 2)) for category, total in ranked]


def _sum_by_month(rows: Iterable[DatedAmount]) -> Dict[str, float]:
    totals: Dict[str, float] = defaultdict(float)
    for row in rows:
        totals[month_key(row.date)] += row.amount
    return totals
