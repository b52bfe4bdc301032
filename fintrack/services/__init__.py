"""
Service layer for fintrack.

One async function per entity-operation pair, each a single call-through
to Supabase under RLS, plus auth, analytics and CSV export helpers.

Every data function takes the Supabase client first and returns a
QueryResult (or MonthlyData) instead of raising backend errors.
"""

from .analytics_service import (
    get_expenses_by_category,
    get_monthly_data,
    summarize_by_month,
    totals_by_category,
)
from .auth_service import (
    get_current_user,
    sign_in,
    sign_in_with_google,
    sign_out,
    sign_up,
)
from .budget_service import (
    add_budget,
    delete_budget,
    get_budget_by_id,
    get_budgets,
    update_budget,
)
from .expense_service import (
    add_expense,
    delete_expense,
    get_expense_by_id,
    get_expenses,
    update_expense,
)
from .export_service import export_to_csv, to_csv, write_csv
from .income_service import (
    add_income,
    delete_income,
    get_income,
    get_income_by_id,
    update_income,
)
from .investment_service import (
    add_investment,
    delete_investment,
    get_investment_by_id,
    get_investments,
    update_investment,
)
from .profile_service import get_user_profile, update_user_profile
from .savings_service import (
    add_savings_goal,
    delete_savings_goal,
    get_savings_goal_by_id,
    get_savings_goals,
    update_savings_goal,
)

__all__ = [
    "get_expenses_by_category",
    "get_monthly_data",
    "summarize_by_month",
    "totals_by_category",
    "get_current_user",
    "sign_in",
    "sign_in_with_google",
    "sign_out",
    "sign_up",
    "add_budget",
    "delete_budget",
    "get_budget_by_id",
    "get_budgets",
    "update_budget",
    "add_expense",
    "delete_expense",
    "get_expense_by_id",
    "get_expenses",
    "update_expense",
    "export_to_csv",
    "to_csv",
    "write_csv",
    "add_income",
    "delete_income",
    "get_income",
    "get_income_by_id",
    "update_income",
    "add_investment",
    "delete_investment",
    "get_investment_by_id",
    "get_investments",
    "update_investment",
    "get_user_profile",
    "update_user_profile",
    "add_savings_goal",
    "delete_savings_goal",
    "get_savings_goal_by_id",
    "get_savings_goals",
    "update_savings_goal",
]
