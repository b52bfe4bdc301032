"""
Pydantic schemas for fintrack records.

Row models mirror the Supabase tables. *CreateRequest models exclude the
server-generated fields (id, created_at, updated_at); *UpdateRequest
models make every field optional for partial updates.
"""

from .analytics import CategoryAmount, CategoryTotal, DatedAmount, MonthlySummary
from .budgets import Budget, BudgetCreateRequest, BudgetUpdateRequest
from .expenses import Expense, ExpenseCreateRequest, ExpenseUpdateRequest
from .income import Income, IncomeCreateRequest, IncomeUpdateRequest
from .investments import Investment, InvestmentCreateRequest, InvestmentUpdateRequest
from .profile import UserProfile, UserProfileUpdateRequest, UserType
from .savings import SavingsGoal, SavingsGoalCreateRequest, SavingsGoalUpdateRequest

__all__ = [
    "CategoryAmount",
    "CategoryTotal",
    "DatedAmount",
    "MonthlySummary",
    "Budget",
    "BudgetCreateRequest",
    "BudgetUpdateRequest",
    "Expense",
    "ExpenseCreateRequest",
    "ExpenseUpdateRequest",
    "Income",
    "IncomeCreateRequest",
    "IncomeUpdateRequest",
    "Investment",
    "InvestmentCreateRequest",
    "InvestmentUpdateRequest",
    "UserProfile",
    "UserProfileUpdateRequest",
    "UserType",
    "SavingsGoal",
    "SavingsGoalCreateRequest",
    "SavingsGoalUpdateRequest",
]
