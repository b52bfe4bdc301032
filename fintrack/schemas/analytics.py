"""
Pydantic schemas for analytics queries and their caller-side summaries.
"""

from pydantic import BaseModel, Field


class DatedAmount(BaseModel):
    """An (amount, date) pair selected from income or expenses."""
    amount: float
    date: str


class CategoryAmount(BaseModel):
    """A (category, amount) pair selected from expenses."""
    category: str
    amount: float


class MonthlySummary(BaseModel):
    """Income, expense and net totals for one calendar month."""
    month: str = Field(..., description="YYYY-MM", examples=["2025-06"])
    income: float = 0.0
    expenses: float = 0.0
    net: float = 0.0


class CategoryTotal(BaseModel):
    """Total spent in one category."""
    category: str
    total: float
