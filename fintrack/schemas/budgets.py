"""
Pydantic schemas for budgets.

A budget caps spending for one category from a start date onwards.
budget_limit > 0 is enforced by a CHECK constraint in the database, not
here: an invalid limit comes back as the backend's constraint error.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Budget(BaseModel):
    """A row of the budgets table."""
    id: str = Field(..., description="Budget UUID")
    user_id: str = Field(..., description="Owner user UUID")
    category: str = Field(..., description="Spending category the budget applies to")
    budget_limit: float = Field(..., description="Maximum spend (numeric(12,2), > 0)")
    start_date: str = Field(..., description="ISO-8601 date the budget starts")
    created_at: str = Field(..., description="ISO-8601 timestamp when created")
    updated_at: str = Field(..., description="ISO-8601 timestamp of last update")


class BudgetCreateRequest(BaseModel):
    """New budget. id and timestamps are generated by the database."""
    user_id: str = Field(..., description="Owner user UUID (must equal auth.uid())")
    category: str = Field(..., examples=["Marketing"])
    budget_limit: float = Field(..., examples=[1200.00, 10.50])
    start_date: str = Field(..., examples=["2025-06-01"])


class BudgetUpdateRequest(BaseModel):
    """Partial budget update. Only explicitly set fields are sent."""
    category: Optional[str] = None
    budget_limit: Optional[float] = None
    start_date: Optional[str] = None
