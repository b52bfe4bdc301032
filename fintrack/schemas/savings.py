"""
Pydantic schemas for savings goals.

A savings goal has a target, an optional deadline and the amount saved
so far. Progress is updated by the user, not derived from other tables.
"""

from typing import Optional

from pydantic import BaseModel, Field


class SavingsGoal(BaseModel):
    """A row of the savings table."""
    id: str = Field(..., description="Savings goal UUID")
    user_id: str = Field(..., description="Owner user UUID")
    goal_name: str = Field(..., description="Goal name", examples=["Emergency fund", "New laptop"])
    target_amount: float = Field(..., description="Amount to reach")
    deadline: Optional[str] = Field(None, description="Optional ISO-8601 target date")
    current_amount: float = Field(0, description="Amount saved so far")
    notes: Optional[str] = Field(None, description="Free-text notes")
    created_at: str = Field(..., description="ISO-8601 timestamp when created")
    updated_at: str = Field(..., description="ISO-8601 timestamp of last update")


class SavingsGoalCreateRequest(BaseModel):
    """New savings goal. id and timestamps are generated by the database."""
    user_id: str = Field(..., description="Owner user UUID (must equal auth.uid())")
    goal_name: str = Field(...)
    target_amount: float = Field(..., examples=[5000.00])
    deadline: Optional[str] = Field(None, examples=["2026-01-01", None])
    current_amount: float = Field(0)
    notes: Optional[str] = Field(None)


class SavingsGoalUpdateRequest(BaseModel):
    """
    Partial savings goal update.

    Only explicitly set fields are sent, so `deadline=None` clears the
    deadline while leaving it out keeps the current one.
    """
    goal_name: Optional[str] = None
    target_amount: Optional[float] = None
    deadline: Optional[str] = None
    current_amount: Optional[float] = None
    notes: Optional[str] = None
