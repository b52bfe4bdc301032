"""
Pydantic schemas for expense records.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Expense(BaseModel):
    """A row of the expenses table."""
    id: str = Field(..., description="Expense UUID")
    user_id: str = Field(..., description="Owner user UUID")
    amount: float = Field(..., description="Amount spent")
    vendor: str = Field(..., description="Who was paid", examples=["AWS", "Canva"])
    date: str = Field(..., description="ISO-8601 date of the expense")
    category: str = Field(..., description="Spending category", examples=["Software", "Marketing"])
    notes: Optional[str] = Field(None, description="Free-text notes")
    created_at: str = Field(..., description="ISO-8601 timestamp when created")
    updated_at: str = Field(..., description="ISO-8601 timestamp of last update")


class ExpenseCreateRequest(BaseModel):
    """New expense record. id and timestamps are generated by the database."""
    user_id: str = Field(..., description="Owner user UUID (must equal auth.uid())")
    amount: float = Field(..., examples=[49.99])
    vendor: str = Field(...)
    date: str = Field(..., examples=["2025-06-03"])
    category: str = Field(...)
    notes: Optional[str] = Field(None)


class ExpenseUpdateRequest(BaseModel):
    """Partial expense update. Only explicitly set fields are sent."""
    amount: Optional[float] = None
    vendor: Optional[str] = None
    date: Optional[str] = None
    category: Optional[str] = None
    notes: Optional[str] = None
