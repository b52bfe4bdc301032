"""
Pydantic schemas for income records.

Income rows are money received by the user, tagged with a source
(client, marketplace, ...) and a category.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Income(BaseModel):
    """A row of the income table."""
    id: str = Field(..., description="Income UUID")
    user_id: str = Field(..., description="Owner user UUID")
    amount: float = Field(..., description="Amount received")
    source: str = Field(..., description="Where the money came from", examples=["Upwork", "Shopify payout"])
    date: str = Field(..., description="ISO-8601 date the money was received")
    category: str = Field(..., description="Income category")
    notes: Optional[str] = Field(None, description="Free-text notes")
    created_at: str = Field(..., description="ISO-8601 timestamp when created")
    updated_at: str = Field(..., description="ISO-8601 timestamp of last update")


class IncomeCreateRequest(BaseModel):
    """New income record. id and timestamps are generated by the database."""
    user_id: str = Field(..., description="Owner user UUID (must equal auth.uid())")
    amount: float = Field(..., examples=[1500.00])
    source: str = Field(...)
    date: str = Field(..., examples=["2025-06-01"])
    category: str = Field(...)
    notes: Optional[str] = Field(None)


class IncomeUpdateRequest(BaseModel):
    """Partial income update. Only explicitly set fields are sent."""
    amount: Optional[float] = None
    source: Optional[str] = None
    date: Optional[str] = None
    category: Optional[str] = None
    notes: Optional[str] = None
