"""
Pydantic schemas for investment records.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Investment(BaseModel):
    """A row of the investments table."""
    id: str = Field(..., description="Investment UUID")
    user_id: str = Field(..., description="Owner user UUID")
    type: str = Field(..., description="Kind of investment", examples=["Stocks", "Mutual Fund", "Crypto"])
    amount: float = Field(..., description="Amount invested")
    date: str = Field(..., description="ISO-8601 date of the investment")
    platform: str = Field(..., description="Broker or platform used")
    notes: Optional[str] = Field(None, description="Free-text notes")
    created_at: str = Field(..., description="ISO-8601 timestamp when created")
    updated_at: str = Field(..., description="ISO-8601 timestamp of last update")


class InvestmentCreateRequest(BaseModel):
    """New investment record. id and timestamps are generated by the database."""
    user_id: str = Field(..., description="Owner user UUID (must equal auth.uid())")
    type: str = Field(...)
    amount: float = Field(..., examples=[250.00])
    date: str = Field(..., examples=["2025-05-20"])
    platform: str = Field(...)
    notes: Optional[str] = Field(None)


class InvestmentUpdateRequest(BaseModel):
    """Partial investment update. Only explicitly set fields are sent."""
    type: Optional[str] = None
    amount: Optional[float] = None
    date: Optional[str] = None
    platform: Optional[str] = None
    notes: Optional[str] = None
