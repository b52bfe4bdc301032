"""
Pydantic schemas for the user profile.

Profiles are 1:1 with auth.users (profile.id = auth user id) and carry
the display name and user type chosen at sign-up.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

# The two kinds of accounts the tracker supports
UserType = Literal["freelancer", "e-commerce"]


class UserProfile(BaseModel):
    """A row of the user_profiles table."""
    id: str = Field(..., description="User UUID (from auth.users)")
    name: str = Field(..., description="Display name")
    user_type: UserType = Field(..., description="Account category", examples=["freelancer", "e-commerce"])
    created_at: str = Field(..., description="ISO-8601 timestamp when profile was created")
    updated_at: str = Field(..., description="ISO-8601 timestamp of last profile update")


class UserProfileUpdateRequest(BaseModel):
    """
    Partial profile update.

    Only fields explicitly set on the model are sent to Supabase.
    """
    name: Optional[str] = Field(None, description="Updated display name")
    user_type: Optional[UserType] = Field(None, description="Updated account category")
