"""
User profile service.

Handles fetching and updating the user's row in user_profiles.
Profiles are 1:1 with auth.users: the profile id IS the auth user id,
and the row is created from the sign-up metadata (name, user_type).
"""

from typing import Union

from supabase import Client

from fintrack.db.results import QueryResult
from fintrack.schemas.profile import UserProfile, UserProfileUpdateRequest
from fintrack.services.crud import Record, fetch_row, update_row
from fintrack.utils.constants import TABLES

PROFILES_TABLE = TABLES['USER_PROFILES']


async def get_user_profile(
    supabase_client: Client,
    user_id: str
) -> QueryResult[UserProfile]:
    """
    Fetch the user's profile.

    The profile contains:
    - name (display name)
    - user_type ("freelancer" or "e-commerce")

    Args:
        supabase_client: Authenticated Supabase client
        user_id: The authenticated user's ID

    Returns:
        QueryResult with the profile, or a not-found error (PGRST116)
        when the profile row does not exist

    Security:
        - RLS enforces id = auth.uid()
        - User can only access their own profile
    """
    return await fetch_row(supabase_client, PROFILES_TABLE, UserProfile, user_id)


async def update_user_profile(
    supabase_client: Client,
    user_id: str,
    updates: Union[UserProfileUpdateRequest, Record]
) -> QueryResult[UserProfile]:
    """
    Update user profile fields.

    Args:
        supabase_client: Authenticated Supabase client
        user_id: The authenticated user's ID
        updates: Fields to update (name, user_type)

    Returns:
        QueryResult with the updated profile

    Security:
        - RLS enforces id = auth.uid()
        - id and timestamps are never sent, even if present in `updates`
    """
    return await update_row(supabase_client, PROFILES_TABLE, UserProfile, user_id, updates)
