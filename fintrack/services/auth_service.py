"""
Supabase Auth operations for fintrack.

Every function delegates to the Supabase identity provider through the
shared client. The client keeps the session (access + refresh token)
internally; nothing here stores, refreshes or inspects tokens.

PRIVACY RULES:
- NEVER log passwords, tokens or email addresses
- Log user ids and backend error codes only
"""

from typing import Any, Optional

from supabase import Client

from fintrack.config import settings
from fintrack.db.results import BACKEND_ERRORS, QueryResult, log_backend_error
from fintrack.schemas.profile import UserType
from fintrack.utils.constants import OAUTH_PROVIDER_GOOGLE
from fintrack.utils.logging import get_logger

logger = get_logger(__name__)


def _user_id(response: Any) -> Optional[str]:
    user = getattr(response, "user", None)
    return getattr(user, "id", None)


async def sign_up(
    supabase_client: Client,
    email: str,
    password: str,
    name: str,
    user_type: UserType
) -> QueryResult[Any]:
    """
    Register a new account.

    The name and user type travel as user metadata; the database creates
    the matching user_profiles row from them. The confirmation email sends
    the user to settings.auth_redirect_url.

    Args:
        supabase_client: Shared Supabase client
        email: Account email
        password: Account password
        name: Display name stored on the profile
        user_type: "freelancer" or "e-commerce"

    Returns:
        QueryResult with the Supabase AuthResponse (user + session, session
        is None until the email is confirmed)
    """
    try:
        response = supabase_client.auth.sign_up({
            "email": email,
            "password": password,
            "options": {
                "data": {
                    "name": name,
                    "user_type": user_type,
                },
                "email_redirect_to": settings.auth_redirect_url,
            },
        })
    except BACKEND_ERRORS as e:
        log_backend_error("Sign up", e)
        return QueryResult(error=e)

    logger.info(f"Signed up user {_user_id(response)} (user_type={user_type})")
    return QueryResult(data=response)


async def sign_in_with_google(supabase_client: Client) -> QueryResult[Any]:
    """
    Start the Google OAuth flow.

    Returns:
        QueryResult with the Supabase OAuthResponse; its `url` is where
        the caller must send the browser. Google redirects back to
        settings.auth_redirect_url.
    """
    try:
        response = supabase_client.auth.sign_in_with_oauth({
            "provider": OAUTH_PROVIDER_GOOGLE,
            "options": {
                "redirect_to": settings.auth_redirect_url,
            },
        })
    except BACKEND_ERRORS as e:
        log_backend_error("Google sign in", e)
        return QueryResult(error=e)

    logger.info("Google OAuth flow started")
    return QueryResult(data=response)


async def sign_in(
    supabase_client: Client,
    email: str,
    password: str
) -> QueryResult[Any]:
    """Authenticate with email and password; the session is kept by the client."""
    try:
        response = supabase_client.auth.sign_in_with_password({
            "email": email,
            "password": password,
        })
    except BACKEND_ERRORS as e:
        log_backend_error("Sign in", e)
        return QueryResult(error=e)

    logger.info(f"Signed in user {_user_id(response)}")
    return QueryResult(data=response)


async def sign_out(supabase_client: Client) -> QueryResult[None]:
    """End the current session. Only the error status is returned."""
    try:
        supabase_client.auth.sign_out()
    except BACKEND_ERRORS as e:
        log_backend_error("Sign out", e)
        return QueryResult(error=e)

    logger.info("Signed out")
    return QueryResult()


async def get_current_user(supabase_client: Client) -> QueryResult[Any]:
    """
    Return the currently authenticated user.

    Returns:
        QueryResult whose data is the Supabase User, or None when no one
        is signed in
    """
    try:
        response = supabase_client.auth.get_user()
    except BACKEND_ERRORS as e:
        log_backend_error("Get current user", e)
        return QueryResult(error=e)

    user = getattr(response, "user", None) if response is not None else None
    return QueryResult(data=user)
