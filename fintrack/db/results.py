"""
Uniform result types returned by every service function.

Service functions never raise backend errors. They hand back the
payload and the backend's own error object side by side, and the
caller checks `error` before touching `data`.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union

import httpx
from supabase import AuthError, PostgrestAPIError

from fintrack.utils.constants import NO_ROWS_CODE

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Errors coming out of the backend SDK: PostgREST rejections (RLS,
# constraints, not-found), identity provider failures, and transport errors.
BackendError = Union[PostgrestAPIError, AuthError, httpx.HTTPError]
BACKEND_ERRORS = (PostgrestAPIError, AuthError, httpx.HTTPError)


@dataclass
class QueryResult(Generic[T]):
    """
    Payload plus error status of a single backend call.

    Attributes:
        data: The requested record(s); None for deletes and on failure
        error: The backend's error object, passed through unchanged
    """
    data: Optional[T] = None
    error: Optional[BackendError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class MonthlyData:
    """
    Trailing-window income and expense rows, kept uncombined.

    Each side is fetched by its own query, so each carries its own error.
    """
    income_data: Optional[List[Any]] = None
    expense_data: Optional[List[Any]] = None
    income_error: Optional[BackendError] = None
    expense_error: Optional[BackendError] = None

    @property
    def ok(self) -> bool:
        return self.income_error is None and self.expense_error is None


def no_rows_error(table: str) -> PostgrestAPIError:
    """Build the error PostgREST reports when a single-row request matches nothing."""
    return PostgrestAPIError({
        "code": NO_ROWS_CODE,
        "message": "JSON object requested, multiple (or no) rows returned",
        "details": f"The result contains 0 rows ({table})",
        "hint": None,
    })


def describe_error(error: BaseException) -> Dict[str, Any]:
    """Extract loggable code/message fields from any backend error."""
    code = getattr(error, "code", None) or getattr(error, "status", None)
    message = getattr(error, "message", None) or str(error)
    return {"kind": type(error).__name__, "code": code, "message": message}


def log_backend_error(operation: str, error: BaseException) -> None:
    info = describe_error(error)
    logger.warning(
        f"{operation} failed: kind={info['kind']}, code={info['code']}, message={info['message']}"
    )
