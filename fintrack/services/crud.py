"""
Table-level helpers shared by the entity services.

CRITICAL RULES:
1. One backend round-trip per helper call
2. Backend errors are captured into QueryResult.error, never raised or wrapped
3. RLS enforces ownership; these helpers only add the owner filter for lists
4. No retries, no caching, no validation beyond the database's own
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar, Union, cast

from pydantic import BaseModel, TypeAdapter
from supabase import Client

from fintrack.db.results import BACKEND_ERRORS, QueryResult, log_backend_error, no_rows_error

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

Record = Union[BaseModel, Mapping[str, Any]]

# Columns the database owns; never sent on insert or update
SERVER_FIELDS = ("id", "created_at", "updated_at")

_MAPPING_ADAPTER = TypeAdapter(Dict[str, Any])


def to_payload(record: Record, partial: bool = False) -> Dict[str, Any]:
    """
    Convert a request model or mapping into the JSON body sent to Supabase.

    For partial updates only explicitly set fields are kept, so a field
    set to None is cleared while an omitted field is left untouched.
    Mapping values (dates, Decimals, ...) are converted to JSON-native
    types the same way model fields are.
    """
    if isinstance(record, BaseModel):
        if partial:
            payload = record.model_dump(mode="json", exclude_unset=True)
        else:
            payload = record.model_dump(mode="json", exclude_none=True)
    else:
        payload = _MAPPING_ADAPTER.dump_python(dict(record), mode="json")

    return {k: v for k, v in payload.items() if k not in SERVER_FIELDS}


async def list_rows(
    supabase_client: Client,
    table: str,
    model: Type[M],
    user_id: str,
    order_by: str,
    columns: str = "*",
) -> QueryResult[List[M]]:
    """
    Fetch every row of `table` owned by `user_id`, newest first by `order_by`.

    Security:
        - RLS enforces user_id = auth.uid(); asking for another user's
          id returns an empty list
    """
    logger.debug(f"Listing {table} for user {user_id} ordered by {order_by} desc")

    try:
        result = (
            supabase_client.table(table)
            .select(columns)
            .eq("user_id", user_id)
            .order(order_by, desc=True)
            .execute()
        )
    except BACKEND_ERRORS as e:
        log_backend_error(f"List {table}", e)
        return QueryResult(error=e)

    rows = cast(List[Dict[str, Any]], result.data or [])
    logger.info(f"Fetched {len(rows)} rows from {table} for user {user_id}")

    return QueryResult(data=[model.model_validate(row) for row in rows])


async def fetch_row(
    supabase_client: Client,
    table: str,
    model: Type[M],
    value: str,
    column: str = "id",
) -> QueryResult[M]:
    """Fetch the single row where `column` equals `value`; not-found is an error."""
    logger.debug(f"Fetching {table} row {column}={value}")

    try:
        result = (
            supabase_client.table(table)
            .select("*")
            .eq(column, value)
            .execute()
        )
    except BACKEND_ERRORS as e:
        log_backend_error(f"Fetch {table}", e)
        return QueryResult(error=e)

    if not result.data or len(result.data) == 0:
        logger.warning(f"No {table} row found for {column}={value}")
        return QueryResult(error=no_rows_error(table))

    return QueryResult(data=model.model_validate(result.data[0]))


async def insert_row(
    supabase_client: Client,
    table: str,
    model: Type[M],
    record: Record,
) -> QueryResult[M]:
    """
    Insert one row and return it as persisted (generated id and timestamps included).

    Constraint violations (e.g. budget_limit <= 0) and RLS rejections
    (user_id != auth.uid()) come back as the backend's PostgrestAPIError.
    """
    payload = to_payload(record)
    logger.info(f"Inserting into {table} for user {payload.get('user_id')}")

    try:
        result = supabase_client.table(table).insert(payload).execute()
    except BACKEND_ERRORS as e:
        log_backend_error(f"Insert into {table}", e)
        return QueryResult(error=e)

    if not result.data or len(result.data) == 0:
        logger.warning(f"Insert into {table} returned no data")
        return QueryResult(error=no_rows_error(table))

    created = model.model_validate(result.data[0])
    logger.info(f"Created {table} row {getattr(created, 'id', None)}")

    return QueryResult(data=created)


async def update_row(
    supabase_client: Client,
    table: str,
    model: Type[M],
    value: str,
    updates: Record,
    column: str = "id",
) -> QueryResult[M]:
    """
    Partially update the row where `column` equals `value`.

    Only the fields present in `updates` change; the database trigger
    refreshes updated_at. Zero matched rows (missing, or hidden by RLS)
    is reported as a not-found error.
    """
    payload = to_payload(updates, partial=True)
    logger.info(f"Updating {table} row {column}={value}: {list(payload.keys())}")

    try:
        result = (
            supabase_client.table(table)
            .update(payload)
            .eq(column, value)
            .execute()
        )
    except BACKEND_ERRORS as e:
        log_backend_error(f"Update {table}", e)
        return QueryResult(error=e)

    if not result.data or len(result.data) == 0:
        logger.warning(f"{table} row {column}={value} not found or not accessible")
        return QueryResult(error=no_rows_error(table))

    logger.info(f"{table} row {column}={value} updated successfully")

    return QueryResult(data=model.model_validate(result.data[0]))


async def delete_row(
    supabase_client: Client,
    table: str,
    value: str,
    column: str = "id",
) -> QueryResult[None]:
    """
    Delete the row where `column` equals `value`.

    Deleting a row that does not exist (or that RLS hides) is not an
    error: Supabase simply deletes nothing.
    """
    logger.info(f"Deleting {table} row {column}={value}")

    try:
        supabase_client.table(table).delete().eq(column, value).execute()
    except BACKEND_ERRORS as e:
        log_backend_error(f"Delete from {table}", e)
        return QueryResult(error=e)

    return QueryResult()


async def select_owned(
    supabase_client: Client,
    table: str,
    model: Type[M],
    user_id: str,
    columns: str,
    since: Optional[str] = None,
) -> QueryResult[List[M]]:
    """
    Select a column subset of the user's rows, optionally with date >= `since`.

    Unordered and unaggregated; used by the analytics queries.
    """
    logger.debug(f"Selecting '{columns}' from {table} for user {user_id} (since={since})")

    try:
        query = (
            supabase_client.table(table)
            .select(columns)
            .eq("user_id", user_id)
        )
        if since is not None:
            query = query.gte("date", since)
        result = query.execute()
    except BACKEND_ERRORS as e:
        log_backend_error(f"Select from {table}", e)
        return QueryResult(error=e)

    rows = cast(List[Dict[str, Any]], result.data or [])
    logger.info(f"Selected {len(rows)} rows from {table} for user {user_id}")

    return QueryResult(data=[model.model_validate(row) for row in rows])
