"""
Tests for the per-entity CRUD services.

Every entity exposes the same five operations; these tests check that
each one targets the right table, orders lists by the right column and
returns typed rows.
"""

import pytest

from fintrack.schemas import Budget, Expense, Income, Investment, SavingsGoal
from fintrack.services import (
    add_budget,
    add_expense,
    add_income,
    add_investment,
    add_savings_goal,
    delete_budget,
    delete_expense,
    delete_income,
    delete_investment,
    delete_savings_goal,
    get_budget_by_id,
    get_budgets,
    get_expense_by_id,
    get_expenses,
    get_income,
    get_income_by_id,
    get_investment_by_id,
    get_investments,
    get_savings_goal_by_id,
    get_savings_goals,
    update_budget,
    update_expense,
    update_income,
    update_investment,
    update_savings_goal,
)

TIMESTAMPS = {
    "created_at": "2025-06-01T10:00:00Z",
    "updated_at": "2025-06-01T10:00:00Z",
}

ENTITIES = {
    "income": {
        "table": "income",
        "order_by": "date",
        "model": Income,
        "ops": (get_income, get_income_by_id, add_income, update_income, delete_income),
        "row": {
            "id": "inc-1", "user_id": "user-1", "amount": 1500.0, "source": "Upwork",
            "date": "2025-06-01", "category": "Freelance", "notes": "", **TIMESTAMPS,
        },
    },
    "expenses": {
        "table": "expenses",
        "order_by": "date",
        "model": Expense,
        "ops": (get_expenses, get_expense_by_id, add_expense, update_expense, delete_expense),
        "row": {
            "id": "exp-1", "user_id": "user-1", "amount": 49.99, "vendor": "Canva",
            "date": "2025-06-03", "category": "Software", "notes": "", **TIMESTAMPS,
        },
    },
    "investments": {
        "table": "investments",
        "order_by": "date",
        "model": Investment,
        "ops": (get_investments, get_investment_by_id, add_investment, update_investment, delete_investment),
        "row": {
            "id": "inv-1", "user_id": "user-1", "type": "Stocks", "amount": 250.0,
            "date": "2025-05-20", "platform": "Vanguard", "notes": "", **TIMESTAMPS,
        },
    },
    "savings": {
        "table": "savings",
        "order_by": "created_at",
        "model": SavingsGoal,
        "ops": (get_savings_goals, get_savings_goal_by_id, add_savings_goal, update_savings_goal, delete_savings_goal),
        "row": {
            "id": "sav-1", "user_id": "user-1", "goal_name": "Emergency fund", "target_amount": 5000.0,
            "deadline": None, "current_amount": 1200.0, "notes": "", **TIMESTAMPS,
        },
    },
    "budgets": {
        "table": "budgets",
        "order_by": "created_at",
        "model": Budget,
        "ops": (get_budgets, get_budget_by_id, add_budget, update_budget, delete_budget),
        "row": {
            "id": "bud-1", "user_id": "user-1", "category": "Marketing", "budget_limit": 300.0,
            "start_date": "2025-06-01", **TIMESTAMPS,
        },
    },
}


@pytest.fixture(params=list(ENTITIES))
def entity(request):
    return ENTITIES[request.param]


def _without_server_fields(row):
    return {k: v for k, v in row.items() if k not in ("id", "created_at", "updated_at")}


@pytest.mark.asyncio
async def test_list_targets_table_and_order(entity, supabase_client, make_response):
    list_op = entity["ops"][0]
    chain = supabase_client.table.return_value.select.return_value.eq.return_value.order.return_value
    chain.execute.return_value = make_response(data=[entity["row"]])

    result = await list_op(supabase_client, "user-1")

    supabase_client.table.assert_called_once_with(entity["table"])
    supabase_client.table.return_value.select.return_value.eq.return_value.order.assert_called_once_with(
        entity["order_by"], desc=True
    )
    assert result.error is None
    assert result.data == [entity["model"](**entity["row"])]


@pytest.mark.asyncio
async def test_get_by_id(entity, supabase_client, make_response):
    get_op = entity["ops"][1]
    supabase_client.table.return_value.select.return_value.eq.return_value.execute.return_value = (
        make_response(data=[entity["row"]])
    )

    result = await get_op(supabase_client, entity["row"]["id"])

    supabase_client.table.assert_called_once_with(entity["table"])
    assert result.data.id == entity["row"]["id"]


@pytest.mark.asyncio
async def test_create_then_list_contains_record(entity, supabase_client, make_response):
    """A created record shows up in the owner's list with the same fields."""
    add_op, list_op = entity["ops"][2], entity["ops"][0]
    new_record = _without_server_fields(entity["row"])

    supabase_client.table.return_value.insert.return_value.execute.return_value = make_response(
        data=[entity["row"]]
    )
    chain = supabase_client.table.return_value.select.return_value.eq.return_value.order.return_value
    chain.execute.return_value = make_response(data=[entity["row"]])

    created = await add_op(supabase_client, new_record)
    listed = await list_op(supabase_client, "user-1")

    supabase_client.table.return_value.insert.assert_called_once_with(new_record)
    assert created.error is None
    assert any(
        _without_server_fields(row.model_dump()) == _without_server_fields(created.data.model_dump())
        for row in listed.data
    )


@pytest.mark.asyncio
async def test_update_scoped_by_id(entity, supabase_client, make_response):
    update_op = entity["ops"][3]
    supabase_client.table.return_value.update.return_value.eq.return_value.execute.return_value = (
        make_response(data=[entity["row"]])
    )

    result = await update_op(supabase_client, entity["row"]["id"], {"id": "ignored", "user_id": "user-1"})

    supabase_client.table.return_value.update.assert_called_once_with({"user_id": "user-1"})
    supabase_client.table.return_value.update.return_value.eq.assert_called_once_with("id", entity["row"]["id"])
    assert result.data.id == entity["row"]["id"]


@pytest.mark.asyncio
async def test_delete_scoped_by_id(entity, supabase_client, make_response):
    delete_op = entity["ops"][4]
    supabase_client.table.return_value.delete.return_value.eq.return_value.execute.return_value = (
        make_response(data=[])
    )

    result = await delete_op(supabase_client, entity["row"]["id"])

    supabase_client.table.assert_called_once_with(entity["table"])
    supabase_client.table.return_value.delete.return_value.eq.assert_called_once_with("id", entity["row"]["id"])
    assert result.data is None
    assert result.error is None


@pytest.mark.asyncio
async def test_fetch_after_delete_is_not_found(entity, supabase_client, make_response):
    """Once deleted, a record fetched by id reports not-found, never a stale row."""
    get_op, delete_op = entity["ops"][1], entity["ops"][4]
    supabase_client.table.return_value.delete.return_value.eq.return_value.execute.return_value = (
        make_response(data=[entity["row"]])
    )
    supabase_client.table.return_value.select.return_value.eq.return_value.execute.return_value = (
        make_response(data=[])
    )

    deleted = await delete_op(supabase_client, entity["row"]["id"])
    fetched = await get_op(supabase_client, entity["row"]["id"])

    assert deleted.error is None
    assert fetched.data is None
    assert fetched.error.code == "PGRST116"
    supabase_client.table.return_value.select.return_value.eq.assert_called_once_with("id", entity["row"]["id"])


@pytest.mark.asyncio
async def test_other_users_rows_are_never_returned(entity, supabase_client, make_response):
    """RLS hides foreign rows: listing another user's id yields an empty list, not an error."""
    list_op = entity["ops"][0]
    chain = supabase_client.table.return_value.select.return_value.eq.return_value.order.return_value
    chain.execute.return_value = make_response(data=[])

    result = await list_op(supabase_client, "someone-else")

    assert result.error is None
    assert result.data == []
