# =============================================================================
# tests/test_database.py - Supabase Gateway Tests
# =============================================================================
# Tests use a mocked Supabase client to check the query chains the gateway
# builds. Every mutation must carry eq("uid", ...).
# =============================================================================

from unittest.mock import MagicMock

import pytest
from postgrest.exceptions import APIError

from app.exceptions import DatabaseError
from lib.clients import ServiceContext
from lib.database import Database
from lib.filters import eq, is_null
from tests.conftest import make_settings


@pytest.fixture
def supabase():
    """Supabase client mock whose query builder returns itself."""
    client = MagicMock()
    query = client.table.return_value
    for method in ("select", "insert", "update", "delete", "eq", "is_", "lt", "order", "limit"):
        getattr(query, method).return_value = query
    query.execute.return_value = MagicMock(data=[{"id": "row-1"}])
    return client


@pytest.fixture
def database(supabase):
    return Database(ServiceContext(make_settings(), supabase=supabase))


def eq_calls(supabase):
    return [c.args for c in supabase.table.return_value.eq.call_args_list]


class TestOwnerScoping:
    """uid equality filter on every user-owned query."""

    def test_delete_filters_by_uid_and_target(self, database, supabase):
        database.delete("photo_avatars", uid="user-1", filters=[eq("id", "rec-1")], stage="delete photo_avatars")

        supabase.table.assert_called_with("photo_avatars")
        assert eq_calls(supabase) == [("uid", "user-1"), ("id", "rec-1")]

    def test_update_filters_by_uid(self, database, supabase):
        database.update(
            "videos",
            {"status": "error"},
            uid="user-1",
            filters=[eq("status", "generate"), is_null("url")],
            stage="update statuses",
        )

        supabase.table.return_value.update.assert_called_once_with({"status": "error"})
        assert eq_calls(supabase)[0] == ("uid", "user-1")
        supabase.table.return_value.is_.assert_called_once_with("url", "null")

    def test_blank_uid_rejected(self, database, supabase):
        with pytest.raises(ValueError):
            database.delete("voices", uid="", filters=[eq("id", "v-1")], stage="delete voice record")

        supabase.table.return_value.execute.assert_not_called()

    def test_select_orders_results(self, database, supabase):
        rows = database.select("videos", uid="user-1", order_by="created_at", descending=True, stage="select videos")

        supabase.table.return_value.order.assert_called_once_with("created_at", desc=True)
        assert rows == [{"id": "row-1"}]


class TestResults:
    """Interpretation of query responses."""

    def test_insert_returns_first_row(self, database, supabase):
        row = database.insert("videos", {"uid": "user-1"}, stage="insert videos")

        assert row == {"id": "row-1"}

    def test_insert_without_data(self, database, supabase):
        supabase.table.return_value.execute.return_value = MagicMock(data=[])

        assert database.insert("videos", {"uid": "user-1"}, stage="insert videos") is None

    def test_select_one_none_when_empty(self, database, supabase):
        supabase.table.return_value.execute.return_value = MagicMock(data=[])

        assert database.select_one("voices", uid="user-1", filters=[eq("id", "v-1")], stage="fetch voice") is None
        supabase.table.return_value.limit.assert_called_once_with(1)

    def test_api_error_becomes_database_error(self, database, supabase):
        supabase.table.return_value.execute.side_effect = APIError(
            {"message": "permission denied for table voices", "code": "42501"}
        )

        with pytest.raises(DatabaseError) as exc_info:
            database.delete("voices", uid="user-1", filters=[eq("id", "v-1")], stage="delete voice record")

        assert exc_info.value.message == "permission denied for table voices"
        assert exc_info.value.stage == "delete voice record"
