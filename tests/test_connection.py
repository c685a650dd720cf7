# tests/test_connection.py

from dataclasses import replace
from unittest.mock import MagicMock

import pytest

from config import ConfigError
from data import connection
from data.connection import SupabaseBackend, get_backend
from data.memory_store import InMemoryTable
from data.query import Query


class FakeAPIError(Exception):
    def __init__(self, message):
        super().__init__(message)
        self.message = message


@pytest.fixture
def client():
    return MagicMock(name="supabase_client")


class TestSupabaseBackend:
    def test_select_with_filter_and_order(self, client):
        builder = client.table.return_value.select.return_value
        builder.eq.return_value = builder
        builder.order.return_value = builder
        builder.execute.return_value = MagicMock(data=[{"id": "a"}])

        res = SupabaseBackend(client).execute(
            Query.select("sales").eq("consultant_name", "Ana").order_by("date", ascending=False)
        )

        assert res.data == [{"id": "a"}]
        assert res.error is None
        client.table.assert_called_once_with("sales")
        client.table.return_value.select.assert_called_once_with("*")
        builder.eq.assert_called_once_with("consultant_name", "Ana")
        builder.order.assert_called_once_with("date", desc=True)

    def test_insert_sends_list_of_rows(self, client):
        client.table.return_value.insert.return_value.execute.return_value = MagicMock(data=[])
        SupabaseBackend(client).execute(Query.insert("sales", {"id": "a"}))
        client.table.return_value.insert.assert_called_once_with([{"id": "a"}])

    def test_update_and_delete_filter_by_id(self, client):
        table = client.table.return_value
        SupabaseBackend(client).execute(Query.update("sales", {"value": 1}).eq("id", "a"))
        table.update.assert_called_once_with({"value": 1})
        table.update.return_value.eq.assert_called_once_with("id", "a")

        SupabaseBackend(client).execute(Query.delete("sales").eq("id", "b"))
        table.delete.return_value.eq.assert_called_once_with("id", "b")

    def test_client_exceptions_become_errors(self, client):
        client.table.return_value.select.return_value.order.return_value.execute.side_effect = FakeAPIError(
            "JWT expired"
        )
        res = SupabaseBackend(client).execute(Query.select("sales").order_by("date"))
        assert res.data is None
        assert res.error == "JWT expired"


class TestGetBackend:
    def test_demo_mode_uses_memory_table_and_warns(self, app_config, caplog):
        backend = get_backend(app_config)
        assert isinstance(backend, InMemoryTable)
        assert "in-memory" in caplog.text

    def test_missing_credentials_raise(self, app_config):
        with pytest.raises(ConfigError):
            get_backend(replace(app_config, demo_mode=False))

    def test_uses_supabase_when_configured(self, app_config, monkeypatch):
        fake_client = object()
        create = MagicMock(return_value=fake_client)
        monkeypatch.setattr(connection, "create_client", create)
        cfg = replace(app_config, demo_mode=False, supabase_url="https://x.supabase.co", supabase_key="anon")

        backend = get_backend(cfg)

        assert isinstance(backend, SupabaseBackend)
        assert backend.client is fake_client
        create.assert_called_once_with("https://x.supabase.co", "anon")

    def test_client_construction_failure_is_a_config_error(self, app_config, monkeypatch):
        monkeypatch.setattr(connection, "create_client", MagicMock(side_effect=ValueError("Invalid URL")))
        cfg = replace(app_config, demo_mode=False, supabase_url="not-a-url", supabase_key="anon")
        with pytest.raises(ConfigError, match="Invalid URL"):
            get_backend(cfg)
