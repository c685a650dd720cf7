# tests/test_service.py

import logging

import pytest

from data import service
from data.memory_store import InMemoryTable
from data.query import Operation
from data.service import (
    StorageError,
    bulk_insert,
    delete_sale,
    generate_sample_data,
    insert_sale,
    list_sales,
    update_sale,
)

from conftest import FailingBackend, RaisingBackend, make_sale


class TestListSales:
    def test_bulk_insert_then_list_is_date_descending_permutation(self, table, sample_sales):
        bulk_insert(table, sample_sales)
        listed = list_sales(table)

        assert sorted(s.id for s in listed) == sorted(s.id for s in sample_sales)
        dates = [s.date for s in listed]
        assert dates == sorted(dates, reverse=True)
        assert set(listed) == set(sample_sales)

    def test_repeated_listing_is_stable(self, table, sample_sales):
        bulk_insert(table, sample_sales)
        assert list_sales(table) == list_sales(table)

    def test_backend_error_returns_empty_and_logs(self, failing_backend, caplog):
        with caplog.at_level(logging.ERROR):
            assert list_sales(failing_backend) == []
        assert "Error fetching sales" in caplog.text

    def test_backend_exception_returns_empty(self):
        assert list_sales(RaisingBackend()) == []

    def test_uses_configured_table(self, failing_backend):
        list_sales(failing_backend, table="vendas")
        assert failing_backend.queries[0].table == "vendas"

    def test_malformed_stored_value_does_not_break_listing(self):
        table = InMemoryTable([{
            "id": "x", "consultant_name": "Ana", "client_name": "Bia", "type": "Moto",
            "value": "R$ 10", "date": "2024-05-10", "status": "Aprovado",
        }])
        [sale] = list_sales(table)
        assert sale.id == "x"
        assert sale.value == 0.0

    def test_row_mapping_failure_returns_empty_and_logs(self, table, sample_sales, monkeypatch, caplog):
        bulk_insert(table, sample_sales)

        def boom(row):
            raise KeyError("consultant_name")

        monkeypatch.setattr(service, "to_domain", boom)
        with caplog.at_level(logging.ERROR):
            assert list_sales(table) == []
        assert "Error reading sales rows" in caplog.text


class TestWrites:
    def test_insert_then_list(self, table):
        insert_sale(table, make_sale(id="x"))
        assert [s.id for s in list_sales(table)] == ["x"]

    def test_insert_without_id_gets_one(self, table):
        insert_sale(table, make_sale(id=""))
        [stored] = list_sales(table)
        assert stored.id

    def test_update_replaces_fields_by_id(self, table, sample_sales):
        bulk_insert(table, sample_sales)
        changed = make_sale(id="b", consultant_name="Carlos S.", value=1.5, date="2024-06-01")
        update_sale(table, changed)

        by_id = {s.id: s for s in list_sales(table)}
        assert by_id["b"] == changed
        assert by_id["a"] == sample_sales[0]

    def test_delete_then_list_never_returns_id(self, table, sample_sales):
        bulk_insert(table, sample_sales)
        delete_sale(table, "c")
        assert "c" not in {s.id for s in list_sales(table)}
        assert len(list_sales(table)) == 3

    def test_bulk_insert_of_nothing_skips_backend(self, failing_backend):
        bulk_insert(failing_backend, [])
        assert failing_backend.queries == []

    @pytest.mark.parametrize(
        "call",
        [
            lambda b: insert_sale(b, make_sale()),
            lambda b: bulk_insert(b, [make_sale()]),
            lambda b: update_sale(b, make_sale()),
            lambda b: delete_sale(b, "sale-1"),
        ],
    )
    def test_write_errors_propagate(self, call):
        backend = FailingBackend("permission denied for table sales")
        with pytest.raises(StorageError, match="permission denied"):
            call(backend)

    @pytest.mark.parametrize(
        "call",
        [
            lambda b: insert_sale(b, make_sale()),
            lambda b: bulk_insert(b, [make_sale()]),
            lambda b: update_sale(b, make_sale()),
            lambda b: delete_sale(b, "sale-1"),
        ],
    )
    def test_write_exceptions_become_storage_errors(self, call):
        with pytest.raises(StorageError, match="network unreachable") as excinfo:
            call(RaisingBackend())
        assert isinstance(excinfo.value.__cause__, ConnectionError)

    def test_update_filters_on_id(self, failing_backend):
        with pytest.raises(StorageError):
            update_sale(failing_backend, make_sale(id="abc"))
        [query] = failing_backend.queries
        assert query.operation == Operation.UPDATE
        assert [(f.column, f.value) for f in query.filters] == [("id", "abc")]


class TestSampleData:
    def test_inserts_and_returns_two_records(self, table):
        created = generate_sample_data(table)
        assert len(created) == 2
        assert {s.id for s in list_sales(table)} == {s.id for s in created}

    def test_repeated_calls_do_not_collide(self, table):
        generate_sample_data(table)
        generate_sample_data(table)
        ids = [s.id for s in list_sales(table)]
        assert len(ids) == len(set(ids)) == 4

    def test_returns_empty_on_failure(self, failing_backend):
        assert generate_sample_data(failing_backend) == []
