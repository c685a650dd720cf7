"""
Persistence gateway for the `sales` table.

Reads are best-effort: `list_sales` logs and returns [] on any backend
failure so views degrade to "no data". Writes are strict: they raise
StorageError so the caller can report the failure instead of confirming it.
"""
from __future__ import annotations

import logging
from typing import Sequence

from data.connection import Backend
from data.mapper import to_domain, to_storage
from data.mock_data import canned_sales
from data.models import Sale
from data.query import Query


logger = logging.getLogger(__name__)

SALES_TABLE = "sales"


class StorageError(RuntimeError):
    pass


def _run_write(backend: Backend, query: Query, action: str) -> None:
    try:
        result = backend.execute(query)
    except Exception as e:
        logger.error("Error %s: %s: %s", action, type(e).__name__, e)
        raise StorageError(f"Error {action}: {e}") from e
    if result.error is not None:
        logger.error("Error %s: %s", action, result.error)
        raise StorageError(f"Error {action}: {result.error}")


def list_sales(backend: Backend, table: str = SALES_TABLE) -> list[Sale]:
    """All sales, newest `date` first. Never raises."""
    try:
        res = backend.execute(Query.select(table).order_by("date", ascending=False))
    except Exception as e:
        logger.error("Error fetching sales: %s: %s", type(e).__name__, e)
        return []
    if res.error is not None:
        logger.error("Error fetching sales: %s", res.error)
        return []
    try:
        return [to_domain(r) for r in (res.data or [])]
    except Exception as e:
        logger.error("Error reading sales rows: %s: %s", type(e).__name__, e)
        return []


def bulk_insert(backend: Backend, sales: Sequence[Sale], table: str = SALES_TABLE) -> None:
    if not sales:
        return
    _run_write(backend, Query.insert(table, [to_storage(s) for s in sales]), "bulk saving sales")


def insert_sale(backend: Backend, sale: Sale, table: str = SALES_TABLE) -> None:
    _run_write(backend, Query.insert(table, to_storage(sale)), "adding sale")


def update_sale(backend: Backend, sale: Sale, table: str = SALES_TABLE) -> None:
    """Full-record replace keyed by `sale.id`. Matching no row is not an error."""
    if not sale.id:
        raise StorageError("Error updating sale: missing id")
    _run_write(backend, Query.update(table, to_storage(sale)).eq("id", sale.id), "updating sale")


def delete_sale(backend: Backend, sale_id: str, table: str = SALES_TABLE) -> None:
    _run_write(backend, Query.delete(table).eq("id", sale_id), "deleting sale")


def generate_sample_data(backend: Backend, table: str = SALES_TABLE) -> list[Sale]:
    """Insert the two canned example sales and return them; [] if the insert fails."""
    samples = canned_sales()
    try:
        bulk_insert(backend, samples, table=table)
    except StorageError:
        return []
    return samples
