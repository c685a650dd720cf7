"""
In-memory stand-in for the hosted `sales` table.

Used in demo mode. Rows live only as long as the owning `InMemoryTable`
(one per process in the app, one per test in the suite). Executes the same
`Query` descriptors as the Supabase backend and, like it, reports failures
through `QueryResult.error` instead of raising.
"""
from __future__ import annotations

import logging
import threading
import uuid
from typing import Any, Iterable, Optional

from data.query import Operation, Query, QueryResult


logger = logging.getLogger(__name__)


def _random_id() -> str:
    return uuid.uuid4().hex


class InMemoryTable:
    def __init__(self, rows: Optional[Iterable[dict[str, Any]]] = None):
        self._rows: list[dict[str, Any]] = [dict(r) for r in (rows or [])]
        # Streamlit serves sessions on separate threads; update/delete are read-modify-write.
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)

    def snapshot(self) -> list[dict[str, Any]]:
        with self._lock:
            return [dict(r) for r in self._rows]

    def execute(self, query: Query) -> QueryResult:
        try:
            with self._lock:
                if query.operation == Operation.SELECT:
                    return QueryResult(data=self._select(query))
                if query.operation == Operation.INSERT:
                    return QueryResult(data=self._insert(query))
                if query.operation == Operation.UPDATE:
                    return QueryResult(data=self._update(query))
                if query.operation == Operation.DELETE:
                    return QueryResult(data=self._delete(query))
                raise ValueError(f"Unsupported operation: {query.operation}")
        except Exception as e:
            logger.error("In-memory %s on %r failed: %s", getattr(query.operation, "value", query.operation), query.table, e)
            return QueryResult(error=str(e) or type(e).__name__)

    def _select(self, query: Query) -> list[dict[str, Any]]:
        results = [dict(r) for r in self._rows if query.matches(r)]
        if query.order is not None:
            col = query.order.column
            # sort() is stable, so ties keep insertion order across repeated reads.
            results.sort(
                key=lambda r: ("" if r.get(col) is None else r.get(col)),
                reverse=not query.order.ascending,
            )
        return results

    def _insert(self, query: Query) -> list[dict[str, Any]]:
        inserted = []
        for row in query.payload or ():
            row = dict(row)
            if not row.get("id"):
                row["id"] = _random_id()
            self._rows.append(row)
            inserted.append(dict(row))
        return inserted

    def _update(self, query: Query) -> list[dict[str, Any]]:
        patch = query.payload or {}
        updated = []
        for row in self._rows:
            if query.matches(row):
                row.update(patch)
                updated.append(dict(row))
        return updated

    def _delete(self, query: Query) -> list[dict[str, Any]]:
        kept, removed = [], []
        for row in self._rows:
            (removed if query.matches(row) else kept).append(row)
        self._rows = kept
        return [dict(r) for r in removed]
