"""
Immutable query descriptors.

A `Query` says what to run (operation, payload, equality filters, sort);
a backend's `execute(query)` says how. Builders return new descriptors, so a
partially built query can be shared and extended safely.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Optional


class Operation(str, Enum):
    SELECT = "select"
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class Filter:
    column: str
    value: Any


@dataclass(frozen=True)
class Order:
    column: str
    ascending: bool = True


@dataclass(frozen=True)
class QueryResult:
    data: Optional[list[dict[str, Any]]] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class Query:
    table: str
    operation: Operation
    # insert: tuple of rows; update: a single patch dict
    payload: Any = None
    filters: tuple[Filter, ...] = field(default_factory=tuple)
    order: Optional[Order] = None

    @classmethod
    def select(cls, table: str) -> "Query":
        return cls(table=table, operation=Operation.SELECT)

    @classmethod
    def insert(cls, table: str, rows: list[dict[str, Any]] | dict[str, Any]) -> "Query":
        if isinstance(rows, dict):
            rows = [rows]
        return cls(table=table, operation=Operation.INSERT, payload=tuple(dict(r) for r in rows))

    @classmethod
    def update(cls, table: str, patch: dict[str, Any]) -> "Query":
        return cls(table=table, operation=Operation.UPDATE, payload=dict(patch))

    @classmethod
    def delete(cls, table: str) -> "Query":
        return cls(table=table, operation=Operation.DELETE)

    def eq(self, column: str, value: Any) -> "Query":
        return replace(self, filters=self.filters + (Filter(column, value),))

    def order_by(self, column: str, ascending: bool = True) -> "Query":
        return replace(self, order=Order(column, ascending))

    def matches(self, row: dict[str, Any]) -> bool:
        """AND across all equality filters; no filters matches every row."""
        return all(row.get(f.column) == f.value for f in self.filters)
