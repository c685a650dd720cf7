from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol

from supabase import Client, create_client

from config import AppConfig, ConfigError
from data.memory_store import InMemoryTable
from data.query import Operation, Query, QueryResult


logger = logging.getLogger(__name__)


class Backend(Protocol):
    def execute(self, query: Query) -> QueryResult: ...


def _error_message(e: Exception) -> str:
    # postgrest.APIError carries the server message on `.message`
    msg = getattr(e, "message", None) or str(e)
    return msg or type(e).__name__


@dataclass(frozen=True)
class SupabaseBackend:
    client: Client

    def execute(self, query: Query) -> QueryResult:
        """
        Runs a Query through supabase-py.
        Client/HTTP exceptions come back as QueryResult.error, same as the in-memory table.
        """
        try:
            table = self.client.table(query.table)
            if query.operation == Operation.SELECT:
                req = table.select("*")
            elif query.operation == Operation.INSERT:
                req = table.insert(list(query.payload or ()))
            elif query.operation == Operation.UPDATE:
                req = table.update(query.payload or {})
            elif query.operation == Operation.DELETE:
                req = table.delete()
            else:
                raise ValueError(f"Unsupported operation: {query.operation}")

            for f in query.filters:
                req = req.eq(f.column, f.value)
            if query.order is not None:
                req = req.order(query.order.column, desc=not query.order.ascending)

            res = req.execute()
            return QueryResult(data=list(res.data or []))
        except Exception as e:
            return QueryResult(error=_error_message(e))


def _create_supabase_backend(cfg: AppConfig) -> SupabaseBackend:
    try:
        client = create_client(cfg.supabase_url, cfg.supabase_key)
    except Exception as e:
        raise ConfigError(f"Could not create the Supabase client: {type(e).__name__}: {e}") from e
    return SupabaseBackend(client=client)


def create_memory_backend(rows: Optional[list[dict[str, Any]]] = None) -> InMemoryTable:
    logger.warning("Supabase not connected (demo mode). Using the in-memory sales table; data is lost on restart.")
    return InMemoryTable(rows)


def get_backend(cfg: AppConfig) -> Backend:
    """
    Demo mode -> in-memory table. Otherwise Supabase; missing or unusable
    credentials raise ConfigError rather than falling back silently.
    """
    if cfg.demo_mode:
        return create_memory_backend()
    cfg.validate()
    return _create_supabase_backend(cfg)
