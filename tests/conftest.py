# tests/conftest.py

import pytest

from config import AppConfig
from data.memory_store import InMemoryTable
from data.models import ConsortiumType, Sale, SaleStatus
from data.query import QueryResult


def make_sale(**overrides) -> Sale:
    fields = dict(
        id="sale-1",
        consultant_name="Ana Silva",
        client_name="João Ferreira",
        type=ConsortiumType.AUTO,
        value=80000.0,
        date="2024-05-10",
        status=SaleStatus.APPROVED,
    )
    fields.update(overrides)
    return Sale(**fields)


class FailingBackend:
    """Backend whose every query comes back with an error."""

    def __init__(self, message: str = "relation \"sales\" does not exist"):
        self.message = message
        self.queries = []

    def execute(self, query):
        self.queries.append(query)
        return QueryResult(error=self.message)


class RaisingBackend:
    def execute(self, query):
        raise ConnectionError("network unreachable")


@pytest.fixture
def table():
    """A fresh in-memory table per test."""
    return InMemoryTable()


@pytest.fixture
def failing_backend():
    return FailingBackend()


@pytest.fixture
def app_config():
    return AppConfig(
        supabase_url=None,
        supabase_key=None,
        sales_table="sales",
        demo_mode=True,
        demo_seed_rows=0,
        gemini_api_key="test-key",
        gemini_model="gemini-test",
        insights_timeout=5.0,
        log_level="INFO",
    )


@pytest.fixture
def sample_sales():
    return [
        make_sale(id="a", consultant_name="Ana Silva", date="2024-05-10", value=450000.0,
                  type=ConsortiumType.HEAVY_MACHINERY),
        make_sale(id="b", consultant_name="Carlos Souza", date="2024-05-12", value=80000.0),
        make_sale(id="c", consultant_name="Ana Silva", date="2024-05-12", value=30000.0,
                  type=ConsortiumType.MOTORCYCLE, status=SaleStatus.PENDING),
        make_sale(id="d", consultant_name="Bruna Lima", date="2024-04-28", value=200000.0,
                  type=ConsortiumType.REAL_ESTATE, status=SaleStatus.CANCELLED),
    ]
