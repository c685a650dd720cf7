from __future__ import annotations

from enum import Enum
from typing import Any, Type, Union

from data.models import ConsortiumType, Sale, SaleStatus


def _as_member(enum_cls: Type[Enum], raw: Any) -> Union[Enum, Any]:
    # No validation here: unknown labels pass through untouched.
    try:
        return enum_cls(raw)
    except (TypeError, ValueError):
        return raw


def _as_float(raw: Any) -> float:
    # Unparseable stored values read as 0.0.
    try:
        return float(raw or 0)
    except (TypeError, ValueError):
        return 0.0


def _label(v: Any) -> Any:
    return v.value if isinstance(v, Enum) else v


def to_domain(row: dict[str, Any]) -> Sale:
    return Sale(
        id=row.get("id"),
        consultant_name=row.get("consultant_name"),
        client_name=row.get("client_name"),
        type=_as_member(ConsortiumType, row.get("type")),
        value=_as_float(row.get("value")),
        date=row.get("date"),
        status=_as_member(SaleStatus, row.get("status")),
    )


def to_storage(sale: Sale) -> dict[str, Any]:
    row = {
        "id": sale.id,
        "consultant_name": sale.consultant_name,
        "client_name": sale.client_name,
        "type": _label(sale.type),
        "value": sale.value,
        "date": sale.date,
        "status": _label(sale.status),
    }
    if not sale.id:
        # Let the backend (or the in-memory table) assign one.
        del row["id"]
    return row
