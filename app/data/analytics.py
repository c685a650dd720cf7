from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import pandas as pd

from data.models import Sale


COLUMNS = ["id", "date", "consultant_name", "client_name", "type", "value", "status"]


@dataclass(frozen=True)
class SalesKpis:
    total_volume: float
    total_count: int
    avg_ticket: float
    top_consultant: str


def to_frame(sales: Sequence[Sale]) -> pd.DataFrame:
    rows = [
        {
            "id": s.id,
            "date": s.date,
            "consultant_name": s.consultant_name,
            "client_name": s.client_name,
            "type": s.type_label,
            "value": float(s.value),
            "status": s.status_label,
        }
        for s in sales
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def filter_sales(
    sales: Sequence[Sale],
    start: Optional[str] = None,
    end: Optional[str] = None,
    consultant: Optional[str] = None,
) -> list[Sale]:
    """Inclusive ISO date range + exact consultant match; unset bounds are ignored."""
    out = []
    for s in sales:
        if start and s.date < start:
            continue
        if end and s.date > end:
            continue
        if consultant and s.consultant_name != consultant:
            continue
        out.append(s)
    return out


def consultant_names(sales: Sequence[Sale]) -> list[str]:
    return sorted({s.consultant_name for s in sales if s.consultant_name})


def compute_kpis(sales: Sequence[Sale]) -> SalesKpis:
    df = to_frame(sales)
    total = float(df["value"].sum()) if len(df) else 0.0
    count = int(len(df))
    top = "N/A"
    if count:
        # First seen in list order wins ties.
        by_consultant = df.groupby("consultant_name", sort=False)["value"].sum()
        if by_consultant.max() > 0:
            top = str(by_consultant.idxmax())
    return SalesKpis(
        total_volume=total,
        total_count=count,
        avg_ticket=total / count if count else 0.0,
        top_consultant=top,
    )


def volume_by_type(sales: Sequence[Sale]) -> pd.DataFrame:
    df = to_frame(sales)
    return df.groupby("type", as_index=False)["value"].sum()


def volume_by_consultant(sales: Sequence[Sale]) -> pd.DataFrame:
    df = to_frame(sales)
    return (
        df.groupby("consultant_name", as_index=False)["value"]
        .sum()
        .sort_values("value", ascending=False)
        .reset_index(drop=True)
    )


def volume_over_time(sales: Sequence[Sale]) -> pd.DataFrame:
    """Daily volume, oldest day first. Rows with unparseable dates are dropped."""
    df = to_frame(sales)
    df["date"] = pd.to_datetime(df["date"], errors="coerce")
    df = df.dropna(subset=["date"])
    return df.groupby("date", as_index=False)["value"].sum().sort_values("date").reset_index(drop=True)


def format_brl(v: float) -> str:
    # pt-BR: thousands with ".", decimals with ","
    s = f"{v:,.2f}"
    return "R$ " + s.replace(",", "_").replace(".", ",").replace("_", ".")
