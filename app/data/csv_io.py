"""
CSV import/export for the sales history ("Relatórios").

File shape (both directions):
    ID,Data,Consultor,Cliente,Tipo,Valor,Status
    <id>,2024-05-10,"Ana Silva","João Ferreira",Automóvel,80000.00,Aprovado

Import is lenient: the first line is a header and is ignored, blank lines are
skipped, and a row is kept only if it has a date, a consultant and a finite
value. Unknown product/status labels default to Automóvel / Pendente. The
id column is informational; every imported sale gets a fresh id.
"""
from __future__ import annotations

import math
import re
from datetime import date
from typing import Iterable, Optional

from data.models import ConsortiumType, Sale, SaleStatus, new_sale_id


EXPORT_HEADERS = ["ID", "Data", "Consultor", "Cliente", "Tipo", "Valor", "Status"]

# Split on commas followed by an even number of quotes up to end of line,
# i.e. commas that are not inside a quoted field.
_SPLIT_RE = re.compile(r',(?=(?:(?:[^"]*"){2})*[^"]*$)')

_TYPES_BY_LABEL = {t.value: t for t in ConsortiumType}
_STATUSES_BY_LABEL = {s.value: s for s in SaleStatus}


class CsvImportError(ValueError):
    pass


def split_line(line: str) -> list[str]:
    cols = _SPLIT_RE.split(line)
    return [_unquote(c.strip()) for c in cols]


def _unquote(col: str) -> str:
    if col.startswith('"'):
        col = col[1:]
    if col.endswith('"'):
        col = col[:-1]
    return col


def _parse_value(raw: str) -> Optional[float]:
    try:
        v = float(raw)
    except (TypeError, ValueError):
        return None
    return v if math.isfinite(v) else None


def parse_row(cols: list[str]) -> Optional[Sale]:
    """One split row -> Sale, or None if the row is not acceptable."""
    if len(cols) < 6:
        return None

    sale_date, consultant, client, type_label, value_raw = cols[1:6]
    status_label = cols[6] if len(cols) > 6 else ""

    value = _parse_value(value_raw)
    if not sale_date or not consultant or value is None:
        return None

    return Sale(
        id=new_sale_id(),
        consultant_name=consultant,
        client_name=client,
        type=_TYPES_BY_LABEL.get(type_label, ConsortiumType.AUTO),
        value=value,
        date=sale_date,
        status=_STATUSES_BY_LABEL.get(status_label, SaleStatus.PENDING),
    )


def parse_sales_csv(text: str) -> list[Sale]:
    lines = text.split("\n")
    sales = []
    for line in lines[1:]:
        if not line.strip():
            continue
        sale = parse_row(split_line(line))
        if sale is not None:
            sales.append(sale)
    return sales


def decode_upload(raw: bytes) -> str:
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise CsvImportError("Erro ao ler o arquivo CSV.") from e


def export_sales_csv(sales: Iterable[Sale]) -> str:
    lines = [",".join(EXPORT_HEADERS)]
    for s in sales:
        lines.append(
            ",".join(
                [
                    str(s.id),
                    s.date,
                    f'"{s.consultant_name}"',
                    f'"{s.client_name}"',
                    s.type_label,
                    f"{s.value:.2f}",
                    s.status_label,
                ]
            )
        )
    return "\n".join(lines)


def export_filename(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"relatorio_vendas_{today.isoformat()}.csv"
