from __future__ import annotations

import streamlit as st

from components.metrics import Kpi, bar_chart, line_chart, pie_chart, render_kpi_row
from components.narrative import render_page_intro
from config import AppConfig
from data.analytics import compute_kpis, format_brl, volume_by_consultant, volume_by_type, volume_over_time
from data.connection import Backend
from data.models import Sale


def render(cfg: AppConfig, backend: Backend, sales: list[Sale]) -> None:
    render_page_intro(
        "Visão Geral",
        "Acompanhe os indicadores chave de performance do escritório.",
    )

    kpis = compute_kpis(sales)
    render_kpi_row(
        [
            Kpi("Volume Total", format_brl(kpis.total_volume)),
            Kpi("Vendas Realizadas", f"{kpis.total_count}"),
            Kpi("Ticket Médio", format_brl(kpis.avg_ticket)),
            Kpi("Top Consultor", kpis.top_consultant, help="Maior volume vendido"),
        ]
    )

    st.divider()

    if not sales:
        st.info("Nenhuma venda registrada ainda. Lance uma venda ou importe um CSV em Relatórios.")
        return

    c1, c2 = st.columns(2)
    with c1:
        bar_chart(volume_by_consultant(sales), x="consultant_name", y="value", title="Vendas por Consultor", horizontal=True)
    with c2:
        pie_chart(volume_by_type(sales), names="type", values="value", title="Mix de Produtos")

    line_chart(volume_over_time(sales), x="date", y="value", title="Evolução de Vendas (diária)")
