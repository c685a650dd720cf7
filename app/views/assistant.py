"""
AI Analyst View
===============
One-click strategic report over the current sales list, generated by Gemini.

A click only raises the `analysis_running` flag and reruns, so the request
happens on a run where the button is already drawn disabled.
"""
from __future__ import annotations

from typing import Any, MutableMapping

import streamlit as st

from components.narrative import render_callout, render_page_intro
from config import AppConfig
from data.connection import Backend
from data.insights import NO_SALES_MESSAGE, InsightClient, get_insight_client
from data.models import Sale


def start_analysis(state: MutableMapping[str, Any]) -> None:
    state["analysis_running"] = True


def finish_analysis(state: MutableMapping[str, Any], client: InsightClient, sales: list[Sale]) -> None:
    try:
        state["analysis"] = client.generate(sales) if sales else NO_SALES_MESSAGE
    finally:
        state["analysis_running"] = False


def render(cfg: AppConfig, backend: Backend, sales: list[Sale]) -> None:
    render_page_intro(
        "Inteligência Artificial",
        "Use o Gemini para encontrar padrões e oportunidades nas suas vendas.",
    )

    client = get_insight_client(cfg)
    if not client.is_configured():
        render_callout(
            "IA Indisponível",
            "A chave de API do Google Gemini não foi detectada. Adicione <code>GEMINI_API_KEY</code> "
            "nas variáveis de ambiente para usar a IA Analista.",
            warn=True,
        )
        return

    state = st.session_state
    state.setdefault("analysis", "")
    state.setdefault("analysis_running", False)
    running = bool(state["analysis_running"])

    label = "🔄 Gerar Nova Análise" if state["analysis"] else "✨ Gerar Análise"
    if st.button(label, disabled=running) and not running:
        if not sales:
            state["analysis"] = NO_SALES_MESSAGE
        else:
            start_analysis(state)
            st.rerun()

    if running:
        with st.spinner("Analisando suas vendas..."):
            finish_analysis(state, client, sales)
        st.rerun()

    if state["analysis"]:
        with st.container(border=True):
            st.markdown(state["analysis"])
    else:
        st.caption(f"{len(sales)} vendas serão enviadas para análise (consultor, tipo, valor, status e data).")
