"""
Routing only.

All view logic lives in app/views/.
All env reads happen ONLY in config.py.
"""

from __future__ import annotations

import os
import sys

# Make `app/` importable as a flat module path when running:
#   streamlit run app/app.py
APP_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(APP_DIR, ".."))
for p in [APP_DIR, REPO_ROOT]:
    if p not in sys.path:
        sys.path.insert(0, p)

import streamlit as st  # noqa: E402

from components.header import render_header  # noqa: E402
from components.sidebar import render_sidebar  # noqa: E402
from components.styles import APP_TITLE, apply_theme  # noqa: E402
from config import AppConfig, ConfigError, configure_logging, get_config  # noqa: E402
from data.connection import Backend, get_backend  # noqa: E402
from data.mock_data import random_sales  # noqa: E402
from data.service import StorageError, bulk_insert, generate_sample_data, list_sales  # noqa: E402

from views import assistant, dashboard, entry, history  # noqa: E402


@st.cache_resource(show_spinner=False)
def _backend(cfg: AppConfig) -> Backend:
    # One backend (and, in demo mode, one in-memory table) per server process.
    backend = get_backend(cfg)
    if cfg.demo_mode and cfg.demo_seed_rows:
        bulk_insert(backend, random_sales(cfg.demo_seed_rows), table=cfg.sales_table)
    return backend


def _show_flash() -> None:
    flash = st.session_state.pop("flash", None)
    if flash:
        kind, msg = flash
        getattr(st, kind, st.info)(msg)


def main() -> None:
    apply_theme()
    try:
        cfg = get_config()
        configure_logging(cfg)
        backend = _backend(cfg)
    except (ConfigError, StorageError) as e:
        st.error(f"Configuração inválida: {e}")
        st.stop()

    # ?mode=consultant -> entry form only (external data entry)
    if st.query_params.get("mode") == "consultant":
        render_header(APP_TITLE, "Área do Consultor", right_pill="Cadastro de vendas")
        _show_flash()
        entry.render(cfg, backend, standalone=True)
        return

    state = render_sidebar(cfg)
    if state.sample_requested:
        with st.spinner("Gerando dados de teste..."):
            created = generate_sample_data(backend, table=cfg.sales_table)
        if created:
            st.session_state["flash"] = ("success", f"{len(created)} vendas de exemplo adicionadas.")
        else:
            st.session_state["flash"] = ("error", "Erro ao gerar dados.")

    render_header(
        app_name=APP_TITLE,
        subtitle="Acompanhamento de vendas de consórcio",
        right_pill=f"Dados: {'Demonstração (memória)' if cfg.demo_mode else 'Supabase'}",
    )
    _show_flash()

    # Re-read on every run: the list is last-fetched state, never patched locally.
    with st.spinner("Sincronizando dados..."):
        sales = list_sales(backend, table=cfg.sales_table)

    # Routing only
    if state.view == "dashboard":
        dashboard.render(cfg, backend, sales)
    elif state.view == "entry":
        entry.render(cfg, backend)
    elif state.view == "history":
        history.render(cfg, backend, sales)
    elif state.view == "assistant":
        assistant.render(cfg, backend, sales)
    else:
        st.error("Unknown view")


if __name__ == "__main__":
    main()
