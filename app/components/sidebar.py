from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from config import AppConfig


@dataclass(frozen=True)
class SidebarState:
    view: str
    sample_requested: bool


NAV_ITEMS = [
    ("📊 Dashboard", "dashboard"),
    ("➕ Lançar Venda", "entry"),
    ("📋 Relatórios", "history"),
    ("🧠 IA Analista", "assistant"),
]


def render_sidebar(cfg: AppConfig) -> SidebarState:
    with st.sidebar:
        st.markdown("### 📊 Consórcio BI")
        st.caption("Acompanhamento de vendas de consórcio")

        labels = [l for l, _ in NAV_ITEMS]
        default_label = st.session_state.get("nav_label", labels[0])
        idx = labels.index(default_label) if default_label in labels else 0

        label = st.radio(
            "Nav",
            labels,
            index=idx,
            label_visibility="collapsed",
        )
        st.session_state["nav_label"] = label
        view = dict(NAV_ITEMS)[label]

        st.divider()
        sample_requested = st.button(
            "🗄️ Gerar Dados de Teste",
            use_container_width=True,
            help="Adiciona duas vendas de exemplo ao banco de dados.",
        )

        with st.expander("⚙️ Conexão", expanded=False):
            if cfg.demo_mode:
                st.markdown("**Modo demonstração** (tabela em memória)")
                st.caption("Os dados são perdidos quando o servidor reinicia.")
            else:
                st.markdown("**Supabase**")
                st.code(f"{cfg.supabase_url}\ntabela: {cfg.sales_table}", language="text")
            st.caption(f"IA: {'configurada' if cfg.gemini_api_key else 'indisponível'} ({cfg.gemini_model})")

    return SidebarState(view=view, sample_requested=sample_requested)
