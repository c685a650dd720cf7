from __future__ import annotations

from datetime import date
from typing import Optional

import streamlit as st

from components.narrative import render_page_intro
from config import AppConfig
from data.connection import Backend
from data.models import ConsortiumType, Sale, SaleStatus, new_sale_id
from data.service import StorageError, insert_sale


TYPE_LABELS = [t.value for t in ConsortiumType]
STATUS_LABELS = [s.value for s in SaleStatus]


def validate_form(consultant: str, client: str, value: float) -> Optional[str]:
    """Returns a user-facing message for the first problem, or None."""
    if not consultant.strip():
        return "Informe o nome do consultor."
    if not client.strip():
        return "Informe o nome do cliente."
    if value < 0:
        return "O valor não pode ser negativo."
    return None


def render(cfg: AppConfig, backend: Backend, standalone: bool = False) -> None:
    if standalone:
        render_page_intro("Área do Consultor", "Portal exclusivo para cadastro de vendas.")
    else:
        render_page_intro("Nova Venda", "Registre uma nova venda de consórcio.")

    with st.form("sale_entry", clear_on_submit=True):
        c1, c2 = st.columns(2)
        consultant = c1.text_input("Consultor", placeholder="Nome do consultor")
        client = c2.text_input("Cliente", placeholder="Nome do cliente")

        c3, c4 = st.columns(2)
        type_label = c3.selectbox("Tipo de Consórcio", TYPE_LABELS, index=0)
        value = c4.number_input("Valor da Carta (R$)", min_value=0.0, step=1000.0, format="%.2f")

        c5, c6 = st.columns(2)
        sale_date = c5.date_input("Data da Venda", value=date.today(), format="DD/MM/YYYY")
        status_label = c6.selectbox("Status", STATUS_LABELS, index=0)

        submitted = st.form_submit_button("Salvar Venda", use_container_width=True)

    if not submitted:
        return

    problem = validate_form(consultant, client, value)
    if problem:
        st.warning(problem)
        return

    sale = Sale(
        id=new_sale_id(),
        consultant_name=consultant.strip(),
        client_name=client.strip(),
        type=ConsortiumType(type_label),
        value=float(value),
        date=sale_date.isoformat(),
        status=SaleStatus(status_label),
    )
    with st.spinner("Salvando..."):
        try:
            insert_sale(backend, sale, table=cfg.sales_table)
        except StorageError:
            st.error("Erro ao salvar venda. Tente novamente.")
            return

    st.session_state["flash"] = ("success", "Venda salva com sucesso!")
    st.rerun()
