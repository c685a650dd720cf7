from __future__ import annotations

from datetime import date

import streamlit as st

from components.narrative import render_page_intro
from config import AppConfig
from data.analytics import consultant_names, filter_sales, format_brl, to_frame
from data.connection import Backend
from data.csv_io import CsvImportError, decode_upload, export_filename, export_sales_csv, parse_sales_csv
from data.models import ConsortiumType, Sale, SaleStatus
from data.service import StorageError, bulk_insert, delete_sale, update_sale


TYPE_LABELS = [t.value for t in ConsortiumType]
STATUS_LABELS = [s.value for s in SaleStatus]

TABLE_COLUMNS = {
    "date": "Data",
    "consultant_name": "Consultor",
    "client_name": "Cliente",
    "type": "Tipo",
    "value": "Valor",
    "status": "Status",
}


def _flash(msg: str) -> None:
    st.session_state["flash"] = ("success", msg)
    st.rerun()


def _sale_label(s: Sale) -> str:
    return f"{s.date} · {s.consultant_name} → {s.client_name} · {format_brl(s.value)}"


def render(cfg: AppConfig, backend: Backend, sales: list[Sale]) -> None:
    render_page_intro("Relatórios", "Histórico de vendas com filtros, importação e exportação em CSV.")

    # --- filters ---
    c1, c2, c3 = st.columns([1, 1, 2])
    start = c1.date_input("De", value=None, format="DD/MM/YYYY")
    end = c2.date_input("Até", value=None, format="DD/MM/YYYY")
    consultant = c3.selectbox("Consultor", ["Todos"] + consultant_names(sales), index=0)

    filtered = filter_sales(
        sales,
        start=start.isoformat() if start else None,
        end=end.isoformat() if end else None,
        consultant=None if consultant == "Todos" else consultant,
    )
    st.caption(f"{len(filtered)} {'registro encontrado' if len(filtered) == 1 else 'registros encontrados'}")

    if filtered:
        df = to_frame(filtered)[list(TABLE_COLUMNS)].rename(columns=TABLE_COLUMNS)
        st.dataframe(
            df,
            hide_index=True,
            use_container_width=True,
            column_config={"Valor": st.column_config.NumberColumn(format="R$ %.2f")},
        )
    else:
        st.info("Nenhuma venda encontrada para os filtros selecionados.")

    st.download_button(
        "⬇️ Exportar CSV",
        data=export_sales_csv(filtered).encode("utf-8"),
        file_name=export_filename(date.today()),
        mime="text/csv",
        disabled=not filtered,
    )

    st.divider()
    _render_import(cfg, backend)

    # Only the rows the user can currently see are editable.
    if filtered:
        st.divider()
        _render_edit(cfg, backend, filtered)


def _render_import(cfg: AppConfig, backend: Backend) -> None:
    st.subheader("Importar CSV")
    st.caption("Colunas: ID, Data, Consultor, Cliente, Tipo, Valor, Status. A primeira linha é ignorada (cabeçalho).")
    upload = st.file_uploader("Arquivo CSV", type=["csv"], label_visibility="collapsed")
    if upload is None:
        return
    if not st.button("Importar vendas", key="import_btn"):
        return

    try:
        new_sales = parse_sales_csv(decode_upload(upload.getvalue()))
    except CsvImportError as e:
        st.error(str(e))
        return

    if not new_sales:
        st.warning("Nenhuma venda válida encontrada no arquivo. Verifique o formato.")
        return

    with st.spinner("Importando..."):
        try:
            bulk_insert(backend, new_sales, table=cfg.sales_table)
        except StorageError:
            st.error("Erro ao importar vendas.")
            return
    _flash(f"{len(new_sales)} vendas importadas com sucesso!")


def _render_edit(cfg: AppConfig, backend: Backend, sales: list[Sale]) -> None:
    st.subheader("Editar / excluir venda")
    by_id = {s.id: s for s in sales}
    sale_id = st.selectbox("Venda", list(by_id), format_func=lambda i: _sale_label(by_id[i]))
    sale = by_id[sale_id]

    with st.form(f"edit_{sale.id}"):
        c1, c2 = st.columns(2)
        consultant = c1.text_input("Consultor", value=sale.consultant_name)
        client = c2.text_input("Cliente", value=sale.client_name)

        c3, c4 = st.columns(2)
        type_idx = TYPE_LABELS.index(sale.type_label) if sale.type_label in TYPE_LABELS else 0
        type_label = c3.selectbox("Tipo", TYPE_LABELS, index=type_idx)
        value = c4.number_input("Valor (R$)", min_value=0.0, value=max(0.0, float(sale.value)), step=1000.0, format="%.2f")

        c5, c6 = st.columns(2)
        try:
            current_date = date.fromisoformat(sale.date)
        except (TypeError, ValueError):
            current_date = date.today()
        sale_date = c5.date_input("Data", value=current_date, format="DD/MM/YYYY")
        status_idx = STATUS_LABELS.index(sale.status_label) if sale.status_label in STATUS_LABELS else 0
        status_label = c6.selectbox("Status", STATUS_LABELS, index=status_idx)

        save = st.form_submit_button("Salvar alterações")

    if save:
        if not consultant.strip() or not client.strip():
            st.warning("Consultor e cliente são obrigatórios.")
            return
        updated = Sale(
            id=sale.id,
            consultant_name=consultant.strip(),
            client_name=client.strip(),
            type=ConsortiumType(type_label),
            value=float(value),
            date=sale_date.isoformat(),
            status=SaleStatus(status_label),
        )
        try:
            update_sale(backend, updated, table=cfg.sales_table)
        except StorageError:
            st.error("Erro ao atualizar venda.")
            return
        _flash("Venda atualizada com sucesso!")

    confirm = st.checkbox("Confirmo a exclusão desta venda", key=f"confirm_{sale.id}")
    if st.button("🗑️ Excluir venda", disabled=not confirm, key=f"delete_{sale.id}"):
        try:
            delete_sale(backend, sale.id, table=cfg.sales_table)
        except StorageError:
            st.error("Erro ao excluir venda.")
            return
        _flash("Venda excluída.")
