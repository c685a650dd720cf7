from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from config import THEME


@dataclass(frozen=True)
class Kpi:
    label: str
    value: str
    help: Optional[str] = None


def render_kpi_row(kpis: list[Kpi]) -> None:
    cols = st.columns(len(kpis))
    for c, k in zip(cols, kpis):
        with c:
            help_html = f'<div class="metric-help">{k.help}</div>' if k.help else ""
            st.markdown(
                f"""
<div class="metric-card">
  <div class="metric-label">{k.label}</div>
  <div class="metric-value">{k.value}</div>
  {help_html}
</div>
                """,
                unsafe_allow_html=True,
            )


# Navy, red, light blue, then grays
COLORWAY = [THEME["navy_900"], THEME["accent_primary"], THEME["sky_500"], "#64748B", "#94A3B8"]


def apply_plotly_theme(fig: go.Figure, x_title: str = "", y_title: str = "", currency_axis: Optional[str] = None) -> go.Figure:
    fig.update_layout(
        margin=dict(l=10, r=10, t=44, b=10),
        font=dict(color=THEME["text_primary"]),
        paper_bgcolor=THEME["bg_card"],
        plot_bgcolor=THEME["bg_card"],
        colorway=COLORWAY,
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="left", x=0),
        title_font=dict(color=THEME["navy_900"], size=16),
        separators=",.",
    )
    fig.update_xaxes(title_text=x_title, gridcolor=THEME["grid"], zeroline=False)
    fig.update_yaxes(title_text=y_title, gridcolor=THEME["grid"], zeroline=False)
    if currency_axis == "x":
        fig.update_xaxes(tickprefix="R$ ", separatethousands=True)
    elif currency_axis == "y":
        fig.update_yaxes(tickprefix="R$ ", separatethousands=True)
    return fig


def bar_chart(df: pd.DataFrame, x: str, y: str, title: str = "", horizontal: bool = False) -> None:
    if horizontal:
        fig = px.bar(df, x=y, y=x, orientation="h", title=title)
        fig.update_yaxes(autorange="reversed")
        fig = apply_plotly_theme(fig, currency_axis="x")
    else:
        fig = px.bar(df, x=x, y=y, title=title)
        fig = apply_plotly_theme(fig, currency_axis="y")
    fig.update_traces(marker_color=THEME["navy_900"])
    st.plotly_chart(fig, use_container_width=True)


def pie_chart(df: pd.DataFrame, names: str, values: str, title: str = "") -> None:
    fig = px.pie(df, names=names, values=values, title=title, hole=0.45)
    fig = apply_plotly_theme(fig)
    st.plotly_chart(fig, use_container_width=True)


def line_chart(df: pd.DataFrame, x: str, y: str, title: str = "") -> None:
    fig = px.line(df, x=x, y=y, title=title, markers=True)
    fig = apply_plotly_theme(fig, currency_axis="y")
    fig.update_traces(line=dict(width=2, color=THEME["accent_primary"]))
    fig.update_xaxes(tickformat="%d/%m")
    st.plotly_chart(fig, use_container_width=True)
