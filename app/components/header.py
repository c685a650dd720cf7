from __future__ import annotations

import streamlit as st


def render_header(app_name: str, subtitle: str, right_pill: str) -> None:
    st.markdown(
        f"""
<div class="bi-header">
  <div>
    <div class="bi-title">📊 {app_name}</div>
    <div class="bi-subtitle">{subtitle}</div>
  </div>
  <div class="pill"><span class="dot"></span>{right_pill}</div>
</div>
        """,
        unsafe_allow_html=True,
    )
