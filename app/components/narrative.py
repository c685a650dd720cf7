from __future__ import annotations

import streamlit as st


def render_page_intro(title: str, body: str | None = None) -> None:
    st.markdown(
        f"""
<div class="page-intro-title">{title}</div>
{f'<div class="page-intro-body">{body}</div>' if body else ''}
        """,
        unsafe_allow_html=True,
    )


def render_callout(title: str, body: str, warn: bool = False) -> None:
    st.markdown(
        f"""
<div class="callout{' callout-warn' if warn else ''}">
  <div class="callout-title">{title}</div>
  <div class="callout-body">{body}</div>
</div>
        """,
        unsafe_allow_html=True,
    )
