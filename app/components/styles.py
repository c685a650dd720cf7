from __future__ import annotations

import streamlit as st

from config import THEME


APP_TITLE = "Consórcio BI"


def apply_theme() -> None:
    st.set_page_config(
        page_title=APP_TITLE,
        page_icon="📊",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    # Theme tokens (config.py) -> CSS variables
    radius = int(THEME["radius_px"])
    css = """
<style>
:root{
  --red-600: __RED_600__;
  --red-500: __RED_500__;
  --navy-900: __NAVY_900__;
  --navy-800: __NAVY_800__;

  --bg-primary: __BG_PRIMARY__;
  --bg-secondary: __BG_SECONDARY__;
  --card-bg: __CARD_BG__;
  --card-border: __CARD_BORDER__;

  --text-primary: __TEXT_PRIMARY__;
  --text-secondary: __TEXT_SECONDARY__;
  --shadow: __SHADOW__;
  --radius: __RADIUS_PX__px;
}

#MainMenu { visibility: hidden; }
footer { visibility: hidden; }

html, body, [data-testid="stAppViewContainer"]{
  background: var(--bg-primary) !important;
  color: var(--text-primary) !important;
}

[data-testid="stSidebar"]{
  background: var(--bg-secondary) !important;
  border-right: 1px solid var(--card-border) !important;
}

/* Sidebar nav: radio options rendered as buttons */
[data-testid="stSidebar"] div[role="radiogroup"] > label{
  border: 1px solid var(--card-border) !important;
  border-radius: 10px !important;
  padding: 10px 12px !important;
  margin: 0 0 8px 0 !important;
}
[data-testid="stSidebar"] div[role="radiogroup"] > label:has(input:checked){
  border-left: 4px solid var(--red-600) !important;
  background: #FEF2F4 !important;
}

.block-container{
  padding-top: 1rem !important;
  padding-bottom: 2rem !important;
}

/* Header bar */
.bi-header{
  display:flex;
  align-items:center;
  justify-content:space-between;
  background: var(--bg-secondary);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 10px 14px;
  margin: 0 0 14px 0;
}
.bi-title{
  font-size: 20px;
  font-weight: 700;
  color: var(--navy-900);
}
.bi-subtitle{
  font-size: 14px;
  color: var(--text-secondary);
}
.pill{
  display:inline-flex;
  align-items:center;
  gap:6px;
  border: 1px solid var(--card-border);
  border-radius: 999px;
  padding: 6px 10px;
  font-size: 13px;
  font-weight: 600;
  color: var(--navy-800);
}
.pill .dot{
  width:8px;
  height:8px;
  border-radius:999px;
  background: var(--red-600);
  display:inline-block;
}

/* KPI cards */
.metric-card{
  background: var(--card-bg);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 12px 14px;
}
.metric-label{
  font-size: 14px;
  font-weight: 500;
  color: var(--text-secondary);
  margin-bottom: 6px;
}
.metric-value{
  font-size: 24px;
  font-weight: 700;
  color: var(--navy-900);
}
.metric-help{
  margin-top: 4px;
  font-size: 12px;
  color: var(--text-secondary);
}

div.stButton > button, div.stFormSubmitButton > button, div.stDownloadButton > button{
  border-radius: 10px !important;
  font-weight: 600 !important;
  background: var(--red-600) !important;
  color: white !important;
  border: 1px solid transparent !important;
}
div.stButton > button:hover, div.stFormSubmitButton > button:hover{
  background: var(--red-500) !important;
}

div[data-testid="stPlotlyChart"]{
  background: var(--card-bg);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 8px 10px;
}

.page-intro-title{
  font-size: 24px;
  font-weight: 700;
  color: var(--navy-900);
}
.page-intro-body{
  font-size: 15px;
  color: var(--text-secondary);
  margin-bottom: 14px;
}

.callout{
  border: 1px solid var(--card-border);
  border-left: 4px solid var(--red-600);
  border-radius: var(--radius);
  background: #FFFFFF;
  padding: 12px 14px;
  margin: 10px 0;
}
.callout-title{
  font-size: 14px;
  font-weight: 700;
  color: var(--navy-900);
  margin-bottom: 6px;
}
.callout-body{
  font-size: 14px;
  color: var(--text-secondary);
}
.callout-warn{
  border-left-color: __WARNING__;
  background: #FFFBEB;
}
</style>
"""

    tokens = {
        "__RED_600__": str(THEME["accent_primary"]),
        "__RED_500__": str(THEME["accent_secondary"]),
        "__NAVY_900__": str(THEME["navy_900"]),
        "__NAVY_800__": str(THEME["navy_800"]),
        "__BG_PRIMARY__": str(THEME["bg_primary"]),
        "__BG_SECONDARY__": str(THEME["bg_secondary"]),
        "__CARD_BG__": str(THEME["bg_card"]),
        "__CARD_BORDER__": str(THEME["border_color"]),
        "__TEXT_PRIMARY__": str(THEME["text_primary"]),
        "__TEXT_SECONDARY__": str(THEME["text_secondary"]),
        "__SHADOW__": str(THEME["shadow"]),
        "__RADIUS_PX__": str(radius),
        "__WARNING__": str(THEME["warning"]),
    }
    for k, v in tokens.items():
        css = css.replace(k, v)

    st.markdown(css, unsafe_allow_html=True)
