"""
Layout helpers for the Streamlit application (page setup, sidebar, error banner).
"""

from __future__ import annotations

import streamlit as st

from tourism_atlas.state import DashboardState

RTL_CSS = """
<style>
.main .block-container, section[data-testid="stSidebar"] { direction: rtl; text-align: right; }
</style>
"""


def setup_page() -> None:
    """Set Streamlit page configuration and top-level styling."""
    st.set_page_config(
        page_title="أطلس ليبيا السياحي",
        layout="wide",
        page_icon=":world_map:",
    )
    st.markdown(RTL_CSS, unsafe_allow_html=True)


def sidebar_controls() -> tuple[bool, str]:
    """Render the sidebar; returns (refresh requested, search term)."""
    st.sidebar.header("أطلس ليبيا السياحي")
    refresh = st.sidebar.button("🔄 تحديث البيانات", key="atlas_refresh")
    search = st.sidebar.text_input("بحث في النشاطات", key="atlas_search")
    return refresh, search.strip().lower()


def error_banner(state: DashboardState) -> bool:
    """Show the last refresh error with a retry button; returns True when retry was clicked."""
    if not state.error_message:
        return False
    col_msg, col_btn = st.columns([5, 1])
    with col_msg:
        st.error(state.error_message, icon="⚠️")
    with col_btn:
        return st.button("إعادة المحاولة", key="atlas_retry")
