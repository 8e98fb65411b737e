from tourism_atlas.bootstrap_env import ensure_env

ensure_env()  # must run before config is read

import streamlit as st

from tourism_atlas.config import TABS
from tourism_atlas.state import DashboardState
from tourism_atlas.ui.layout import error_banner, setup_page, sidebar_controls
from tourism_atlas.ui.pages import add_record, export, overview
from tourism_atlas.ui.pages.context import PageContext


PAGE_RENDERERS = {
    "overview": overview.render,
    "add_record": add_record.render,
    "export": export.render,
}

STATE_KEY = "atlas_state"


def _session_state() -> DashboardState:
    state = st.session_state.get(STATE_KEY)
    if state is None:
        state = DashboardState()
        with st.spinner("جاري تحميل البيانات..."):
            state.refresh()
        st.session_state[STATE_KEY] = state
    return state


def main() -> None:
    setup_page()
    st.title("لوحة تحكم أطلس ليبيا السياحي")

    state = _session_state()
    refresh_requested, search_term = sidebar_controls()

    if error_banner(state) or refresh_requested:
        with st.spinner("جاري تحميل البيانات..."):
            refreshed = state.refresh()
        if refreshed:
            st.toast("تم تحديث البيانات", icon="✅")
        st.rerun()

    context = PageContext(state=state, search_term=search_term)

    tab_labels = [tab.label for tab in TABS]
    streamlit_tabs = st.tabs(tab_labels)

    for streamlit_tab, tab_config in zip(streamlit_tabs, TABS):
        renderer = PAGE_RENDERERS.get(tab_config.key)
        if renderer is None:
            continue
        with streamlit_tab:
            renderer(context)


if __name__ == "__main__":
    main()
