from __future__ import annotations

import streamlit as st

from tourism_atlas.data.records import CATEGORY_SPECS
from tourism_atlas.state import TOP_ACTIVITIES
from tourism_atlas.ui.components.charts import category_doughnut, render_plotly
from tourism_atlas.ui.components.kpi import KpiCard, render_kpi_cards
from tourism_atlas.ui.components.tables import render_activity_table
from tourism_atlas.ui.pages.context import PageContext


def render(context: PageContext) -> None:
    state = context.state
    counts = state.counts()

    cards = [KpiCard(label=CATEGORY_SPECS[category].stat_label, value=count) for category, count in counts.items()]
    render_kpi_cards(cards, columns=len(cards))

    st.divider()

    left, right = st.columns([3, 2])
    with left:
        st.subheader("أحدث النشاطات")
        show_all = st.toggle("عرض كل النشاطات", value=False, key="atlas_show_all")
        limit = None if show_all else TOP_ACTIVITIES
        activities = state.search(context.search_term, limit=limit)
        if context.search_term and not activities:
            st.info("لا توجد نتائج مطابقة للبحث.")
        else:
            render_activity_table(
                activities,
                height=500 if show_all else 230,
                export_file_name="activities.csv",
            )
    with right:
        st.subheader("توزيع البيانات")
        if sum(counts.values()) == 0:
            st.info("لا توجد بيانات لعرضها.")
        else:
            render_plotly(category_doughnut(counts))
