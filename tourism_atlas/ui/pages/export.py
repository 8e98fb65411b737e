from __future__ import annotations

import streamlit as st

from tourism_atlas.data.export import ALL_SCOPE, EXPORT_FORMATS
from tourism_atlas.ui.pages.context import PageContext

SCOPE_LABELS = {
    ALL_SCOPE: "جميع النشاطات",
    "hotels": "الفنادق",
    "beaches": "الشواطئ",
    "restaurants": "المطاعم",
    "cultural": "المواقع الثقافية",
}


def render(context: PageContext) -> None:
    st.subheader("تصدير التقرير")
    with st.form("atlas_export_form"):
        scope = st.selectbox(
            "نوع البيانات",
            list(SCOPE_LABELS),
            format_func=lambda v: SCOPE_LABELS[v],
            key="atlas_export_scope",
        )
        fmt = st.selectbox("صيغة التصدير", EXPORT_FORMATS, key="atlas_export_format")
        submitted = st.form_submit_button("تصدير")

    if not submitted:
        return
    request = context.state.prepare_export(scope, fmt)
    st.success(f"تم تجهيز بيانات التقرير للتصدير بصيغة {request.format}")
    st.caption(f"{request.file_name} ({request.row_count} سجل)")
