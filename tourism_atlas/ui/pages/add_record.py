"""
Forms for adding hotels, beaches and restaurants to the in-memory dataset.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import streamlit as st

from tourism_atlas.data.records import STATUS_TEXT, Category
from tourism_atlas.state import today_iso
from tourism_atlas.ui.pages.context import PageContext

STATUS_OPTIONS = list(STATUS_TEXT)
RATING_OPTIONS = ["1", "2", "3", "4", "5"]

FORM_TITLES = {
    Category.HOTEL: "إضافة فندق جديد",
    Category.BEACH: "إضافة شاطئ جديد",
    Category.RESTAURANT: "إضافة مطعم جديد",
}

# Category-specific field: (record attribute, input label)
EXTRA_FIELDS = {
    Category.HOTEL: ("rating", "التصنيف (نجوم)"),
    Category.BEACH: ("type", "نوع الشاطئ"),
    Category.RESTAURANT: ("cuisine", "نوع المطبخ"),
}


def _record_form(category: Category) -> Optional[Dict[str, Any]]:
    key = category.value
    with st.form(f"atlas_form_{key}", clear_on_submit=True):
        st.markdown(f"#### {FORM_TITLES[category]}")
        name = st.text_input("الاسم", key=f"atlas_{key}_name")
        city = st.text_input("المدينة", key=f"atlas_{key}_city")
        attr, label = EXTRA_FIELDS[category]
        if attr == "rating":
            extra_value = st.selectbox(label, RATING_OPTIONS, index=2, key=f"atlas_{key}_{attr}")
        else:
            extra_value = st.text_input(label, key=f"atlas_{key}_{attr}")
        status = st.selectbox(
            "الحالة",
            STATUS_OPTIONS,
            format_func=lambda v: STATUS_TEXT[v],
            key=f"atlas_{key}_status",
        )
        description = st.text_area("الوصف", key=f"atlas_{key}_description")
        submitted = st.form_submit_button("حفظ")

    if not submitted:
        return None
    if not name.strip():
        st.warning("يرجى إدخال الاسم.")
        return None
    return {
        "name": name.strip(),
        "city": city.strip(),
        attr: extra_value.strip() if isinstance(extra_value, str) else extra_value,
        "status": status,
        "description": description.strip(),
        "date": today_iso(),
    }


def render(context: PageContext) -> None:
    st.subheader("إضافة سجل جديد")
    category = st.radio(
        "نوع السجل",
        list(FORM_TITLES),
        format_func=lambda c: FORM_TITLES[c],
        horizontal=True,
        key="atlas_add_category",
    )
    record = _record_form(category)
    if record is None:
        return
    activity = context.state.add_record(category, record)
    st.success(f"تمت إضافة {activity.label}: {activity.name}")
