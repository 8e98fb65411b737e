"""
Reusable helpers for rendering the activity table with consistent configuration.
"""

from __future__ import annotations

from typing import Sequence

import pandas as pd
import streamlit as st

from tourism_atlas.data.aggregation import Activity, activities_frame
from tourism_atlas.ui.components.formatting import format_status, or_not_specified

COLUMN_LABELS = {
    "type": "النوع",
    "name": "الاسم",
    "city": "المدينة",
    "category": "التصنيف",
    "status": "الحالة",
    "date": "التاريخ",
}


def display_frame(activities: Sequence[Activity]) -> pd.DataFrame:
    df = activities_frame(activities)
    if df.empty:
        return df.rename(columns=COLUMN_LABELS)
    display = df.copy()
    display["city"] = display["city"].apply(or_not_specified)
    display["status"] = display["status"].apply(format_status)
    display["date"] = display["date"].apply(or_not_specified)
    return display.rename(columns=COLUMN_LABELS)


def render_activity_table(
    activities: Sequence[Activity],
    height: int = 260,
    export_file_name: str = "activities.csv",
) -> None:
    if not activities:
        st.info("لا توجد نشاطات لعرضها.")
        return

    display = display_frame(activities)
    st.dataframe(
        display,
        use_container_width=True,
        height=height,
        hide_index=True,
    )

    csv_bytes = display.to_csv(index=False).encode("utf-8")
    st.download_button(
        "تنزيل CSV",
        data=csv_bytes,
        file_name=export_file_name,
        mime="text/csv",
    )
