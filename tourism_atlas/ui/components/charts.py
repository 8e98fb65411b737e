"""
Plotly chart factory functions with consistent styling for the dashboard.
"""

from __future__ import annotations

from typing import Dict, Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from tourism_atlas.data.records import CATEGORY_SPECS, Category

DEFAULT_TEMPLATE = "plotly_white"


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    legend_title: Optional[str] = None,
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        title=title,
        legend_title=legend_title,
        margin=dict(l=20, r=20, t=60, b=20),
        legend=dict(orientation="v", x=1.0, xanchor="left"),
    )
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def counts_frame(counts: Dict[Category, int]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"category": CATEGORY_SPECS[category].stat_label, "count": count}
            for category, count in counts.items()
        ],
        columns=["category", "count"],
    )


def category_doughnut(counts: Dict[Category, int], title: Optional[str] = None) -> go.Figure:
    df = counts_frame(counts)
    color_map = {spec.stat_label: spec.color for spec in CATEGORY_SPECS.values()}
    fig = px.pie(
        df,
        names="category",
        values="count",
        hole=0.5,
        color="category",
        color_discrete_map=color_map,
    )
    fig.update_traces(marker=dict(line=dict(width=1)), sort=False)
    return _configure_layout(fig, title)
