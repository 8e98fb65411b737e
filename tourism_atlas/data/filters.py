"""
Search filtering over the activity feed.
"""

from __future__ import annotations

from typing import Iterable, List

from tourism_atlas.data.aggregation import Activity
from tourism_atlas.data.records import NOT_SPECIFIED, status_text


def row_text(activity: Activity) -> str:
    """Text of the activity as shown in one table row, lower-cased for matching."""
    parts = [
        activity.label,
        activity.name or "",
        activity.city or NOT_SPECIFIED,
        activity.derived_category,
        status_text(activity.status),
        str(activity.date) if activity.date else NOT_SPECIFIED,
    ]
    return " ".join(str(part) for part in parts).lower()


def filter_activities(activities: Iterable[Activity], term: str | None) -> List[Activity]:
    needle = (term or "").strip().lower()
    if not needle:
        return list(activities)
    return [activity for activity in activities if needle in row_text(activity)]
