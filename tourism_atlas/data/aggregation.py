"""
Activity aggregation: project the per-category records into one feed sorted by
date, most recent first.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import pandas as pd

from tourism_atlas.data.records import (
    CATEGORY_ORDER,
    CATEGORY_SPECS,
    Category,
    CategoryRecord,
)

EPOCH = pd.Timestamp("1970-01-01", tz="UTC")

ACTIVITY_COLUMNS = ["type", "name", "city", "category", "status", "date"]

# pandas resolves these against the wall clock; they are not dates.
RELATIVE_DATE_WORDS = frozenset({"now", "today", "yesterday", "tomorrow"})


def parse_activity_date(value: Any) -> Optional[pd.Timestamp]:
    """Parse a record date into a UTC timestamp, or None when missing/unparseable."""
    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip()
        if not text or text.lower() in RELATIVE_DATE_WORDS:
            return None
    elif not isinstance(value, (dt.date, dt.datetime, pd.Timestamp)):
        return None
    parsed = pd.to_datetime(value, errors="coerce", utc=True)
    if parsed is None or pd.isna(parsed):
        return None
    return parsed


@dataclass(frozen=True)
class Activity:
    record: CategoryRecord
    category: Category
    label: str
    icon: str
    derived_category: str

    @property
    def name(self) -> Optional[str]:
        return self.record.name

    @property
    def city(self) -> Optional[str]:
        return self.record.city

    @property
    def status(self) -> Optional[str]:
        return self.record.status

    @property
    def date(self) -> Any:
        return self.record.date

    def sort_key(self) -> Tuple[bool, pd.Timestamp]:
        parsed = parse_activity_date(self.record.date)
        if parsed is None:
            return False, EPOCH
        return True, parsed

    def to_row(self) -> Dict[str, Any]:
        row = self.record.to_dict()
        row.update(
            {
                "source_category": self.category.value,
                "label": self.label,
                "icon": self.icon,
                "category": self.derived_category,
            }
        )
        return row


def project(record: CategoryRecord) -> Activity:
    spec = CATEGORY_SPECS[record.category]
    return Activity(
        record=record,
        category=spec.category,
        label=spec.label,
        icon=spec.icon,
        derived_category=record.derived_category(),
    )


def build_activities(
    per_category: Mapping[Category, Sequence[CategoryRecord]],
) -> List[Activity]:
    """Merge the category sequences into one activity list.

    Categories are concatenated in the fixed catalogue order, then sorted by
    date descending. Dated records always precede dateless ones; equal keys keep
    their concatenation order because `sorted` is stable under `reverse=True`.
    Categories missing from the mapping count as empty.
    """
    concatenated: List[Activity] = []
    for category in CATEGORY_ORDER:
        concatenated.extend(project(record) for record in per_category.get(category, ()))
    return sorted(concatenated, key=Activity.sort_key, reverse=True)


def activities_frame(activities: Iterable[Activity]) -> pd.DataFrame:
    """Tabulate activities with the display columns used by the dashboard."""
    rows = [
        {
            "type": activity.label,
            "name": activity.name,
            "city": activity.city,
            "category": activity.derived_category,
            "status": activity.status,
            "date": activity.date,
        }
        for activity in activities
    ]
    if not rows:
        return pd.DataFrame(columns=ACTIVITY_COLUMNS)
    return pd.DataFrame(rows, columns=ACTIVITY_COLUMNS)
