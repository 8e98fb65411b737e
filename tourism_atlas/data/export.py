"""
Export requests: select which dataset would be exported and how it would be
named. Writing an actual file in the selected format is not supported; the
request is logged and handed back to the UI for confirmation.
"""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from tourism_atlas.data.records import Category
from tourism_atlas.data.snapshot import Snapshot

logger = logging.getLogger(__name__)

REPORT_BASE_NAME = "تقرير_أطلس_ليبيا_السياحي"
EXPORT_FORMATS = ["excel", "pdf", "csv"]

# scope -> (category, file name suffix); any other scope exports all activities
EXPORT_SCOPES: Dict[str, tuple[Category, str]] = {
    "hotels": (Category.HOTEL, "الفنادق"),
    "beaches": (Category.BEACH, "الشواطئ"),
    "restaurants": (Category.RESTAURANT, "المطاعم"),
    "cultural": (Category.CULTURAL_SITE, "المواقع_الثقافية"),
}
ALL_SCOPE = "all"


@dataclass(frozen=True)
class ExportRequest:
    scope: str
    format: str
    file_name: str
    rows: List[Dict[str, Any]]

    @property
    def row_count(self) -> int:
        return len(self.rows)


def export_file_name(scope: str, on: Optional[dt.date] = None) -> str:
    day = on or dt.datetime.now(dt.timezone.utc).date()
    name = REPORT_BASE_NAME
    if scope in EXPORT_SCOPES:
        name += f"_{EXPORT_SCOPES[scope][1]}"
    return f"{name}_{day.isoformat()}"


def prepare_export(
    snapshot: Snapshot,
    scope: str,
    fmt: str,
    on: Optional[dt.date] = None,
) -> ExportRequest:
    if scope in EXPORT_SCOPES:
        category = EXPORT_SCOPES[scope][0]
        rows = [record.to_dict() for record in snapshot.category_records(category)]
    else:
        rows = [activity.to_row() for activity in snapshot.activities]

    request = ExportRequest(
        scope=scope,
        format=fmt,
        file_name=export_file_name(scope, on),
        rows=rows,
    )
    logger.info(
        "Prepared export %s (scope=%s, format=%s, rows=%d)",
        request.file_name,
        scope,
        fmt,
        request.row_count,
    )
    return request
