"""
Dashboard state: the current Snapshot plus the refresh/add-record entry points
used by the UI.

The Snapshot is only ever replaced as a whole, so readers see either the old
or the new dataset, never a mixture. Overlapping refreshes are not
coordinated: whichever finishes last wins.
"""

from __future__ import annotations

import datetime as dt
import logging
import threading
from typing import Any, Dict, List, Mapping, Optional, Union

from tourism_atlas.data.aggregation import Activity
from tourism_atlas.data.export import ExportRequest, prepare_export
from tourism_atlas.data.filters import filter_activities
from tourism_atlas.data.loader import DataService
from tourism_atlas.data.records import Category, CategoryRecord, ensure_record
from tourism_atlas.data.snapshot import Snapshot

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "فشل تحميل البيانات. يرجى المحاولة لاحقًا."
TOP_ACTIVITIES = 5


def today_iso() -> str:
    return dt.datetime.now(dt.timezone.utc).date().isoformat()


class DashboardState:
    def __init__(self, service: Optional[DataService] = None, snapshot: Optional[Snapshot] = None) -> None:
        self._service = service
        self._snapshot = snapshot or Snapshot.empty()
        self._write_lock = threading.Lock()
        self.error_message: Optional[str] = None
        self.loading = False

    @property
    def service(self) -> DataService:
        if self._service is None:
            self._service = DataService()
        return self._service

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    def _install(self, snapshot: Snapshot) -> None:
        self._snapshot = snapshot

    async def refresh_async(self) -> bool:
        self.loading = True
        try:
            snapshot = await self.service.load_all()
        except Exception:
            logger.exception("Error loading data")
            self.error_message = LOAD_ERROR_MESSAGE
            return False
        finally:
            self.loading = False
        self._install(snapshot)
        self.error_message = None
        return True

    def refresh(self) -> bool:
        """Reload every dataset. On failure the previous Snapshot stays in place."""
        self.loading = True
        try:
            snapshot = self.service.load_all_sync()
        except Exception:
            logger.exception("Error loading data")
            self.error_message = LOAD_ERROR_MESSAGE
            return False
        finally:
            self.loading = False
        self._install(snapshot)
        self.error_message = None
        return True

    def add_record(
        self,
        category: Union[Category, str],
        record: Union[CategoryRecord, Mapping[str, Any]],
    ) -> Activity:
        """Prepend `record` to its category and rebuild the activity feed.

        Returns the Activity created for the new record.
        """
        parsed = ensure_record(category, record)
        with self._write_lock:
            updated = self._snapshot.with_prepended(parsed)
            self._install(updated)
        logger.info("Added %s record %r", parsed.category.value, parsed.name)
        return next(activity for activity in updated.activities if activity.record is parsed)

    def counts(self) -> Dict[Category, int]:
        return self._snapshot.counts()

    def top_activities(self, n: int = TOP_ACTIVITIES) -> List[Activity]:
        return list(self._snapshot.activities[: max(n, 0)])

    def all_activities(self) -> List[Activity]:
        return list(self._snapshot.activities)

    def search(self, term: Optional[str], limit: Optional[int] = None) -> List[Activity]:
        activities = self.all_activities() if limit is None else self.top_activities(limit)
        return filter_activities(activities, term)

    def prepare_export(self, scope: str, fmt: str) -> ExportRequest:
        return prepare_export(self._snapshot, scope, fmt)
