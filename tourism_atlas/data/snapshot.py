from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Sequence, Tuple

from tourism_atlas.data.aggregation import Activity, build_activities
from tourism_atlas.data.records import CATEGORY_ORDER, Category, CategoryRecord


def _empty_records() -> Dict[Category, Tuple[CategoryRecord, ...]]:
    return {category: () for category in CATEGORY_ORDER}


@dataclass(frozen=True)
class Snapshot:
    """Immutable view of every category dataset plus the derived activity feed.

    Build instances with `Snapshot.build` so `activities` is always derived from
    `records`; changes produce a new Snapshot instead of patching this one.
    """

    records: Mapping[Category, Tuple[CategoryRecord, ...]] = field(default_factory=_empty_records)
    activities: Tuple[Activity, ...] = ()

    @classmethod
    def empty(cls) -> "Snapshot":
        return cls()

    @classmethod
    def build(cls, per_category: Mapping[Category, Sequence[CategoryRecord]]) -> "Snapshot":
        records = {category: tuple(per_category.get(category, ())) for category in CATEGORY_ORDER}
        return cls(records=records, activities=tuple(build_activities(records)))

    def category_records(self, category: Category) -> Tuple[CategoryRecord, ...]:
        return tuple(self.records.get(category, ()))

    def counts(self) -> Dict[Category, int]:
        return {category: len(self.records.get(category, ())) for category in CATEGORY_ORDER}

    def with_prepended(self, record: CategoryRecord) -> "Snapshot":
        """Return a rebuilt Snapshot with `record` at the head of its category."""
        updated = dict(self.records)
        updated[record.category] = (record,) + self.category_records(record.category)
        return Snapshot.build(updated)
