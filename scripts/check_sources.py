"""Quick smoke check for the configured data sources.

Run with `python scripts/check_sources.py` to load every dataset through the
remote -> local -> empty chain and print the per-category counts and the
most recent activities.
"""

from __future__ import annotations

from tourism_atlas.bootstrap_env import ensure_env
from tourism_atlas.data.loader import DataService
from tourism_atlas.data.records import CATEGORY_SPECS


def main() -> None:
    ensure_env()
    snapshot = DataService().load_all_sync()

    for category, count in snapshot.counts().items():
        print(f"{CATEGORY_SPECS[category].stat_label}: {count}")

    total = sum(snapshot.counts().values())
    if len(snapshot.activities) != total:
        raise SystemExit(f"Activity feed has {len(snapshot.activities)} entries, expected {total}")

    for activity in snapshot.activities[:5]:
        print(f"- {activity.label} | {activity.name} | {activity.derived_category} | {activity.date}")


if __name__ == "__main__":
    main()
