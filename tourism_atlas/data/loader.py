"""
Load every configured dataset concurrently and assemble a Snapshot.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, List, Optional, Tuple

from tourism_atlas.config import AtlasConfig, load_config
from tourism_atlas.data.fetcher import SourceFetcher
from tourism_atlas.data.records import (
    CATEGORY_ORDER,
    CATEGORY_SPECS,
    Category,
    CategoryRecord,
    record_from_mapping,
)
from tourism_atlas.data.snapshot import Snapshot
from tourism_atlas.errors import AtlasConfigError

logger = logging.getLogger(__name__)


def resolve_resources(data_files: Dict[str, str]) -> List[Tuple[Category, str]]:
    """Pair each catalogue category with its configured filename, in catalogue order."""
    known_keys = {spec.data_key for spec in CATEGORY_SPECS.values()}
    unknown = sorted(set(data_files) - known_keys)
    if unknown:
        raise AtlasConfigError(f"Unknown data file keys: {unknown}")

    resources: List[Tuple[Category, str]] = []
    for category in CATEGORY_ORDER:
        data_key = CATEGORY_SPECS[category].data_key
        filename = data_files.get(data_key)
        if not filename:
            raise AtlasConfigError(f"No data file configured for {data_key!r}")
        resources.append((category, filename))
    return resources


class DataService:
    def __init__(
        self,
        config: Optional[AtlasConfig] = None,
        fetcher: Optional[SourceFetcher] = None,
    ) -> None:
        self.config = config or load_config()
        self.fetcher = fetcher or SourceFetcher(self.config)

    async def _load_category(self, category: Category, filename: str) -> List[CategoryRecord]:
        raw_records = await self.fetcher.fetch(filename)
        return [record_from_mapping(category, raw) for raw in raw_records]

    async def load_all(self) -> Snapshot:
        """Fetch all categories concurrently and build a fresh Snapshot.

        Each fetch settles to a list (possibly empty), so the gather only fails
        on an unexpected error, in which case no Snapshot is produced.
        """
        resources = resolve_resources(self.config.data_files)
        results = await asyncio.gather(
            *(self._load_category(category, filename) for category, filename in resources)
        )
        per_category = {category: records for (category, _), records in zip(resources, results)}
        snapshot = Snapshot.build(per_category)
        logger.info(
            "Loaded tourism data: %s",
            ", ".join(f"{category.value}={count}" for category, count in snapshot.counts().items()),
        )
        return snapshot

    def load_all_sync(self) -> Snapshot:
        return asyncio.run(self.load_all())
