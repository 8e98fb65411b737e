"""
Fetch one dataset file with the remote -> local file -> empty fallback chain.

Ordinary failures (transport errors, non-2xx responses, unreadable files,
bodies that are not a JSON array) are logged as warnings and absorbed. Only
unexpected errors propagate to the caller.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Dict, List, Optional

import httpx

from tourism_atlas.config import AtlasConfig
from tourism_atlas.errors import FetchError

logger = logging.getLogger(__name__)


def _records_from_payload(payload: Any, origin: str) -> List[Dict[str, Any]]:
    if not isinstance(payload, list):
        raise FetchError(f"{origin}: expected a JSON array, got {type(payload).__name__}")
    records: List[Dict[str, Any]] = []
    for index, item in enumerate(payload):
        if isinstance(item, dict):
            records.append(item)
        else:
            logger.warning("%s: dropping item %d, not a JSON object", origin, index)
    return records


def _read_json_file(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


class SourceFetcher:
    """Fetches dataset files for the dashboard.

    `transport` is handed to `httpx.AsyncClient`; tests pass an
    `httpx.MockTransport` to fake the remote endpoint.
    """

    def __init__(
        self,
        config: AtlasConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config
        self.transport = transport

    async def fetch(self, resource_id: str) -> List[Dict[str, Any]]:
        try:
            return await self.fetch_remote(resource_id)
        except FetchError as exc:
            logger.warning("Failed to load %s: %s", resource_id, exc)

        if not self.config.fallback_to_local:
            return []

        try:
            records = await self.fetch_local(resource_id)
        except FetchError as exc:
            logger.warning("Failed to load local %s: %s", resource_id, exc)
            return []
        logger.info("Loaded %s from local copy (%d records)", resource_id, len(records))
        return records

    async def fetch_remote(self, filename: str) -> List[Dict[str, Any]]:
        url = self.config.remote_url(filename)
        try:
            async with httpx.AsyncClient(
                timeout=self.config.request_timeout,
                follow_redirects=True,
                transport=self.transport,
            ) as client:
                response = await client.get(url, headers=self.config.request_headers)
        except httpx.HTTPError as exc:
            raise FetchError(f"request to {url} failed: {exc}") from exc

        if not response.is_success:
            raise FetchError(f"HTTP error! status: {response.status_code}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise FetchError(f"{url} did not return JSON") from exc
        return _records_from_payload(payload, url)

    async def fetch_local(self, filename: str) -> List[Dict[str, Any]]:
        path = self.config.local_path(filename)
        try:
            payload = await asyncio.to_thread(_read_json_file, path)
        except (OSError, ValueError) as exc:
            raise FetchError(f"cannot read {path}: {exc}") from exc
        return _records_from_payload(payload, path)
