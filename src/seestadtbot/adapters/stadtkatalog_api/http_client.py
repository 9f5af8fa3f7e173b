"""HTTP client for the StadtKatalog open data REST API.

API Documentation: https://docs.stadtkatalog.org/opendata-rest-api/
"""

import logging
import time
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import aiohttp

from seestadtbot.adapters.api_request_logger import log_api_request, log_api_response

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class StadtKatalogHttpClient:
    """HTTP client for entry lookups and fulltext search."""

    def __init__(self, session: "ClientSession", api_url: str, timeout_seconds: float) -> None:
        """Initialize with a shared aiohttp session, the API base URL and a timeout."""
        self._session = session
        self._api_url = api_url.rstrip("/")
        self._timeout_seconds = timeout_seconds

    async def get_entry(self, entry_id: str) -> dict[str, Any] | None:
        """Fetch an entry by id.

        Returns:
            The entry document ({"id": ..., "data": {...}}) or None.
        """
        url = f"{self._api_url}/entries/{quote(entry_id, safe='')}"
        data = await self._get_json(url, [])
        return data if isinstance(data, dict) else None

    async def search_fulltext(
        self, query: str, geofence: str, size: int = 1
    ) -> list[dict[str, Any]] | None:
        """Search entries by relevance within a geo fence.

        Returns:
            The list of hits, or None if the request failed.
        """
        params = [
            ("q", query),
            ("sortField", "relevance"),
            ("sortOrder", "desc"),
            ("size", str(size)),
            ("page", "0"),
            ("geoFence", geofence),
        ]
        data = await self._get_json(f"{self._api_url}/search/fulltext", params)
        if not isinstance(data, dict):
            return None

        hits = data.get("hits")
        if not isinstance(hits, list):
            logger.warning(f"StadtKatalog search response without hits list for '{query}'")
            return None
        return hits

    async def _get_json(self, url: str, params: list[tuple[str, str]]) -> Any:
        log_api_request(url, params, timeout=self._timeout_seconds)
        started = time.monotonic()
        try:
            async with self._session.get(
                url,
                params=params,
                timeout=aiohttp.ClientTimeout(total=self._timeout_seconds),
            ) as response:
                log_api_response(url, response.status, time.monotonic() - started)
                if response.status == 404:
                    return None
                if response.status != 200:
                    response_text = await response.text()
                    logger.warning(
                        f"StadtKatalog API returned status {response.status}: {response_text[:200]}"
                    )
                    return None
                return await response.json()
        except (aiohttp.ClientError, TimeoutError, ValueError) as e:
            logger.warning(f"Error calling StadtKatalog at {url}: {e!r}")
            return None
