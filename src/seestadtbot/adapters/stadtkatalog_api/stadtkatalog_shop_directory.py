"""StadtKatalog adapter for the ShopDirectory port."""

import logging
from typing import TYPE_CHECKING, Any

from seestadtbot.adapters.stadtkatalog_api.http_client import StadtKatalogHttpClient
from seestadtbot.domain.models.shop_entry import ShopEntry
from seestadtbot.domain.ports.shop_directory import ShopDirectory

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class StadtKatalogShopDirectory(ShopDirectory):
    """Shop directory backed by StadtKatalog, restricted to one geo fence."""

    def __init__(
        self,
        session: "ClientSession",
        api_url: str,
        timeout_seconds: float,
        geofence: str,
        blacklist: list[str] | None = None,
        vague_terms: list[str] | None = None,
    ) -> None:
        """Initialize the directory.

        Args:
            session: Shared aiohttp session.
            api_url: StadtKatalog API base URL.
            timeout_seconds: Total timeout per request.
            geofence: Geo fence that search results must lie in.
            blacklist: Entry ids never returned to voice users.
            vague_terms: Queries too vague to search for, compared case-insensitively.
        """
        self._http_client = StadtKatalogHttpClient(session, api_url, timeout_seconds)
        self._geofence = geofence
        self._blacklist = set(blacklist or [])
        self._vague_terms = {term.strip().lower() for term in vague_terms or []}

    async def get_entry(self, entry_id: str) -> ShopEntry | None:
        """Look up an entry by id, unless it is blacklisted."""
        if entry_id in self._blacklist:
            logger.info(f"StadtKatalog entry {entry_id} is blacklisted")
            return None

        document = await self._http_client.get_entry(entry_id)
        if document is None:
            return None
        return self._to_shop_entry(document, entry_id)

    async def search(self, query: str) -> ShopEntry | None:
        """Search for exactly one usable hit for the query."""
        normalized = query.strip().lower()
        if not normalized or normalized in self._vague_terms:
            logger.info(f"Not searching StadtKatalog for vague query '{query}'")
            return None

        hits = await self._http_client.search_fulltext(query, self._geofence)
        if not hits or len(hits) != 1:
            logger.info(f"StadtKatalog search for '{query}' returned {len(hits or [])} hits")
            return None

        hit = hits[0]
        entry_id = str(hit.get("id", "")) if isinstance(hit, dict) else ""
        if entry_id in self._blacklist:
            logger.info(f"StadtKatalog hit {entry_id} for '{query}' is blacklisted")
            return None
        return self._to_shop_entry(hit, entry_id) if isinstance(hit, dict) else None

    @staticmethod
    def _to_shop_entry(document: dict[str, Any], entry_id: str) -> ShopEntry | None:
        data = document.get("data")
        if not isinstance(data, dict) or not data.get("name"):
            logger.warning(f"StadtKatalog entry {entry_id} has no usable data")
            return None

        hours = data.get("hours")
        return ShopEntry(
            id=str(document.get("id") or entry_id),
            name=str(data["name"]),
            label=str(data.get("label") or ""),
            address=str(data.get("address") or ""),
            description=str(data.get("description") or ""),
            hours=hours if isinstance(hours, str) and hours.strip() else None,
            hours_remark=str(data.get("hoursRemark") or ""),
        )
