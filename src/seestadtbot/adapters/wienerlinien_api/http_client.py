"""HTTP client for the Wiener Linien real-time API.

API keys are no longer required. All RBLs of a query are sent in one request
with a repeated query parameter.
"""

import logging
import time
from typing import TYPE_CHECKING, Any

import aiohttp

from seestadtbot.adapters.api_request_logger import log_api_request, log_api_response
from seestadtbot.adapters.wienerlinien_api.constants import (
    DEFAULT_HEADERS,
    ELEVATOR_STOP_PARAM,
    MONITOR_RBL_PARAM,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class WienerLinienHttpClient:
    """HTTP client for the monitor and elevator info endpoints."""

    def __init__(
        self,
        session: "ClientSession",
        monitor_url: str,
        elevator_url: str,
        timeout_seconds: float,
    ) -> None:
        """Initialize the client.

        Args:
            session: Shared aiohttp session.
            monitor_url: Real-time monitor endpoint.
            elevator_url: Elevator info endpoint (may already carry a query string).
            timeout_seconds: Total timeout per request.
        """
        self._session = session
        self._monitor_url = monitor_url
        self._elevator_url = elevator_url
        self._timeout_seconds = timeout_seconds

    async def fetch_monitor(self, rbls: list[str]) -> dict[str, Any] | None:
        """Fetch the raw monitor response for the given RBLs.

        Returns:
            The decoded JSON body if it contains a monitors list, otherwise None.
        """
        params = [(MONITOR_RBL_PARAM, rbl) for rbl in rbls]
        data = await self._get_json(self._monitor_url, params)
        if not isinstance(data, dict):
            return None

        payload = data.get("data")
        monitors = payload.get("monitors") if isinstance(payload, dict) else None
        if not isinstance(monitors, list):
            logger.error(f"Wiener Linien monitor response has no monitors list for RBLs {rbls}")
            return None
        return data

    async def fetch_elevator_infos(self, rbls: list[str]) -> dict[str, Any] | None:
        """Fetch the raw elevator traffic info response related to the given RBLs."""
        params = [(ELEVATOR_STOP_PARAM, rbl) for rbl in rbls]
        data = await self._get_json(self._elevator_url, params)
        return data if isinstance(data, dict) else None

    async def _get_json(self, url: str, params: list[tuple[str, str]]) -> Any:
        """GET a JSON document. Any failure, including a timeout, yields None."""
        log_api_request(url, params, headers=DEFAULT_HEADERS, timeout=self._timeout_seconds)
        started = time.monotonic()
        try:
            async with self._session.get(
                url,
                params=params,
                headers=DEFAULT_HEADERS,
                timeout=aiohttp.ClientTimeout(total=self._timeout_seconds),
            ) as response:
                log_api_response(url, response.status, time.monotonic() - started)
                if response.status != 200:
                    response_text = await response.text()
                    logger.error(
                        f"Wiener Linien API returned status {response.status} for {url}: "
                        f"{response_text[:200]}"
                    )
                    return None
                return await response.json()
        except (aiohttp.ClientError, TimeoutError, ValueError) as e:
            logger.error(f"Could not read from URL {url}: {e!r}")
            return None
