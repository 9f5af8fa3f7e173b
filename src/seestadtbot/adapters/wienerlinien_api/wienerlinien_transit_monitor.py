"""Wiener Linien adapter for the TransitMonitor port."""

import logging
from typing import TYPE_CHECKING

from seestadtbot.adapters.wienerlinien_api.http_client import WienerLinienHttpClient
from seestadtbot.adapters.wienerlinien_api.monitor_parser import MonitorParser
from seestadtbot.domain.errors import MonitorFormatError
from seestadtbot.domain.models.elevator_info import ElevatorInfo
from seestadtbot.domain.models.monitor_line import MonitorLine
from seestadtbot.domain.ports.transit_monitor import TransitMonitor

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class WienerLinienTransitMonitor(TransitMonitor):
    """Real-time monitor backed by the Wiener Linien Open Data API."""

    def __init__(
        self,
        session: "ClientSession",
        monitor_url: str,
        elevator_url: str,
        timeout_seconds: float,
    ) -> None:
        """Initialize with a shared aiohttp session and the endpoint configuration."""
        self._http_client = WienerLinienHttpClient(
            session=session,
            monitor_url=monitor_url,
            elevator_url=elevator_url,
            timeout_seconds=timeout_seconds,
        )

    async def get_monitor_lines(self, rbls: list[str]) -> list[MonitorLine] | None:
        """Query the real-time monitor for the given RBLs (RBLs are roughly platform IDs)."""
        data = await self._http_client.fetch_monitor(rbls)
        if data is None:
            return None

        try:
            return MonitorParser.parse_monitor_lines(data)
        except MonitorFormatError as e:
            logger.error(f"Error in Wiener Linien realtime response: {e}")
            return None

    async def get_elevator_infos(self, rbls: list[str]) -> list[ElevatorInfo] | None:
        """Query elevator traffic infos related to the given RBLs."""
        data = await self._http_client.fetch_elevator_infos(rbls)
        if data is None:
            return None

        try:
            return MonitorParser.parse_elevator_infos(data)
        except MonitorFormatError as e:
            logger.error(f"Error in Wiener Linien elevator response: {e}")
            return None
