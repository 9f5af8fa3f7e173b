"""Transit monitor port."""

from typing import Protocol

from seestadtbot.domain.models.elevator_info import ElevatorInfo
from seestadtbot.domain.models.monitor_line import MonitorLine


class TransitMonitor(Protocol):
    """Port for the real-time transit feed."""

    async def get_monitor_lines(self, rbls: list[str]) -> list[MonitorLine] | None:
        """Fetch all monitor lines for the given RBLs in one request.

        Returns None on any transport failure or malformed response.
        """
        ...

    async def get_elevator_infos(self, rbls: list[str]) -> list[ElevatorInfo] | None:
        """Fetch elevator traffic infos related to the given RBLs.

        Returns None on any transport failure or malformed response.
        """
        ...
