"""Aggregation of real-time monitor data into per-line announcements."""

import logging

from seestadtbot.domain.models.keys import LineKey
from seestadtbot.domain.models.monitor_line import MonitorLine
from seestadtbot.domain.models.station_info import UNAVAILABLE, StationInfo, StationInfoResult
from seestadtbot.domain.ports.transit_monitor import TransitMonitor
from seestadtbot.domain.registry import Registry

logger = logging.getLogger(__name__)

# Provider-injected entries that are not journeys ("do not board").
SENTINEL_MARKER = "nicht einsteigen"


class TransitAggregator:
    """Fetches monitor lines for a set of RBLs and merges them per line."""

    def __init__(self, transit_monitor: TransitMonitor, registry: Registry) -> None:
        """Initialize with the real-time monitor port and the registry."""
        self._transit_monitor = transit_monitor
        self._registry = registry

    async def fetch(
        self, rbls: list[str], expected_lines: list[LineKey] | None = None
    ) -> StationInfoResult:
        """Fetch and merge real-time info for the given RBLs.

        Args:
            rbls: RBLs to query, all in one request.
            expected_lines: If set, every expected line appears in the result (possibly
                with no entries) and entries of other lines are dropped.

        Returns:
            StationInfo with monitor lines merged per line key, or UNAVAILABLE if the
            real-time service failed.
        """
        if not rbls:
            logger.debug("No RBLs to query, returning empty station info")
            return StationInfo(lines={line: [] for line in expected_lines or []})

        monitor_lines = await self._transit_monitor.get_monitor_lines(rbls)
        if monitor_lines is None:
            return UNAVAILABLE

        return StationInfo(lines=self.merge(monitor_lines, expected_lines))

    def merge(
        self, monitor_lines: list[MonitorLine], expected_lines: list[LineKey] | None = None
    ) -> dict[LineKey, list[MonitorLine]]:
        """Merge monitor lines of different directions/platforms by line key.

        Entries keep their encounter order and are never deduplicated.
        """
        line_map: dict[LineKey, list[MonitorLine]] = {
            line: [] for line in expected_lines or []
        }

        for monitor_line in monitor_lines:
            is_sentinel = SENTINEL_MARKER in monitor_line.towards.lower()
            line_key = self._registry.line_for_line_name(monitor_line.name)
            if line_key is None:
                if not is_sentinel:
                    logger.warning(
                        f"Could not map Wiener Linien line {monitor_line.name} "
                        "to an internal line key"
                    )
                continue

            if expected_lines is not None and line_key not in line_map:
                logger.debug(f"Skipping line {line_key} not requested for this station")
                continue

            # A line whose only entries are sentinels stays in the map without entries.
            entries = line_map.setdefault(line_key, [])
            if is_sentinel:
                logger.debug(f"Filtered sentinel entry for line {line_key}: {monitor_line.towards}")
                continue
            entries.append(monitor_line)

        return line_map
