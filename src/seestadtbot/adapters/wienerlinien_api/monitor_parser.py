"""Parser for Wiener Linien monitor and traffic info responses."""

import logging
from typing import Any

from seestadtbot.domain.errors import MonitorFormatError
from seestadtbot.domain.models.elevator_info import ElevatorInfo
from seestadtbot.domain.models.monitor_line import Departure, MonitorLine

logger = logging.getLogger(__name__)


class MonitorParser:
    """Parses raw API responses into domain objects.

    Structural deviations raise MonitorFormatError; the whole response is
    then unusable.
    """

    @staticmethod
    def parse_monitor_lines(data: dict[str, Any]) -> list[MonitorLine]:
        """Flatten the lines of all monitors into one list, in response order.

        Expected shape::

            {"data": {"monitors": [{"lines": [{"name": "U2", "towards": "Seestadt",
              "departures": {"departure": [{"departureTime": {"countdown": 3}}]}}]}]}}
        """
        monitors = MonitorParser._expect_list(
            MonitorParser._expect_dict(data.get("data"), "data").get("monitors"), "monitors"
        )

        monitor_lines = []
        for monitor in monitors:
            if not isinstance(monitor, dict):
                raise MonitorFormatError(f"Monitor is not an object: {monitor!r}")
            for line in MonitorParser._expect_list(monitor.get("lines", []), "lines"):
                monitor_lines.append(MonitorParser._parse_line(line))
        return monitor_lines

    @staticmethod
    def parse_elevator_infos(data: dict[str, Any]) -> list[ElevatorInfo]:
        """Parse elevator traffic infos. A response without trafficInfos has no outages."""
        payload = MonitorParser._expect_dict(data.get("data"), "data")
        traffic_infos = payload.get("trafficInfos") or []
        if not isinstance(traffic_infos, list):
            raise MonitorFormatError("trafficInfos is not a list")

        infos = []
        for traffic_info in traffic_infos:
            if not isinstance(traffic_info, dict):
                continue
            attributes = MonitorParser._expect_dict(
                traffic_info.get("attributes") or {}, "attributes"
            )
            status = attributes.get("status")
            reason = attributes.get("reason")
            infos.append(
                ElevatorInfo(
                    title=traffic_info.get("title") or "",
                    description=traffic_info.get("description") or "",
                    status=status if isinstance(status, str) else None,
                    reason=reason if isinstance(reason, str) else None,
                )
            )
        return infos

    @staticmethod
    def _parse_line(line: Any) -> MonitorLine:
        if not isinstance(line, dict):
            raise MonitorFormatError(f"Line is not an object: {line!r}")

        name = line.get("name")
        towards = line.get("towards")
        if not isinstance(name, str) or not isinstance(towards, str):
            raise MonitorFormatError(f"Line without name or towards: {line!r}")

        departures_block = MonitorParser._expect_dict(line.get("departures") or {}, "departures")
        departures_data = departures_block.get("departure", [])
        departures = tuple(
            MonitorParser._parse_departure(departure)
            for departure in MonitorParser._expect_list(departures_data, "departure")
        )

        return MonitorLine(
            name=name,
            towards=towards,
            departures=departures,
            direction=str(line.get("direction") or ""),
            platform=str(line.get("platform") or ""),
            barrier_free=bool(line.get("barrierFree", False)),
        )

    @staticmethod
    def _parse_departure(departure: Any) -> Departure:
        departure_time = departure.get("departureTime") if isinstance(departure, dict) else None
        if not isinstance(departure_time, dict):
            return Departure(countdown=None)

        return Departure(
            countdown=MonitorParser._parse_countdown(departure_time.get("countdown")),
            time_planned=departure_time.get("timePlanned"),
            time_real=departure_time.get("timeReal"),
        )

    @staticmethod
    def _parse_countdown(value: Any) -> int | None:
        """Keep integral numbers only. Negative values are kept and filtered later."""
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if value is not None:
            logger.debug(f"Ignoring non-integer countdown {value!r}")
        return None

    @staticmethod
    def _expect_dict(value: Any, field: str) -> dict[str, Any]:
        if not isinstance(value, dict):
            raise MonitorFormatError(f"'{field}' is not an object")
        return value

    @staticmethod
    def _expect_list(value: Any, field: str) -> list[Any]:
        if not isinstance(value, list):
            raise MonitorFormatError(f"'{field}' is not a list")
        return value
