"""Registry of the supported stations and lines."""

import logging

from seestadtbot.domain.errors import UnknownStationError
from seestadtbot.domain.models.keys import LineKey, StationKey, VehicleType
from seestadtbot.domain.models.line_feeds import LineFeeds
from seestadtbot.domain.seestadt_network import SEESTADT_NETWORK, TransitNetwork

logger = logging.getLogger(__name__)


class Registry:
    """Read-only lookups over a TransitNetwork.

    The network is validated on construction and never mutated afterwards.
    """

    def __init__(self, network: TransitNetwork = SEESTADT_NETWORK) -> None:
        """Initialize with the network tables to serve.

        Raises:
            ValueError: If the network violates its invariants.
        """
        self._validate(network)
        self._network = network

    @property
    def supported_stations(self) -> tuple[StationKey, ...]:
        return self._network.supported_stations

    def rbls_for_station(
        self, station: StationKey, vehicle_type: VehicleType | None = None
    ) -> list[str]:
        """Return the RBLs of all lines at a station, optionally filtered by vehicle type.

        A station has one RBL per platform/direction. RBLs shared by several
        lines are returned once, in order of first appearance.

        Args:
            station: Station to look up.
            vehicle_type: Only include lines of this vehicle type.

        Raises:
            UnknownStationError: If the station has no mapping to lines.
        """
        rbls: list[str] = []
        for line_feeds in self._station_lines(station):
            if vehicle_type and self.vehicle_type_of(line_feeds.line) != vehicle_type:
                continue
            for rbl in line_feeds.rbls:
                if rbl not in rbls:
                    rbls.append(rbl)
        return rbls

    def lines_for_station(
        self, station: StationKey, vehicle_type: VehicleType | None = None
    ) -> list[LineKey]:
        """Return the lines serving a station in registry order."""
        return [
            line_feeds.line
            for line_feeds in self._station_lines(station)
            if not vehicle_type or self.vehicle_type_of(line_feeds.line) == vehicle_type
        ]

    def station_name(self, station: StationKey) -> str:
        """Return a speakable station name."""
        try:
            return self._network.station_names[station]
        except KeyError:
            raise UnknownStationError(station) from None

    def line_for_line_name(self, line_name: str) -> LineKey | None:
        """Map a line name from the real-time API to a line key."""
        return self._network.line_names.get(line_name)

    def vehicle_type_of(self, line: LineKey) -> VehicleType:
        return self._network.line_vehicle_types[line]

    def has_elevator_info(self, station: StationKey) -> bool:
        return station in self._network.elevator_stations

    def walking_time_to_seestadt(self, station: StationKey) -> int | None:
        """Minutes on foot from a bus station to the U2 platform Seestadt."""
        return self._network.walking_time_to_seestadt.get(station)

    def bus_ride_to_seestadt(self, station: StationKey) -> int | None:
        """Minutes by 84A from a bus station to the U2 platform Seestadt."""
        return self._network.bus_ride_to_seestadt.get(station)

    def _station_lines(self, station: StationKey) -> tuple[LineFeeds, ...]:
        station_lines = self._network.station_lines.get(station)
        if not station_lines:
            logger.error(f"Registry lookup for station without lines: {station}")
            raise UnknownStationError(station)
        return station_lines

    @staticmethod
    def _validate(network: TransitNetwork) -> None:
        rbl_owner: dict[str, tuple[StationKey, VehicleType]] = {}
        for station in network.supported_stations:
            station_lines = network.station_lines.get(station)
            if not station_lines:
                raise ValueError(f"Supported station '{station}' has no lines")
            if station not in network.station_names:
                raise ValueError(f"Supported station '{station}' has no name")

            for line_feeds in station_lines:
                vehicle_type = network.line_vehicle_types.get(line_feeds.line)
                if vehicle_type is None:
                    raise ValueError(f"Line '{line_feeds.line}' has no vehicle type")
                if not line_feeds.rbls:
                    raise ValueError(f"Line '{line_feeds.line}' at '{station}' has no RBLs")
                for rbl in line_feeds.rbls:
                    owner = rbl_owner.setdefault(rbl, (station, vehicle_type))
                    if owner != (station, vehicle_type):
                        raise ValueError(
                            f"RBL '{rbl}' is shared between {owner} and {(station, vehicle_type)}"
                        )
