"""Public transport data for Aspern Seestadt.

RBLs (Rechnergesteuertes Betriebsleitsystem) identify one platform/direction
in the Wiener Linien real-time API.
See https://www.data.gv.at/katalog/dataset/522d3045-0b37-48d0-b868-57c99726b1c4
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from seestadtbot.domain.models.keys import LineKey, StationKey, VehicleType
from seestadtbot.domain.models.line_feeds import LineFeeds


@dataclass(frozen=True)
class TransitNetwork:
    """Immutable station/line tables. Built once, shared by reference."""

    station_lines: Mapping[StationKey, tuple[LineFeeds, ...]]
    station_names: Mapping[StationKey, str]
    line_vehicle_types: Mapping[LineKey, VehicleType]
    line_names: Mapping[str, LineKey]
    supported_stations: tuple[StationKey, ...]
    elevator_stations: tuple[StationKey, ...]
    walking_time_to_seestadt: Mapping[StationKey, int]
    bus_ride_to_seestadt: Mapping[StationKey, int]


UBAHN_LINES = (LineKey.WL_U2,)

# There are no tram lines yet.
TRAM_LINES: tuple[LineKey, ...] = ()

BUS_LINES = (
    LineKey.WL_26A,
    LineKey.WL_84A,
    LineKey.WL_88A,
    LineKey.WL_88B,
    LineKey.WL_89A,
    LineKey.WL_93A,
    LineKey.WL_97A,
    LineKey.WL_98A,
)

# Round trip U2 Seestadt => Aspern Nord => Hausfeldstraße => Aspernstraße, in minutes.
U2_CIRCLE_PENALTY_TIME = 4


def _line_vehicle_types() -> dict[LineKey, VehicleType]:
    types: dict[LineKey, VehicleType] = {}
    for lines, vehicle_type in (
        (UBAHN_LINES, VehicleType.UBAHN),
        (TRAM_LINES, VehicleType.TRAM),
        (BUS_LINES, VehicleType.BUS),
    ):
        for line in lines:
            types[line] = vehicle_type
    return types


SEESTADT_NETWORK = TransitNetwork(
    station_lines=MappingProxyType(
        {
            StationKey.ASP: (
                LineFeeds(LineKey.WL_U2, ("4251", "4272")),
                LineFeeds(LineKey.WL_93A, ("8054",)),
                LineFeeds(LineKey.WL_84A, ("8682",)),
                LineFeeds(LineKey.WL_88A, ("8683",)),
                LineFeeds(LineKey.WL_26A, ("1024", "1052")),
                LineFeeds(LineKey.WL_97A, ("8055",)),
                LineFeeds(LineKey.WL_98A, ("8682", "2823")),
                LineFeeds(LineKey.WL_89A, ("8685",)),
            ),
            StationKey.HAU: (LineFeeds(LineKey.WL_U2, ("4279", "4274")),),
            StationKey.NOR: (LineFeeds(LineKey.WL_U2, ("4278", "4275")),),
            StationKey.SEE: (
                LineFeeds(LineKey.WL_U2, ("4277", "4276")),
                LineFeeds(LineKey.WL_88A, ("3319",)),
                LineFeeds(LineKey.WL_88B, ("3319",)),
                LineFeeds(LineKey.WL_84A, ("3365",)),
            ),
            StationKey.CTS: (
                LineFeeds(LineKey.WL_88A, ("3320", "3323")),
                LineFeeds(LineKey.WL_88B, ("3320", "3323")),
            ),
            StationKey.MTP: (LineFeeds(LineKey.WL_84A, ("3358", "3364")),),
            StationKey.HAP: (LineFeeds(LineKey.WL_84A, ("3359", "3363")),),
            StationKey.JKG: (LineFeeds(LineKey.WL_84A, ("3360", "3362")),),
        }
    ),
    station_names=MappingProxyType(
        {
            StationKey.ASP: "Aspernstraße",
            StationKey.HAU: "Hausfeldstraße",
            StationKey.NOR: "Aspern Nord",
            StationKey.SEE: "Seestadt",
            StationKey.CTS: "Christine-Touaillon-Straße",
            StationKey.MTP: "Maria-Trapp-Platz",
            StationKey.HAP: "Hannah-Arendt-Platz",
            StationKey.JKG: "Johann-Kutschera-Gasse",
        }
    ),
    line_vehicle_types=MappingProxyType(_line_vehicle_types()),
    # Line names as they appear in the real-time API.
    line_names=MappingProxyType({line.value: line for line in LineKey}),
    supported_stations=(
        StationKey.ASP,
        StationKey.HAU,
        StationKey.NOR,
        StationKey.SEE,
        StationKey.CTS,
        StationKey.MTP,
        StationKey.HAP,
        StationKey.JKG,
    ),
    elevator_stations=(StationKey.SEE, StationKey.NOR, StationKey.HAU, StationKey.ASP),
    # Walking time from a bus station to the U2 platform, in minutes.
    walking_time_to_seestadt=MappingProxyType(
        {StationKey.JKG: 12, StationKey.HAP: 9, StationKey.MTP: 5}
    ),
    # Travel time with the 84A to the U2 platform, in minutes.
    bus_ride_to_seestadt=MappingProxyType(
        {StationKey.JKG: 7, StationKey.HAP: 6, StationKey.MTP: 3}
    ),
)
