"""Use cases of Seestadt.bot. Each answer is a DualResponse."""

import logging
from datetime import datetime

from seestadtbot.application.services.elevator_announcer import ElevatorAnnouncer
from seestadtbot.application.services.shop_text_generator import ShopTextGenerator
from seestadtbot.application.services.station_announcer import StationAnnouncer
from seestadtbot.application.services.station_resolver import StationResolver
from seestadtbot.application.services.transit_aggregator import TransitAggregator
from seestadtbot.domain.models.dual_response import DualResponse
from seestadtbot.domain.models.keys import StationKey, VehicleType
from seestadtbot.domain.models.shop_entry import ShopEntry
from seestadtbot.domain.models.slot import Slot
from seestadtbot.domain.models.station_info import Unavailable
from seestadtbot.domain.ports.shop_directory import ShopDirectory
from seestadtbot.domain.ports.transit_monitor import TransitMonitor
from seestadtbot.domain.registry import Registry

logger = logging.getLogger(__name__)


class SeestadtAssistant:
    """Answers questions about departures, elevators and shops in Aspern Seestadt."""

    def __init__(
        self,
        registry: Registry,
        transit_monitor: TransitMonitor,
        shop_directory: ShopDirectory,
        shop_text_generator: ShopTextGenerator,
    ) -> None:
        """Initialize with the registry and the outbound ports.

        Args:
            registry: Station and line tables.
            transit_monitor: Real-time Wiener Linien data.
            shop_directory: City directory for shops and venues.
            shop_text_generator: Text generation for shop answers.
        """
        self._registry = registry
        self._transit_monitor = transit_monitor
        self._shop_directory = shop_directory
        self._resolver = StationResolver(registry)
        self._aggregator = TransitAggregator(transit_monitor, registry)
        self._station_announcer = StationAnnouncer(registry)
        self._elevator_announcer = ElevatorAnnouncer(registry)
        self._shop_text_generator = shop_text_generator

    async def station_departures(
        self, stop_slot: Slot | None = None, vehicle_slot: Slot | None = None
    ) -> DualResponse:
        """Announce the next departures at a station.

        Without a recognizable vehicle type all lines of the station are
        announced. Without a recognizable station, Hannah-Arendt-Platz is used
        for buses and Seestadt otherwise.
        """
        vehicle_type = self._resolver.resolve_vehicle_type(vehicle_slot) if vehicle_slot else None
        fallback_station = StationKey.HAP if vehicle_type == VehicleType.BUS else StationKey.SEE
        station = (self._resolver.resolve_station(stop_slot) if stop_slot else None) or (
            fallback_station
        )

        lines = self._registry.lines_for_station(station, vehicle_type)
        if vehicle_type and not lines:
            return self._station_announcer.no_lines_for_vehicle_type(station, vehicle_type)

        rbls = self._registry.rbls_for_station(station, vehicle_type)
        logger.debug(f"Querying {station} ({vehicle_type or 'all vehicles'}) with RBLs {rbls}")

        station_info = await self._aggregator.fetch(rbls, expected_lines=lines)
        if isinstance(station_info, Unavailable):
            logger.warning(f"No real-time data returned for station {station}")
            return self._station_announcer.unavailable()

        return self._station_announcer.generate(station, station_info)

    async def elevator_status(self, stop_slot: Slot | None = None) -> DualResponse:
        """Report elevator outages at a U-Bahn station, Seestadt by default."""
        station = (self._resolver.resolve_station(stop_slot) if stop_slot else None) or (
            StationKey.SEE
        )
        if not self._registry.has_elevator_info(station):
            return self._elevator_announcer.not_monitored(station)

        rbls = self._registry.rbls_for_station(station, VehicleType.UBAHN)
        infos = await self._transit_monitor.get_elevator_infos(rbls)
        if infos is None:
            return self._station_announcer.unavailable()

        return self._elevator_announcer.generate(station, infos)

    async def opening_hours(
        self, shop_slot: Slot | None, now: datetime | None = None
    ) -> DualResponse:
        """Tell whether a shop is open and its opening hours."""
        entry = await self._find_shop(shop_slot)
        if entry is None:
            return self._shop_text_generator.not_found()
        return self._shop_text_generator.opening_hours(entry, now)

    async def shop_information(
        self, shop_slot: Slot | None, now: datetime | None = None
    ) -> DualResponse:
        """Describe a shop with its address and opening hours."""
        entry = await self._find_shop(shop_slot)
        if entry is None:
            return self._shop_text_generator.not_found(title="Geschäft")
        return self._shop_text_generator.shop_information(entry, now)

    async def _find_shop(self, shop_slot: Slot | None) -> ShopEntry | None:
        """A unique platform resolution is an entry id; otherwise search the spoken value."""
        if shop_slot is None:
            return None

        entry_id = shop_slot.unique_resolution_id()
        if entry_id:
            return await self._shop_directory.get_entry(entry_id)

        if shop_slot.value:
            return await self._shop_directory.search(shop_slot.value)

        return None
