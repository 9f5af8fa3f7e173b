"""Resolution of spoken station, line and vehicle names.

Speech recognition is not accurate, so variants and systematic
misrecognitions are tried in a fixed order: platform resolutions first,
then exact name patterns, then loose prefixes, then known misrecognitions.
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from seestadtbot.domain.models.keys import LineKey, StationKey, VehicleType
from seestadtbot.domain.models.slot import Slot
from seestadtbot.domain.registry import Registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StationQuery:
    """Input to the station matching strategies."""

    slot: Slot
    enable_seestadt: bool = True

    @property
    def text(self) -> str:
        return (self.slot.value or "").strip()


StationStrategy = Callable[[StationQuery], StationKey | None]

_EXACT_PATTERNS: tuple[tuple[re.Pattern[str], StationKey], ...] = (
    (re.compile(r"^aspernstra(ss|ß)e$", re.IGNORECASE), StationKey.ASP),
    (re.compile(r"^hausfeldstra(ss|ß)e$", re.IGNORECASE), StationKey.HAU),
    (re.compile(r"^(aspern )?nord$", re.IGNORECASE), StationKey.NOR),
    (re.compile(r"^hann?ah?[ -]ah?ren(d|dt|t|tt)([ -]platz)?$", re.IGNORECASE), StationKey.HAP),
    (
        re.compile(r"^johann[- ]?kutschera([- ]?(gasse|stra(ss|ß)e))?$", re.IGNORECASE),
        StationKey.JKG,
    ),
    (re.compile(r"^maria[- ]?trapp([- ]?platz)?$", re.IGNORECASE), StationKey.MTP),
    (
        re.compile(r"^christine[- ]?touaillon([- ]?(gasse|stra(ss|ß)e))?$", re.IGNORECASE),
        StationKey.CTS,
    ),
)

_SEESTADT_PATTERN = re.compile(r"^seestadt$", re.IGNORECASE)

# Looser matching on distinguishing name prefixes, e.g. for truncated recognitions.
_PREFIX_PATTERNS: tuple[tuple[re.Pattern[str], StationKey], ...] = (
    (re.compile(r"^hann?ah?[ -]", re.IGNORECASE), StationKey.HAP),
    (re.compile(r"^johann[ -]", re.IGNORECASE), StationKey.JKG),
    (re.compile(r"^christine[- ]?", re.IGNORECASE), StationKey.CTS),
    (re.compile(r"^haus[ -]?felds", re.IGNORECASE), StationKey.HAU),
)

# Words the speech recognition systematically hears for "Johann-Kutschera-Gasse".
_MISRECOGNITION_PATTERNS: tuple[tuple[re.Pattern[str], StationKey], ...] = (
    (
        re.compile(
            r"(q terrasse|gute radar|küche radar|foodora das|butter gast|gottschalk|code straße)",
            re.IGNORECASE,
        ),
        StationKey.JKG,
    ),
)

_VEHICLE_PATTERNS: tuple[tuple[re.Pattern[str], VehicleType], ...] = (
    (re.compile(r"u[- ]?bahn|\bmetro\b", re.IGNORECASE), VehicleType.UBAHN),
    (re.compile(r"stra(ss|ß)enbahn|\bbim\b|\btram\b", re.IGNORECASE), VehicleType.TRAM),
    (re.compile(r"\bbus(se)?\b|\bautobus", re.IGNORECASE), VehicleType.BUS),
)

_LINE_PREFIX = re.compile(r"^linie\s*", re.IGNORECASE)
_LINE_SEPARATORS = re.compile(r"[\s-]+")


def _first_match(
    text: str, patterns: tuple[tuple[re.Pattern[str], StationKey], ...]
) -> StationKey | None:
    for pattern, station in patterns:
        if pattern.search(text):
            return station
    return None


class StationResolver:
    """Resolves slots to station keys, line keys and vehicle types."""

    def __init__(self, registry: Registry) -> None:
        """Initialize with the registry used as ground truth."""
        self._registry = registry
        self._station_strategies: tuple[StationStrategy, ...] = (
            self._match_resolution,
            self._match_exact,
            self._match_prefix,
            self._match_misrecognition,
        )

    def resolve_station(self, slot: Slot, enable_seestadt: bool = True) -> StationKey | None:
        """Extract a station key from a slot.

        Args:
            slot: The stop name slot.
            enable_seestadt: Whether the terminus "Seestadt" is accepted as a spoken name.

        Returns:
            The station key, or None if nothing matched.
        """
        query = StationQuery(slot=slot, enable_seestadt=enable_seestadt)
        for strategy in self._station_strategies:
            station = strategy(query)
            if station is not None:
                return station

        logger.info(f"Could not extract a station in string '{query.text}'")
        return None

    def resolve_vehicle_type(self, slot: Slot) -> VehicleType | None:
        """Map a slot to a vehicle type (bus, tram, U-Bahn)."""
        resolved_id = slot.unique_resolution_id()
        if resolved_id is not None:
            try:
                return VehicleType(resolved_id)
            except ValueError:
                logger.debug(f"Ignoring unknown vehicle type resolution '{resolved_id}'")

        text = (slot.value or "").strip()
        for pattern, vehicle_type in _VEHICLE_PATTERNS:
            if pattern.search(text):
                return vehicle_type

        if text:
            logger.info(f"Could not extract a vehicle type in string '{text}'")
        return None

    def resolve_line(self, slot: Slot) -> LineKey | None:
        """Map a slot to a line key, e.g. "Linie 88 A" to 88A."""
        resolved_id = slot.unique_resolution_id()
        if resolved_id is not None:
            line = self._registry.line_for_line_name(resolved_id.upper())
            if line is not None:
                return line

        text = _LINE_PREFIX.sub("", (slot.value or "").strip())
        line = self._registry.line_for_line_name(_LINE_SEPARATORS.sub("", text).upper())
        if line is None and text:
            logger.info(f"Could not extract a line in string '{text}'")
        return line

    def _match_resolution(self, query: StationQuery) -> StationKey | None:
        """Trust a unique platform resolution to a three-letter station code."""
        resolved_id = query.slot.unique_resolution_id()
        if resolved_id is None or len(resolved_id) != 3:
            return None
        for station in self._registry.supported_stations:
            if station.value == resolved_id:
                return station
        return None

    @staticmethod
    def _match_exact(query: StationQuery) -> StationKey | None:
        station = _first_match(query.text, _EXACT_PATTERNS)
        if station is None and query.enable_seestadt and _SEESTADT_PATTERN.search(query.text):
            return StationKey.SEE
        return station

    @staticmethod
    def _match_prefix(query: StationQuery) -> StationKey | None:
        return _first_match(query.text, _PREFIX_PATTERNS)

    @staticmethod
    def _match_misrecognition(query: StationQuery) -> StationKey | None:
        return _first_match(query.text, _MISRECOGNITION_PATTERNS)
