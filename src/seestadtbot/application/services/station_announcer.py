"""Speakable texts for real-time departures."""

from collections.abc import Callable

from seestadtbot.application.services.text_utils import (
    countdown_phrase,
    escape_ssml,
    improve_towards,
)
from seestadtbot.domain.models.dual_response import Card, DualResponse
from seestadtbot.domain.models.keys import LineKey, StationKey, VehicleType
from seestadtbot.domain.models.monitor_line import MonitorLine
from seestadtbot.domain.models.station_info import StationInfo
from seestadtbot.domain.registry import Registry

# Only the next departures per direction are announced.
MAX_COUNTDOWNS_PER_DIRECTION = 2

_VEHICLE_TYPE_PHRASES = {
    VehicleType.BUS: "kein Bus",
    VehicleType.TRAM: "keine Straßenbahn",
    VehicleType.UBAHN: "keine U-Bahn",
}


class StationAnnouncer:
    """Transforms merged real-time info into a spoken text and a card."""

    def __init__(self, registry: Registry) -> None:
        """Initialize with the registry for station names."""
        self._registry = registry

    def generate(self, station: StationKey, station_info: StationInfo) -> DualResponse:
        """Build the departure announcement for a station.

        Stations with a single line get terser phrasing: the line name is said
        once up front instead of in every sentence.
        """
        station_name = self._registry.station_name(station)
        single_line = station_info.is_single_line
        text_blocks: list[str] = []
        card_blocks: list[str] = []

        if not single_line:
            text_blocks.append(f"Station {station_name}.")

        for line, monitor_lines in station_info.lines.items():
            spoken = self._line_sentences(line, monitor_lines, single_line, escape_ssml)
            written = self._line_sentences(line, monitor_lines, single_line, str)

            if not spoken:
                no_data = f"Für die Linie {line} sind keine Daten verfügbar."
                text_blocks.append(no_data)
                card_blocks.append(no_data)
                continue

            header = f"Linie {line} {station_name} " if single_line else ""
            text_blocks.append(header + " ".join(spoken))
            card_blocks.append(header + " ".join(written))

        return DualResponse(
            text=" ".join(text_blocks),
            card=Card(title=station_name, content="\n\n".join(card_blocks)),
        )

    def no_lines_for_vehicle_type(
        self, station: StationKey, vehicle_type: VehicleType
    ) -> DualResponse:
        """Answer for a station where no line of the requested vehicle type stops."""
        station_name = self._registry.station_name(station)
        text = f"An der Station {station_name} fährt {_VEHICLE_TYPE_PHRASES[vehicle_type]}."
        return DualResponse(text=text, card=Card(title=station_name, content=text))

    @staticmethod
    def unavailable() -> DualResponse:
        return DualResponse(
            text="Leider funktioniert der Server der Wiener Linien gerade nicht.",
            card=Card(title="Fehler", content="Die Wiener Linien antworten nicht."),
        )

    @staticmethod
    def _line_sentences(
        line: LineKey,
        monitor_lines: list[MonitorLine],
        single_line: bool,
        quote: Callable[[str], str],
    ) -> list[str]:
        """One sentence per direction with at least one valid countdown."""
        sentences = []
        for monitor_line in monitor_lines:
            countdowns = monitor_line.valid_countdowns()[:MAX_COUNTDOWNS_PER_DIRECTION]
            if not countdowns:
                continue

            towards = quote(improve_towards(monitor_line.towards))
            departures = " und ".join(countdown_phrase(c) for c in countdowns)
            prefix = "" if single_line else f"Linie {line} "
            sentences.append(f"{prefix}Richtung {towards} fährt {departures}.")
        return sentences
