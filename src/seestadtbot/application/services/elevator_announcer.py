"""Speakable texts for elevator status messages."""

from collections.abc import Callable

from seestadtbot.application.services.text_utils import escape_ssml
from seestadtbot.domain.models.dual_response import Card, DualResponse
from seestadtbot.domain.models.elevator_info import ElevatorInfo
from seestadtbot.domain.models.keys import StationKey
from seestadtbot.domain.registry import Registry


class ElevatorAnnouncer:
    """Transforms elevator traffic infos into a spoken text and a card."""

    def __init__(self, registry: Registry) -> None:
        self._registry = registry

    def generate(self, station: StationKey, infos: list[ElevatorInfo]) -> DualResponse:
        station_name = self._registry.station_name(station)
        title = f"Aufzüge {station_name}"

        if not infos:
            text = f"An der Station {station_name} sind derzeit keine Aufzugsstörungen gemeldet."
            return DualResponse(text=text, card=Card(title=title, content=text))

        count = "eine Aufzugsmeldung" if len(infos) == 1 else f"{len(infos)} Aufzugsmeldungen"
        intro = f"An der Station {station_name} gibt es {count}."
        spoken = [intro] + [self._sentence(info, escape_ssml) for info in infos]
        written = [intro] + [self._sentence(info, str) for info in infos]
        return DualResponse(
            text=" ".join(spoken), card=Card(title=title, content="\n\n".join(written))
        )

    def not_monitored(self, station: StationKey) -> DualResponse:
        station_name = self._registry.station_name(station)
        text = f"Für die Station {station_name} habe ich keine Aufzugsinformationen."
        return DualResponse(text=text, card=Card(title=f"Aufzüge {station_name}", content=text))

    @staticmethod
    def _sentence(info: ElevatorInfo, quote: Callable[[str], str]) -> str:
        details = info.description.strip().rstrip(".")
        note = info.reason or info.status
        if note:
            details = f"{details} ({note})" if details else note
        if not details:
            return f"{quote(info.title)}."
        return f"{quote(info.title)}: {quote(details)}."
