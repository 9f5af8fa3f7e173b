"""Real-time monitor domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Departure:
    """A single vehicle arrival as reported by the real-time monitor."""

    countdown: int | None
    time_planned: str | None = None
    time_real: str | None = None


@dataclass(frozen=True)
class MonitorLine:
    """One line in one direction at one platform, with its upcoming departures."""

    name: str
    towards: str
    departures: tuple[Departure, ...]
    direction: str = ""
    platform: str = ""
    barrier_free: bool = False

    def valid_countdowns(self) -> list[int]:
        """Return the present, non-negative countdowns in API order."""
        return [
            d.countdown for d in self.departures if d.countdown is not None and d.countdown >= 0
        ]
