"""Result of a real-time lookup: merged station info or unavailable."""

from dataclasses import dataclass, field

from seestadtbot.domain.models.keys import LineKey
from seestadtbot.domain.models.monitor_line import MonitorLine


@dataclass(frozen=True)
class StationInfo:
    """Monitor lines merged per line key, in encounter order."""

    lines: dict[LineKey, list[MonitorLine]] = field(default_factory=dict)

    @property
    def is_single_line(self) -> bool:
        return len(self.lines) == 1


@dataclass(frozen=True)
class Unavailable:
    """The real-time service could not deliver usable data."""


UNAVAILABLE = Unavailable()

StationInfoResult = StationInfo | Unavailable
