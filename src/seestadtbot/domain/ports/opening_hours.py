"""Opening hours port and its fold configuration."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Protocol


class WeekdayFormat(StrEnum):
    """How weekday names are rendered when folding."""

    LONG = "long"
    SHORT = "short"


@dataclass(frozen=True)
class FoldOptions:
    """Rendering configuration for folding a weekly schedule into text."""

    locale: str = "de-AT"
    closed_placeholder: str = "geschlossen"
    holiday_prefix: str = "Feiertags"
    hyphen: str = " bis "
    day_delimiter: str = " und "
    time_frame_delimiter: str = " und "
    time_frame_format: str = "von {start} bis {end}"
    weekday_format: WeekdayFormat = WeekdayFormat.LONG


class OpeningHours(Protocol):
    """A weekly schedule bound to a time zone."""

    def is_unknown(self) -> bool:
        """True when no usable schedule is on file."""
        ...

    def is_open_at(self, instant: datetime) -> bool:
        """Whether the business is open at the given instant."""
        ...

    def fold(self, options: FoldOptions) -> str:
        """Render the schedule, one line per group of days with equal hours."""
        ...


class OpeningHoursFactory(Protocol):
    """Creates OpeningHours for a provider-defined schedule string."""

    def __call__(self, specification: str | None, timezone: str) -> OpeningHours:
        ...
