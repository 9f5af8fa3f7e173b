"""Weekly opening hours from a schedule string.

Accepted specifications are rules separated by ";", each made of days and
time frames, e.g. "Mo-Fr 08:00-18:00; Sa 09:00-12:00,13:00-17:00; Su off; PH off".
Spaces around the hyphen of a time frame are allowed. A "24/7" rule opens
every weekday around the clock and can be narrowed by later rules.
Later rules override earlier ones for the same day. Days without a rule are
closed. "24:00" ends a day; a frame ending before it starts runs past midnight.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from seestadtbot.domain.errors import OpeningHoursFormatError
from seestadtbot.domain.ports.opening_hours import FoldOptions, OpeningHours, WeekdayFormat

logger = logging.getLogger(__name__)

DAY_ABBREVIATIONS = ("mo", "tu", "we", "th", "fr", "sa", "su")
HOLIDAY = "ph"
MINUTES_PER_DAY = 24 * 60

_UNKNOWN_SPECIFICATIONS = {"", "unknown", "?"}
_CLOSED_WORDS = {"off", "closed"}
_ALWAYS_OPEN = "24/7"
_TIME_FRAME = re.compile(r"^(\d{1,2}):(\d{2})\s*-\s*(\d{1,2}):(\d{2})$")
_RULE = re.compile(
    r"^(?P<days>[A-Za-z,\- ]+?)\s+(?P<frames>(\d.*|off|closed))$", re.IGNORECASE
)

WEEKDAY_NAMES = {
    "de": {
        WeekdayFormat.LONG: (
            "Montag",
            "Dienstag",
            "Mittwoch",
            "Donnerstag",
            "Freitag",
            "Samstag",
            "Sonntag",
        ),
        WeekdayFormat.SHORT: ("Mo.", "Di.", "Mi.", "Do.", "Fr.", "Sa.", "So."),
    },
    "en": {
        WeekdayFormat.LONG: (
            "Monday",
            "Tuesday",
            "Wednesday",
            "Thursday",
            "Friday",
            "Saturday",
            "Sunday",
        ),
        WeekdayFormat.SHORT: ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
    },
}


@dataclass(frozen=True)
class TimeFrame:
    """Opening time frame in minutes since midnight."""

    start: int
    end: int

    @property
    def overnight(self) -> bool:
        return self.end <= self.start

    def render(self, template: str) -> str:
        return template.format(start=_format_minutes(self.start), end=_format_minutes(self.end))


def _format_minutes(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def _parse_time_frame(text: str) -> TimeFrame:
    match = _TIME_FRAME.match(text.strip())
    if not match:
        raise OpeningHoursFormatError(f"Invalid time frame '{text}'")

    start_hour, start_minute, end_hour, end_minute = (int(group) for group in match.groups())
    start = start_hour * 60 + start_minute
    end = end_hour * 60 + end_minute
    if start_minute > 59 or end_minute > 59 or start >= MINUTES_PER_DAY or end > MINUTES_PER_DAY:
        raise OpeningHoursFormatError(f"Time out of range in '{text}'")
    return TimeFrame(start=start, end=end)


def _parse_days(text: str) -> list[str]:
    """Expand "Mo-Fr,Su" into ["mo", "tu", "we", "th", "fr", "su"]."""
    days: list[str] = []
    for part in text.lower().replace(" ", "").split(","):
        if part == HOLIDAY:
            days.append(HOLIDAY)
        elif "-" in part:
            first, _, last = part.partition("-")
            if first not in DAY_ABBREVIATIONS or last not in DAY_ABBREVIATIONS:
                raise OpeningHoursFormatError(f"Invalid day range '{part}'")
            start, end = DAY_ABBREVIATIONS.index(first), DAY_ABBREVIATIONS.index(last)
            span = (end - start) % 7
            days.extend(DAY_ABBREVIATIONS[(start + offset) % 7] for offset in range(span + 1))
        elif part in DAY_ABBREVIATIONS:
            days.append(part)
        else:
            raise OpeningHoursFormatError(f"Invalid day '{part}'")
    return days


class WeeklyOpeningHours(OpeningHours):
    """A weekly schedule in a given time zone."""

    def __init__(self, specification: str | None, timezone: str) -> None:
        """Parse the specification.

        Raises:
            OpeningHoursFormatError: If the specification cannot be parsed.
        """
        self._timezone = ZoneInfo(timezone)
        self._week: list[tuple[TimeFrame, ...]] = [() for _ in DAY_ABBREVIATIONS]
        self._holiday: tuple[TimeFrame, ...] | None = None
        self._unknown = (specification or "").strip().lower() in _UNKNOWN_SPECIFICATIONS

        if not self._unknown:
            self._parse(specification or "")

    def is_unknown(self) -> bool:
        return self._unknown

    def is_open_at(self, instant: datetime) -> bool:
        """Check the schedule at an instant. Public holidays are not taken into account."""
        if self._unknown:
            return False

        if instant.tzinfo is None:
            local = instant.replace(tzinfo=self._timezone)
        else:
            local = instant.astimezone(self._timezone)

        minute = local.hour * 60 + local.minute
        weekday = local.weekday()
        for frame in self._week[weekday]:
            if frame.start <= minute < (MINUTES_PER_DAY if frame.overnight else frame.end):
                return True

        previous_day = (local - timedelta(days=1)).weekday()
        return any(frame.overnight and minute < frame.end for frame in self._week[previous_day])

    def fold(self, options: FoldOptions) -> str:
        """Render one line per group of weekdays sharing the same time frames."""
        if self._unknown:
            return ""

        names = self._weekday_names(options)
        groups: dict[tuple[TimeFrame, ...], list[int]] = {}
        for weekday, frames in enumerate(self._week):
            groups.setdefault(frames, []).append(weekday)

        lines = [
            f"{self._fold_days(weekdays, names, options)}: {self._fold_frames(frames, options)}"
            for frames, weekdays in groups.items()
        ]
        if self._holiday is not None:
            lines.append(f"{options.holiday_prefix}: {self._fold_frames(self._holiday, options)}")
        return "\n".join(lines)

    def _parse(self, specification: str) -> None:
        for rule in filter(None, (part.strip() for part in specification.split(";"))):
            if rule.lower() == _ALWAYS_OPEN:
                all_day = (TimeFrame(start=0, end=MINUTES_PER_DAY),)
                self._week = [all_day for _ in DAY_ABBREVIATIONS]
                continue

            match = _RULE.match(rule)
            if not match:
                raise OpeningHoursFormatError(f"Invalid rule '{rule}'")

            frames_text = match.group("frames").strip()
            if frames_text.lower() in _CLOSED_WORDS:
                frames: tuple[TimeFrame, ...] = ()
            else:
                frames = tuple(_parse_time_frame(part) for part in frames_text.split(","))

            for day in _parse_days(match.group("days")):
                if day == HOLIDAY:
                    self._holiday = frames
                else:
                    self._week[DAY_ABBREVIATIONS.index(day)] = frames

    @staticmethod
    def _weekday_names(options: FoldOptions) -> tuple[str, ...]:
        language = options.locale.split("-")[0].lower()
        if language not in WEEKDAY_NAMES:
            raise ValueError(f"Unsupported locale for opening hours: {options.locale}")
        return WEEKDAY_NAMES[language][options.weekday_format]

    @staticmethod
    def _fold_days(weekdays: list[int], names: tuple[str, ...], options: FoldOptions) -> str:
        """Join consecutive weekdays to ranges: Montag bis Freitag und Sonntag."""
        runs: list[list[int]] = []
        for weekday in weekdays:
            if runs and runs[-1][-1] == weekday - 1:
                runs[-1].append(weekday)
            else:
                runs.append([weekday])

        parts = []
        for run in runs:
            if len(run) >= 3:
                parts.append(f"{names[run[0]]}{options.hyphen}{names[run[-1]]}")
            else:
                parts.extend(names[weekday] for weekday in run)
        return options.day_delimiter.join(parts)

    @staticmethod
    def _fold_frames(frames: tuple[TimeFrame, ...], options: FoldOptions) -> str:
        if not frames:
            return options.closed_placeholder
        return options.time_frame_delimiter.join(
            frame.render(options.time_frame_format) for frame in frames
        )


def create_opening_hours(specification: str | None, timezone: str) -> OpeningHours:
    """Create opening hours, treating unparseable specifications as unknown."""
    try:
        return WeeklyOpeningHours(specification, timezone)
    except OpeningHoursFormatError as e:
        logger.warning(f"Treating opening hours as unknown: {e}")
        return WeeklyOpeningHours(None, timezone)
