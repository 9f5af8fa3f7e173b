"""Domain errors for Seestadt.bot."""


class SeestadtBotError(Exception):
    """Base error for the Seestadt.bot domain."""


class UnknownStationError(SeestadtBotError):
    """A registry lookup was made for a station without registry entry.

    This never happens for supported stations and points to a data bug.
    """

    def __init__(self, station: str) -> None:
        super().__init__(f"Station '{station}' has no mapping to lines.")
        self.station = station


class MonitorFormatError(SeestadtBotError):
    """The real-time monitor response does not have the expected shape."""


class OpeningHoursFormatError(SeestadtBotError):
    """An opening hours specification could not be parsed."""
