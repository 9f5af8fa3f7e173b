"""Line feeds domain model."""

from dataclasses import dataclass

from seestadtbot.domain.models.keys import LineKey


@dataclass(frozen=True)
class LineFeeds:
    """A line serving a station together with its RBLs (one per platform/direction)."""

    line: LineKey
    rbls: tuple[str, ...]
