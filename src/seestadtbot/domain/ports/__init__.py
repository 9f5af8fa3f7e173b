"""Ports (interfaces) for the ports-and-adapters architecture."""

from seestadtbot.domain.ports.opening_hours import (
    FoldOptions,
    OpeningHours,
    OpeningHoursFactory,
    WeekdayFormat,
)
from seestadtbot.domain.ports.shop_directory import ShopDirectory
from seestadtbot.domain.ports.transit_monitor import TransitMonitor

__all__ = [
    "FoldOptions",
    "OpeningHours",
    "OpeningHoursFactory",
    "ShopDirectory",
    "TransitMonitor",
    "WeekdayFormat",
]
