"""Domain models for Seestadt.bot."""

from seestadtbot.domain.models.dual_response import Card, DualResponse
from seestadtbot.domain.models.elevator_info import ElevatorInfo
from seestadtbot.domain.models.keys import LineKey, StationKey, VehicleType
from seestadtbot.domain.models.line_feeds import LineFeeds
from seestadtbot.domain.models.monitor_line import Departure, MonitorLine
from seestadtbot.domain.models.shop_entry import ShopEntry
from seestadtbot.domain.models.slot import ER_SUCCESS_MATCH, Slot, SlotResolution
from seestadtbot.domain.models.station_info import (
    UNAVAILABLE,
    StationInfo,
    StationInfoResult,
    Unavailable,
)

__all__ = [
    "ER_SUCCESS_MATCH",
    "UNAVAILABLE",
    "Card",
    "Departure",
    "DualResponse",
    "ElevatorInfo",
    "LineFeeds",
    "LineKey",
    "MonitorLine",
    "ShopEntry",
    "Slot",
    "SlotResolution",
    "StationInfo",
    "StationInfoResult",
    "StationKey",
    "Unavailable",
    "VehicleType",
]
