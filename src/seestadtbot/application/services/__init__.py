"""Application services (use cases)."""

from seestadtbot.application.services.elevator_announcer import ElevatorAnnouncer
from seestadtbot.application.services.seestadt_assistant import SeestadtAssistant
from seestadtbot.application.services.shop_text_generator import ShopTextGenerator
from seestadtbot.application.services.station_announcer import StationAnnouncer
from seestadtbot.application.services.station_resolver import StationResolver
from seestadtbot.application.services.transit_aggregator import TransitAggregator

__all__ = [
    "ElevatorAnnouncer",
    "SeestadtAssistant",
    "ShopTextGenerator",
    "StationAnnouncer",
    "StationResolver",
    "TransitAggregator",
]
