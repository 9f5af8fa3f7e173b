"""Domain layer - core business logic and models."""

from seestadtbot.domain.errors import SeestadtBotError, UnknownStationError
from seestadtbot.domain.models import (
    DualResponse,
    LineKey,
    MonitorLine,
    StationKey,
    VehicleType,
)
from seestadtbot.domain.registry import Registry

__all__ = [
    "DualResponse",
    "LineKey",
    "MonitorLine",
    "Registry",
    "SeestadtBotError",
    "StationKey",
    "UnknownStationError",
    "VehicleType",
]
