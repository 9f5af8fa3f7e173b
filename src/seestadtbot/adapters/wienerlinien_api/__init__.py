"""Wiener Linien real-time API adapter."""

from seestadtbot.adapters.wienerlinien_api.wienerlinien_transit_monitor import (
    WienerLinienTransitMonitor,
)

__all__ = ["WienerLinienTransitMonitor"]
