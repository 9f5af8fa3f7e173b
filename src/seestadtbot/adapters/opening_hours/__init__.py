"""Opening hours adapter."""

from seestadtbot.adapters.opening_hours.weekly_opening_hours import (
    WeeklyOpeningHours,
    create_opening_hours,
)

__all__ = ["WeeklyOpeningHours", "create_opening_hours"]
