"""Elevator info domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ElevatorInfo:
    """An elevator traffic info message for a station."""

    title: str
    description: str
    status: str | None = None
    reason: str | None = None
