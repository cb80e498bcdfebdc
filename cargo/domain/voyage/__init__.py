"""Voyage module domain layer."""

from .entities import CarrierMovement, Schedule, Voyage
from .events import DepartureRescheduled

__all__ = [
    "CarrierMovement",
    "DepartureRescheduled",
    "Schedule",
    "Voyage",
]
