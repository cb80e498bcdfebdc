"""Location module domain layer."""

from .entities import Location

__all__ = [
    "Location",
]
