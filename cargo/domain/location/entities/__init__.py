from .location import Location

__all__ = [
    "Location",
]
