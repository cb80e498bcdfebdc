"""Common value objects shared across all domain modules."""

from .ids import UnLocode, VoyageNumber

__all__ = [
    "UnLocode",
    "VoyageNumber",
]
