from .carrier_movement import CarrierMovement
from .schedule import Schedule
from .voyage import Voyage

__all__ = [
    "CarrierMovement",
    "Schedule",
    "Voyage",
]
