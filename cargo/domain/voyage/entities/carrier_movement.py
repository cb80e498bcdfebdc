"""
CarrierMovement value object: one leg of a voyage.
"""

from dataclasses import dataclass, replace
from datetime import datetime

from cargo.domain.common.value_object import ValueObject
from cargo.domain.location.entities.location import Location


@dataclass(frozen=True)
class CarrierMovement(ValueObject):
    """
    A carrier moving from one location to another.

    Legs carry no identity of their own; two movements with the same
    endpoints and times are interchangeable.
    """

    departure_location: Location
    arrival_location: Location
    departure_time: datetime
    arrival_time: datetime

    def with_departure_time(self, new_departure_time: datetime) -> "CarrierMovement":
        """
        Copy of this movement departing at a different time.

        Args:
            new_departure_time: Departure time of the copy

        Returns:
            New CarrierMovement; the receiver is left untouched
        """
        return replace(self, departure_time=new_departure_time)

    def departs_from(self, location: Location) -> bool:
        """Check if this movement departs from the given location."""
        return self.departure_location.same_identity_as(location)

    def to_primitive(self) -> dict[str, object]:
        return {
            "departure_location": self.departure_location.unlocode.to_primitive(),
            "arrival_location": self.arrival_location.unlocode.to_primitive(),
            "departure_time": self.departure_time.isoformat(),
            "arrival_time": self.arrival_time.isoformat(),
        }
