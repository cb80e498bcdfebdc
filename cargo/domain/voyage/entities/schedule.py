"""
Schedule value object: the ordered itinerary of a voyage.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import ClassVar

from cargo.domain.common.exceptions import MissingRequiredFieldError
from cargo.domain.common.value_object import ValueObject
from cargo.domain.location.entities.location import Location

from .carrier_movement import CarrierMovement


@dataclass(frozen=True, init=False)
class Schedule(ValueObject):
    """
    A voyage schedule.

    Order of the movements is itinerary order. The movements are copied
    into a tuple on construction, so mutating the list a schedule was built
    from never changes the schedule.

    Leg contiguity (arrival of leg i is the departure of leg i+1) is not
    enforced; use is_contiguous() where it matters.
    """

    EMPTY: ClassVar["Schedule"]

    carrier_movements: tuple[CarrierMovement, ...]

    def __init__(self, carrier_movements: Iterable[CarrierMovement]) -> None:
        if carrier_movements is None:
            raise MissingRequiredFieldError("Schedule", "carrier_movements")
        object.__setattr__(self, "carrier_movements", tuple(carrier_movements))

    def __len__(self) -> int:
        return len(self.carrier_movements)

    def __iter__(self) -> Iterator[CarrierMovement]:
        return iter(self.carrier_movements)

    def is_empty(self) -> bool:
        return not self.carrier_movements

    @property
    def first_departure_location(self) -> Location:
        if not self.carrier_movements:
            return Location.UNKNOWN
        return self.carrier_movements[0].departure_location

    @property
    def last_arrival_location(self) -> Location:
        if not self.carrier_movements:
            return Location.UNKNOWN
        return self.carrier_movements[-1].arrival_location

    def is_contiguous(self) -> bool:
        """Check that every leg departs from where the previous one arrived."""
        return all(
            previous.arrival_location.same_identity_as(current.departure_location)
            for previous, current in zip(
                self.carrier_movements, self.carrier_movements[1:], strict=False
            )
        )

    def to_primitive(self) -> list[dict[str, object]]:
        return [movement.to_primitive() for movement in self.carrier_movements]


Schedule.EMPTY = Schedule(())
