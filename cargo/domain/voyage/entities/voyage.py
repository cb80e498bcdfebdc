"""
Voyage aggregate root.
"""

import threading
from datetime import datetime
from typing import ClassVar

from cargo.domain.common.aggregate_root import AggregateRoot
from cargo.domain.common.domain_event import DomainEvent
from cargo.domain.common.exceptions import MissingRequiredFieldError
from cargo.domain.common.value_objects import VoyageNumber
from cargo.domain.location.entities.location import Location
from cargo.domain.voyage.events import DepartureRescheduled

from .carrier_movement import CarrierMovement
from .schedule import Schedule


class Voyage(AggregateRoot[VoyageNumber]):
    """
    Voyage aggregate root.

    A scheduled carrier voyage: an ordered itinerary of carrier movements
    identified by its voyage number.

    Business Rules:
    - Voyage number and schedule are required
    - Identity is the voyage number alone; the schedule never takes part
      in equality or hashing
    - The voyage number is fixed for the life of the aggregate
    - The schedule only changes through departure_rescheduled, which swaps
      in a whole new Schedule under the instance lock
    """

    NONE: ClassVar["Voyage"]

    def __init__(self, voyage_number: VoyageNumber, schedule: Schedule) -> None:
        if voyage_number is None:
            raise MissingRequiredFieldError("Voyage", "voyage_number")
        if schedule is None:
            raise MissingRequiredFieldError("Voyage", "schedule")

        super().__init__()
        self._voyage_number = voyage_number
        self._schedule = schedule
        self._lock = threading.RLock()

    @property
    def id(self) -> VoyageNumber:  # type: ignore[override]
        return self._voyage_number

    @property
    def voyage_number(self) -> VoyageNumber:
        return self._voyage_number

    @property
    def schedule(self) -> Schedule:
        with self._lock:
            return self._schedule

    def collect_events(self) -> list[DomainEvent]:
        with self._lock:
            return super().collect_events()

    @property
    def pending_events(self) -> list[DomainEvent]:
        with self._lock:
            return self._events.copy()

    def is_none(self) -> bool:
        """Check if this is the "no voyage" null object."""
        return self.same_identity_as(Voyage.NONE)

    def departure_rescheduled(self, location: Location, new_departure_time: datetime) -> None:
        """
        Move every departure from a location to a new time.

        All legs departing from the location are rescheduled, not just the
        first one. Leg order and count are preserved, and legs departing
        elsewhere are carried over as they are. No matching leg is not an
        error; the schedule is left equal to what it was.

        Args:
            location: Location from where the rescheduled departure happens
            new_departure_time: New departure time
        """
        with self._lock:
            carrier_movements: list[CarrierMovement] = []
            rescheduled = 0
            for carrier_movement in self._schedule:
                if carrier_movement.departs_from(location):
                    carrier_movements.append(
                        carrier_movement.with_departure_time(new_departure_time)
                    )
                    rescheduled += 1
                else:
                    carrier_movements.append(carrier_movement)

            self._schedule = Schedule(carrier_movements)

            if rescheduled:
                self._record_event(
                    DepartureRescheduled(
                        voyage_number=self._voyage_number,
                        location=location.unlocode,
                        new_departure_time=new_departure_time,
                        legs_rescheduled=rescheduled,
                    )
                )

    def __str__(self) -> str:
        return f"Voyage {self._voyage_number}"

    def __repr__(self) -> str:
        return f"Voyage(voyage_number={self._voyage_number!r}, legs={len(self._schedule)})"

    @classmethod
    def reconstitute(cls, voyage_number: VoyageNumber, schedule: Schedule) -> "Voyage":
        """
        Reconstitute a voyage from storage.

        Restricted to the code that loads voyages back from where they were
        saved. Unlike the constructor it does not check required fields, since
        stored state is restored as it was written.
        """
        voyage = cls.__new__(cls)
        AggregateRoot.__init__(voyage)
        voyage._voyage_number = voyage_number
        voyage._schedule = schedule
        voyage._lock = threading.RLock()
        return voyage

    class Builder:
        """
        Incremental construction of a Voyage aggregate.

        Each movement departs from where the previous one arrived, so the
        caller never tracks the current location. The builder is meant for a
        single thread; build() copies the legs, so adding more afterwards
        never changes a voyage that was already built.
        """

        def __init__(self, voyage_number: VoyageNumber, departure_location: Location) -> None:
            if voyage_number is None:
                raise MissingRequiredFieldError("Voyage.Builder", "voyage_number")
            if departure_location is None:
                raise MissingRequiredFieldError("Voyage.Builder", "departure_location")

            self._carrier_movements: list[CarrierMovement] = []
            self._voyage_number = voyage_number
            self._departure_location = departure_location

        @property
        def departure_location(self) -> Location:
            """Where the next added movement will depart from."""
            return self._departure_location

        def add_movement(
            self,
            arrival_location: Location,
            departure_time: datetime,
            arrival_time: datetime,
        ) -> "Voyage.Builder":
            self._carrier_movements.append(
                CarrierMovement(
                    departure_location=self._departure_location,
                    arrival_location=arrival_location,
                    departure_time=departure_time,
                    arrival_time=arrival_time,
                )
            )
            # Next departure location is the same as this arrival location
            self._departure_location = arrival_location
            return self

        def build(self) -> "Voyage":
            return Voyage(self._voyage_number, Schedule(self._carrier_movements))


# Null object pattern
Voyage.NONE = Voyage(VoyageNumber(""), Schedule.EMPTY)
