"""Voyage domain events."""

from dataclasses import dataclass
from datetime import datetime

from cargo.domain.common.domain_event import DomainEvent
from cargo.domain.common.value_objects import UnLocode, VoyageNumber


@dataclass(frozen=True)
class DepartureRescheduled(DomainEvent):
    """Departures from a location were moved to a new time."""

    voyage_number: VoyageNumber
    location: UnLocode
    new_departure_time: datetime
    legs_rescheduled: int
