"""Use case for rescheduling departures of an existing voyage."""

from datetime import datetime

import structlog

from cargo.application.voyage.protocols import (
    LocationRepositoryProtocol,
    VoyageRepositoryProtocol,
)
from cargo.domain.common.domain_event import DomainEvent
from cargo.domain.common.value_objects import UnLocode, VoyageNumber
from cargo.domain.location.exceptions import LocationNotFoundError
from cargo.domain.voyage.entities.voyage import Voyage
from cargo.domain.voyage.events import DepartureRescheduled
from cargo.domain.voyage.exceptions import VoyageNotFoundError

logger = structlog.get_logger(__name__)


class RescheduleDepartureUseCase:
    def __init__(
        self,
        voyage_repository: VoyageRepositoryProtocol,
        location_repository: LocationRepositoryProtocol,
    ) -> None:
        self.voyage_repository = voyage_repository
        self.location_repository = location_repository

    def reschedule_departure(
        self,
        voyage_number: str,
        unlocode: str,
        new_departure_time: datetime,
    ) -> tuple[Voyage, list[DomainEvent]]:
        """
        Move every departure of a voyage from a location to a new time.

        A voyage that never calls at the location is saved unchanged.

        Args:
            voyage_number: Voyage number of the voyage to reschedule
            unlocode: UN/LOCODE of the departure location
            new_departure_time: New departure time

        Returns:
            Tuple of (saved voyage, domain events raised by the reschedule)

        Raises:
            VoyageNotFoundError: If no voyage has this number
            LocationNotFoundError: If the UN/LOCODE does not resolve to a location
        """
        voyage = self.voyage_repository.find_by_voyage_number(VoyageNumber(voyage_number))
        if voyage is None or voyage.is_none():
            raise VoyageNotFoundError(voyage_number)

        location = self.location_repository.find_by_unlocode(UnLocode(unlocode))
        if location is None:
            raise LocationNotFoundError(unlocode)

        voyage.departure_rescheduled(location, new_departure_time)
        voyage = self.voyage_repository.save(voyage)
        events = voyage.collect_events()

        legs_rescheduled = sum(
            event.legs_rescheduled for event in events if isinstance(event, DepartureRescheduled)
        )
        if legs_rescheduled == 0:
            logger.info(
                "no_departure_to_reschedule",
                voyage_number=voyage_number,
                unlocode=str(location.unlocode),
            )
        else:
            logger.info(
                "departure_rescheduled",
                voyage_number=voyage_number,
                unlocode=str(location.unlocode),
                new_departure_time=new_departure_time.isoformat(),
                legs_rescheduled=legs_rescheduled,
            )
        return voyage, events
