"""
Use case for registering a new voyage.

Builds the voyage's itinerary through Voyage.Builder and hands the finished
aggregate to the voyage repository.
"""

from dataclasses import dataclass
from datetime import datetime

import structlog

from cargo.application.voyage.protocols import (
    LocationRepositoryProtocol,
    VoyageRepositoryProtocol,
)
from cargo.domain.common.exceptions import DomainError
from cargo.domain.common.value_objects import UnLocode, VoyageNumber
from cargo.domain.location.entities.location import Location
from cargo.domain.location.exceptions import LocationNotFoundError
from cargo.domain.voyage.entities.voyage import Voyage

logger = structlog.get_logger(__name__)


@dataclass
class MovementInput:
    """
    Simple data class for passing one leg of an itinerary to the use case.
    """

    arrival_unlocode: str
    departure_time: datetime
    arrival_time: datetime


class CreateVoyageUseCase:
    """Use case for voyage registration."""

    def __init__(
        self,
        voyage_repository: VoyageRepositoryProtocol,
        location_repository: LocationRepositoryProtocol,
    ) -> None:
        self.voyage_repository = voyage_repository
        self.location_repository = location_repository

    def create_voyage(
        self,
        voyage_number: str,
        departure_unlocode: str,
        movements: list[MovementInput],
    ) -> Voyage:
        """
        Register a voyage calling at a chain of locations.

        Args:
            voyage_number: Voyage number (primitive str, converted to value object)
            departure_unlocode: UN/LOCODE the voyage first departs from
            movements: Legs in itinerary order

        Returns:
            The saved voyage

        Raises:
            DomainError: If a voyage with this number is already registered
            LocationNotFoundError: If a UN/LOCODE does not resolve to a location
        """
        voyage_number_vo = VoyageNumber(voyage_number)

        existing = self.voyage_repository.find_by_voyage_number(voyage_number_vo)
        if existing is not None and not existing.is_none():
            logger.warning("voyage_already_exists", voyage_number=voyage_number)
            raise DomainError(
                f"Voyage {voyage_number} already exists",
                {"voyage_number": voyage_number},
            )

        departure_location = self._resolve_location(departure_unlocode)
        builder = Voyage.Builder(voyage_number_vo, departure_location)
        for movement in movements:
            builder.add_movement(
                self._resolve_location(movement.arrival_unlocode),
                movement.departure_time,
                movement.arrival_time,
            )

        voyage = self.voyage_repository.save(builder.build())

        logger.info(
            "voyage_created",
            voyage_number=voyage_number,
            departure_location=str(departure_location.unlocode),
            leg_count=len(voyage.schedule),
        )
        return voyage

    def _resolve_location(self, unlocode: str) -> Location:
        location = self.location_repository.find_by_unlocode(UnLocode(unlocode))
        if location is None:
            logger.error("location_not_found", unlocode=unlocode)
            raise LocationNotFoundError(unlocode)
        return location
