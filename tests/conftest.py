"""Pytest configuration and fixtures."""

from collections.abc import Generator
from datetime import UTC, datetime, timedelta

import pytest
import structlog

from cargo.domain.common.value_objects import UnLocode, VoyageNumber
from cargo.domain.location import sample_locations
from cargo.domain.location.entities.location import Location
from cargo.domain.voyage.entities.voyage import Voyage


class InMemoryVoyageRepository:
    """Voyage store keyed by voyage number, standing in for the real one."""

    def __init__(self) -> None:
        self.voyages: dict[VoyageNumber, Voyage] = {}
        self.save_count = 0

    def find_by_voyage_number(self, voyage_number: VoyageNumber) -> Voyage | None:
        return self.voyages.get(voyage_number)

    def save(self, voyage: Voyage) -> Voyage:
        self.voyages[voyage.voyage_number] = voyage
        self.save_count += 1
        return voyage


class SampleLocationRepository:
    """Resolves UN/LOCODEs against the well-known sample ports."""

    def find_by_unlocode(self, unlocode: UnLocode) -> Location | None:
        return sample_locations.lookup(str(unlocode))


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Keep structlog configuration from leaking between tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def t0() -> datetime:
    return datetime(2024, 3, 1, 8, 0, tzinfo=UTC)


@pytest.fixture
def times(t0: datetime) -> tuple[datetime, datetime, datetime, datetime]:
    """Four ascending timestamps: two legs' departure and arrival times."""
    return t0, t0 + timedelta(days=2), t0 + timedelta(days=3), t0 + timedelta(days=7)


@pytest.fixture
def voyage_0101(times: tuple[datetime, datetime, datetime, datetime]) -> Voyage:
    """Hongkong -> Tokyo -> New York."""
    t1, t2, t3, t4 = times
    return (
        Voyage.Builder(VoyageNumber("0101"), sample_locations.HONGKONG)
        .add_movement(sample_locations.TOKYO, t1, t2)
        .add_movement(sample_locations.NEWYORK, t3, t4)
        .build()
    )


@pytest.fixture
def voyage_repository() -> InMemoryVoyageRepository:
    return InMemoryVoyageRepository()


@pytest.fixture
def location_repository() -> SampleLocationRepository:
    return SampleLocationRepository()
