from typing import Protocol

from cargo.domain.common.value_objects import VoyageNumber
from cargo.domain.voyage.entities.voyage import Voyage


class VoyageRepositoryProtocol(Protocol):
    def find_by_voyage_number(self, voyage_number: VoyageNumber) -> Voyage | None: ...

    def save(self, voyage: Voyage) -> Voyage: ...
