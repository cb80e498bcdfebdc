from typing import Protocol

from cargo.domain.common.value_objects import UnLocode
from cargo.domain.location.entities.location import Location


class LocationRepositoryProtocol(Protocol):
    def find_by_unlocode(self, unlocode: UnLocode) -> Location | None: ...
