"""Location module domain exceptions."""

from cargo.domain.common.exceptions import EntityNotFoundError


class LocationNotFoundError(EntityNotFoundError):
    """Raised when a location cannot be found."""

    def __init__(self, unlocode: str) -> None:
        super().__init__("Location", unlocode)
