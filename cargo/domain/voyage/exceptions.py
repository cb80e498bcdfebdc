"""Voyage module domain exceptions."""

from cargo.domain.common.exceptions import EntityNotFoundError


class VoyageNotFoundError(EntityNotFoundError):
    """Raised when a voyage cannot be found."""

    def __init__(self, voyage_number: str) -> None:
        super().__init__("Voyage", voyage_number)
