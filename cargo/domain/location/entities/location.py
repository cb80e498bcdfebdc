"""
Location entity for ports and other places a carrier calls at.
"""

from dataclasses import dataclass
from typing import ClassVar

from cargo.domain.common.entity import Entity
from cargo.domain.common.exceptions import MissingRequiredFieldError, ValidationError
from cargo.domain.common.value_objects import UnLocode


@dataclass(eq=False)
class Location(Entity[UnLocode]):
    """
    A port or other place a carrier departs from or arrives at.

    Business Rules:
    - Identity is the UN/LOCODE; the name is descriptive only
    - Two locations are the same iff their UN/LOCODEs are the same
    """

    UNKNOWN: ClassVar["Location"]

    unlocode: UnLocode
    name: str

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.unlocode is None:
            raise MissingRequiredFieldError("Location", "unlocode")
        if self.name is None:
            raise MissingRequiredFieldError("Location", "name")
        if not self.name.strip():
            raise ValidationError("Location name cannot be empty", field="name")

    @property
    def id(self) -> UnLocode:  # type: ignore[override]
        return self.unlocode

    def __str__(self) -> str:
        return f"{self.name} [{self.unlocode}]"

    @classmethod
    def create(cls, unlocode: str, name: str) -> "Location":
        """Factory for creating a location from raw input."""
        return cls(unlocode=UnLocode(unlocode), name=name.strip())


# Null object pattern
Location.UNKNOWN = Location(UnLocode("XXXXX"), "Unknown location")
