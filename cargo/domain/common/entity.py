"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.

Example:
    class Location(Entity[UnLocode]):
        def __init__(self, unlocode: UnLocode, name: str) -> None:
            self.unlocode = unlocode
            self.name = name

        @property
        def id(self) -> UnLocode:
            return self.unlocode
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, TypeVar

from .exceptions import MissingRequiredFieldError
from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Entity IDs are value objects that wrap a business key string.
    They provide type safety to prevent mixing up IDs of different entities.

    Example:
        @dataclass(frozen=True)
        class VoyageNumber(EntityId):
            pass

        voyage_number = VoyageNumber("0101")
        unlocode = UnLocode("CNHKG")
        # These are different types, preventing accidental mixing
    """

    value: str

    def __post_init__(self) -> None:
        if self.value is None:
            raise MissingRequiredFieldError(self.__class__.__name__, "value")
        if not isinstance(self.value, str):
            raise TypeError(f"{self.__class__.__name__} must wrap a string")

    def __str__(self) -> str:
        return self.value

    def to_primitive(self) -> str:
        """Convert to primitive for serialization."""
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Mutable (state can change over time)
    - Have lifecycle (created, modified, discarded)

    Subclasses must expose an 'id' attribute of type IdType.
    """

    id: IdType

    def same_identity_as(self, other: "Entity[IdType] | None") -> bool:
        """Entities compare by identity, not by attributes."""
        return other is not None and self.id.same_value_as(other.id)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, self.__class__):
            return False
        return self.same_identity_as(other)

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
