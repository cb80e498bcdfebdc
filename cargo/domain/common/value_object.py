"""
Base class for Value Objects.

Value Objects are immutable objects that are defined by their attributes
rather than by identity. Two value objects are equal if all their
attributes are equal.

Example:
    @dataclass(frozen=True)
    class UnLocode(ValueObject):
        value: str

        def __post_init__(self) -> None:
            if not _UNLOCODE_PATTERN.match(self.value):
                raise ValidationError("Invalid UN/LOCODE")
"""


class ValueObject:
    """
    Base class for Value Objects in the domain model.

    Value Objects are:
    - Immutable (use frozen=True in dataclass)
    - Compared by value (the dataclass-generated __eq__ and __hash__)
    - Self-validating (validation in __post_init__)
    - Freely shareable, since nothing can change them

    Subclasses should be decorated with @dataclass(frozen=True),
    implement validation in __post_init__ and provide to_primitive()
    where they cross a serialization boundary.
    """

    def same_value_as(self, other: object) -> bool:
        """
        Value objects compare by their attribute values, never by reference.

        Unlike ``==`` this reads as a domain statement and tolerates ``None``.
        """
        return other is not None and self == other
