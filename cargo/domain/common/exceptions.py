"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
construction contracts are violated or domain invariants are broken.
They should be caught and translated to appropriate responses
by the layers that call into the domain.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when domain validation fails.

    Example: Malformed UN/LOCODE.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class MissingRequiredFieldError(ValidationError):
    """
    Raised when a required constructor argument is absent.

    This is a programming-contract violation, not a transient condition,
    so callers should let it propagate rather than retry.

    Example: Building a voyage without a voyage number.
    """

    def __init__(self, owner: str, field: str) -> None:
        super().__init__(f"{owner}: {field} is required", field=field)
        self.owner = owner


class EntityNotFoundError(DomainError):
    """
    Raised when an entity cannot be found.

    Example: Looking up a voyage by a number nobody has registered.
    """

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": entity_id})
        self.entity_type = entity_type
        self.entity_id = entity_id
