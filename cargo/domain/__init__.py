"""
Domain layer.

The domain layer contains the core shipping model of the application.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: Objects with identity and lifecycle (Location)
- Value Objects: Immutable objects defined by attributes (CarrierMovement, Schedule)
- Aggregate Roots: Consistency boundaries (Voyage)
- Domain Events: Notifications of significant domain occurrences
"""
