"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. It contains use cases that represent the operations available
to external actors.

This layer contains:
- Use Cases: Orchestrate domain logic (create a voyage, reschedule a departure)
- DTOs: Data transfer objects for input
- Protocols: Interfaces for the collaborators that load and save aggregates
"""
