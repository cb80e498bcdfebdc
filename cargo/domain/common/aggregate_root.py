"""
Base class for Aggregate Roots.

Aggregate Roots are the entry point to an aggregate - a cluster of domain
objects that are treated as a single unit. All external references should
go through the aggregate root, and all invariants are enforced here.

Example:
    class Voyage(AggregateRoot[VoyageNumber]):
        def departure_rescheduled(self, location: Location, new_time: datetime) -> None:
            ...
            self._record_event(DepartureRescheduled(...))
"""

from dataclasses import dataclass, field
from typing import Generic

from .domain_event import DomainEvent
from .entity import Entity, IdType


@dataclass(eq=False, repr=False)
class AggregateRoot(Entity[IdType], Generic[IdType]):
    """
    Base class for Aggregate Roots in the domain model.

    Aggregate Roots are:
    - Entry point to an aggregate (cluster of related objects)
    - Responsible for maintaining invariants
    - The only object referenced from outside the aggregate
    - Can record domain events for later dispatch

    Domain events are collected and can be dispatched after
    the aggregate is saved by whoever owns it.
    """

    _events: list[DomainEvent] = field(
        default_factory=list, repr=False, compare=False, kw_only=True
    )

    def _record_event(self, event: DomainEvent) -> None:
        """Record a domain event to be dispatched later."""
        self._events.append(event)

    def collect_events(self) -> list[DomainEvent]:
        """
        Collect and clear all recorded domain events.

        This is called by the application layer after saving the aggregate.
        """
        events = self._events.copy()
        self._events.clear()
        return events

    @property
    def pending_events(self) -> list[DomainEvent]:
        """Return pending events without clearing them."""
        return self._events.copy()
