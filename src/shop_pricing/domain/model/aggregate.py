"""Seedwork for entities and aggregate roots.

Entities are compared by identity, never by attribute values.
Aggregate roots additionally collect the domain events raised by their
business methods until an external collaborator drains them.
"""

from __future__ import annotations

from collections.abc import Hashable

from shop_pricing.domain.events import DomainEvent


class Entity:

    def __init__(self, entity_id: Hashable) -> None:
        self._id = entity_id

    @property
    def id(self) -> Hashable:
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return type(self) is type(other) and self._id == other._id

    def __hash__(self) -> int:
        return hash((type(self), self._id))


class AggregateRoot(Entity):
    """Entry point of an aggregate; owns its pending domain events."""

    def __init__(self, entity_id: Hashable) -> None:
        super().__init__(entity_id)
        self._domain_events: list[DomainEvent] = []

    @property
    def domain_events(self) -> tuple[DomainEvent, ...]:
        """Events recorded since the last drain, oldest first."""
        return tuple(self._domain_events)

    def _record_event(self, event: DomainEvent) -> None:
        if event is None:
            raise ValueError("Cannot record a missing domain event")
        self._domain_events.append(event)

    def clear_domain_events(self) -> None:
        self._domain_events.clear()

    def pop_domain_events(self) -> tuple[DomainEvent, ...]:
        """Return the pending events and empty the log in one step."""
        events, self._domain_events = tuple(self._domain_events), []
        return events
