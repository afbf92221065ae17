"""Domain events and the outbound contract for publishing them.

Events are immutable records of something that already happened inside an
aggregate. Aggregates only record them; handing them to the outside world
is the job of an ``EventSink`` implementation in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID

from shop_pricing.domain.model.product import ProductType
from shop_pricing.domain.model.value_objects import Money


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """Base class for all domain events."""

    occurred_on: datetime = field(default_factory=_utc_now)

    @property
    def event_type(self) -> str:
        return type(self).__name__


@dataclass(frozen=True, kw_only=True)
class ProductAddedToCart(DomainEvent):
    """A positive quantity of a product was added to a cart.

    ``unit_price`` is the price in force when the product was added; the
    cart total itself is always recomputed from the current strategy.
    """

    cart_id: UUID
    customer_id: str
    product: ProductType
    quantity_added: int
    new_total_quantity: int
    unit_price: Money


class EventSink(ABC):
    """Receives events drained from an aggregate for downstream publication."""

    @abstractmethod
    def publish(self, events: Sequence[DomainEvent]) -> None:
        """Hand over a batch of events, in the order they occurred."""
