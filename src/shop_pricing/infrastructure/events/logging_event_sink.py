"""EventSink implementation that writes each event to the log.

Useful wherever no message bus is wired in: events drained from an
aggregate are still visible, one line per event, in publication order.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from shop_pricing.domain.events import DomainEvent, EventSink, ProductAddedToCart

logger = logging.getLogger(__name__)


class LoggingEventSink(EventSink):

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger
        self._published = 0

    @property
    def published_count(self) -> int:
        return self._published

    def publish(self, events: Sequence[DomainEvent]) -> None:
        for event in events:
            self._log.info("%s", self._describe(event))
            self._published += 1

    # --- Formatting -----------------------------------------------------------

    @staticmethod
    def _describe(event: DomainEvent) -> str:
        occurred = event.occurred_on.isoformat()
        if isinstance(event, ProductAddedToCart):
            return (
                f"{event.event_type} cart={event.cart_id} "
                f"customer={event.customer_id} product={event.product} "
                f"added={event.quantity_added} total={event.new_total_quantity} "
                f"unit_price={event.unit_price.amount} at={occurred}"
            )
        return f"{event.event_type} at={occurred}"
