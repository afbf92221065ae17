"""Tests for publishing drained cart events through an EventSink."""

import logging

from shop_pricing.domain.events import DomainEvent
from shop_pricing.domain.model.cart import Cart
from shop_pricing.domain.model.customer import IndividualCustomer
from shop_pricing.domain.model.product import ProductType
from shop_pricing.infrastructure.events.logging_event_sink import LoggingEventSink
from tests.fakes import InMemoryEventSink

SINK_LOGGER = "shop_pricing.infrastructure.events.logging_event_sink"


def _cart_with_two_additions() -> Cart:
    cart = Cart(IndividualCustomer("C001", "Jean", "Dupont"))
    cart.add_product(ProductType.LAPTOP, 1)
    cart.add_product(ProductType.HIGH_END_PHONE, 2)
    return cart


class TestLoggingEventSink:

    def test_logs_one_line_per_event(self, caplog):
        cart = _cart_with_two_additions()
        sink = LoggingEventSink()

        with caplog.at_level(logging.INFO, logger=SINK_LOGGER):
            sink.publish(cart.pop_domain_events())

        messages = [r.getMessage() for r in caplog.records if r.name == SINK_LOGGER]
        assert len(messages) == 2
        assert messages[0].startswith("ProductAddedToCart")
        assert f"cart={cart.id}" in messages[0]
        assert "product=Laptop" in messages[0]
        assert "product=HighEndPhone added=2 total=2 unit_price=1500" in messages[1]
        assert sink.published_count == 2

    def test_publishing_nothing_logs_nothing(self, caplog):
        sink = LoggingEventSink()
        with caplog.at_level(logging.INFO, logger=SINK_LOGGER):
            sink.publish(())
        assert caplog.records == []
        assert sink.published_count == 0

    def test_uses_injected_logger(self, caplog):
        sink = LoggingEventSink(logging.getLogger("custom.events"))
        with caplog.at_level(logging.INFO, logger="custom.events"):
            sink.publish([DomainEvent()])
        assert caplog.records[0].name == "custom.events"
        assert caplog.records[0].getMessage().startswith("DomainEvent at=")


class TestDrainIntoSink:

    def test_drained_events_reach_sink_in_order(self):
        cart = _cart_with_two_additions()
        sink = InMemoryEventSink()

        sink.publish(cart.pop_domain_events())

        assert [e.product for e in sink.published] == [
            ProductType.LAPTOP,
            ProductType.HIGH_END_PHONE,
        ]
        assert cart.domain_events == ()

    def test_second_drain_publishes_nothing_new(self):
        cart = _cart_with_two_additions()
        sink = InMemoryEventSink()

        sink.publish(cart.pop_domain_events())
        sink.publish(cart.pop_domain_events())

        assert len(sink.published) == 2
