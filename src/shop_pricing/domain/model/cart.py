"""Cart aggregate — the core of the domain.

The Cart is an aggregate root bound to exactly one customer. It stores
how many units of each product were added and prices them with the
customer's current pricing strategy whenever a total is requested.

Invariants:
- A cart always belongs to a customer, and that link never changes.
- Every stored quantity is strictly positive.
- Only products priced by the customer's current strategy are stored.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from uuid import UUID, uuid4

from shop_pricing.domain.events import ProductAddedToCart
from shop_pricing.domain.exceptions import (
    InvalidProductTypeError,
    InvalidQuantityError,
    MissingCustomerError,
    MissingPricingStrategyError,
)
from shop_pricing.domain.model.aggregate import AggregateRoot
from shop_pricing.domain.model.customer import Customer
from shop_pricing.domain.model.product import ProductType
from shop_pricing.domain.model.value_objects import Money
from shop_pricing.domain.service.pricing_strategy import PricingStrategy

logger = logging.getLogger(__name__)


class Cart(AggregateRoot):
    """Aggregate root for a customer's shopping cart.

    Not synchronised: concurrent callers on one cart must serialise
    access themselves.
    """

    def __init__(self, customer: Customer | None) -> None:
        if not isinstance(customer, Customer):
            raise MissingCustomerError()
        super().__init__(uuid4())
        self._customer = customer
        self._quantities: dict[ProductType, int] = {}

    # --- Read-only views ------------------------------------------------------

    @property
    def id(self) -> UUID:
        return self._id  # type: ignore[return-value]

    @property
    def customer(self) -> Customer:
        return self._customer

    @property
    def items(self) -> Mapping[ProductType, int]:
        """Snapshot of product quantities; later mutations do not show up."""
        return MappingProxyType(dict(self._quantities))

    def quantity_of(self, product: ProductType) -> int:
        return self._quantities.get(product, 0)

    # --- Mutation -------------------------------------------------------------

    def add_product(self, product: ProductType, quantity: int) -> None:
        """Add a positive quantity of a priced product.

        All checks run before the quantity map is touched, so a rejected
        call leaves the cart exactly as it was. A successful call records
        one ``ProductAddedToCart`` event after the quantity is committed.
        """
        try:
            self._guard_against_non_positive_quantity(quantity)
            strategy = self._current_pricing_strategy()
            self._guard_against_unpriced_product(product, strategy)
            new_quantity = self._accumulated_quantity(product, quantity)
        except InvalidQuantityError as exc:
            logger.warning(
                "Cart %s rejected %s x %s: %s", self.id, quantity, product, exc
            )
            raise
        except InvalidProductTypeError:
            logger.warning("Cart %s rejected unpriced product %r", self.id, product)
            raise
        except MissingPricingStrategyError:
            logger.warning(
                "Cart %s rejected %s x %s: no pricing strategy for customer %s",
                self.id, quantity, product, self._customer.customer_id,
            )
            raise

        self._quantities[product] = new_quantity

        unit_price = self._current_pricing_strategy().get_unit_price(product)
        self._record_event(
            ProductAddedToCart(
                cart_id=self.id,
                customer_id=self._customer.customer_id,
                product=product,
                quantity_added=quantity,
                new_total_quantity=new_quantity,
                unit_price=unit_price,
            )
        )
        logger.debug(
            "Cart %s: added %d x %s at %s (now %d)",
            self.id, quantity, product, unit_price, new_quantity,
        )

    # --- Computed values ------------------------------------------------------

    def calculate_total(self) -> Money:
        """Price every stored product with the customer's current strategy.

        The strategy is resolved again on each call rather than frozen at
        the time products were added.
        """
        strategy = self._current_pricing_strategy()
        total = Money.ZERO
        for product, quantity in self._quantities.items():
            total = total + strategy.get_unit_price(product) * quantity

        logger.debug(
            "Cart %s total for %s under %r: %s",
            self.id, self._customer.display_name, strategy, total,
        )
        return total

    # --- Invariant enforcement ------------------------------------------------

    @staticmethod
    def _guard_against_non_positive_quantity(quantity: int) -> None:
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise InvalidQuantityError(quantity)

    @staticmethod
    def _guard_against_unpriced_product(
        product: ProductType, strategy: PricingStrategy
    ) -> None:
        if strategy.try_get_unit_price(product) is None:
            raise InvalidProductTypeError(product)

    def _current_pricing_strategy(self) -> PricingStrategy:
        strategy = self._customer.resolve_pricing_strategy()
        if strategy is None:
            raise MissingPricingStrategyError()
        return strategy

    def _accumulated_quantity(self, product: ProductType, quantity: int) -> int:
        new_quantity = self.quantity_of(product) + quantity
        if new_quantity <= 0:
            raise InvalidQuantityError(new_quantity)
        return new_quantity
