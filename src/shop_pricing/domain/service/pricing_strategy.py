"""Domain service: Pricing strategies.

A pricing strategy is a fixed table mapping each catalog product to its
unit price for one customer category. Tables are built once at import
time and exposed read-only, so a strategy instance carries no state of
its own and can be shared freely.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType

from shop_pricing.domain.exceptions import UnknownProductError
from shop_pricing.domain.model.product import ProductType
from shop_pricing.domain.model.value_objects import Money

# ---------------------------------------------------------------------------
# Price tables (EUR)
# ---------------------------------------------------------------------------
INDIVIDUAL_PRICES: Mapping[ProductType, Money] = MappingProxyType({
    ProductType.HIGH_END_PHONE: Money.of(1500),
    ProductType.MID_RANGE_PHONE: Money.of(800),
    ProductType.LAPTOP: Money.of(1200),
})

SMALL_BUSINESS_PRICES: Mapping[ProductType, Money] = MappingProxyType({
    ProductType.HIGH_END_PHONE: Money.of(1150),
    ProductType.MID_RANGE_PHONE: Money.of(600),
    ProductType.LAPTOP: Money.of(1000),
})

LARGE_BUSINESS_PRICES: Mapping[ProductType, Money] = MappingProxyType({
    ProductType.HIGH_END_PHONE: Money.of(1000),
    ProductType.MID_RANGE_PHONE: Money.of(550),
    ProductType.LAPTOP: Money.of(900),
})


class PricingStrategy(ABC):
    """Base class for the per-category price tables.

    Subclasses only supply ``prices``; lookups are shared.
    """

    @property
    @abstractmethod
    def prices(self) -> Mapping[ProductType, Money]:
        """Read-only table of unit prices for every catalog product."""

    def try_get_unit_price(self, product: ProductType) -> Money | None:
        """Return the unit price, or None if the product is not priced.

        Never raises; used by the cart to validate a product before
        mutating its state.
        """
        return self.prices.get(product)

    def get_unit_price(self, product: ProductType) -> Money:
        price = self.try_get_unit_price(product)
        if price is None:
            raise UnknownProductError(product)
        return price

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PricingStrategy):
            return NotImplemented
        return type(self) is type(other) and dict(self.prices) == dict(other.prices)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class IndividualPricingStrategy(PricingStrategy):
    @property
    def prices(self) -> Mapping[ProductType, Money]:
        return INDIVIDUAL_PRICES


class SmallBusinessPricingStrategy(PricingStrategy):
    @property
    def prices(self) -> Mapping[ProductType, Money]:
        return SMALL_BUSINESS_PRICES


class LargeBusinessPricingStrategy(PricingStrategy):
    @property
    def prices(self) -> Mapping[ProductType, Money]:
        return LARGE_BUSINESS_PRICES
