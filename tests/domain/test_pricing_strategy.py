"""Unit tests for the pricing strategies and their price tables."""

import pytest

from shop_pricing.domain.exceptions import PriceLookupError, UnknownProductError
from shop_pricing.domain.model.product import ProductType
from shop_pricing.domain.model.value_objects import Money
from shop_pricing.domain.service.pricing_strategy import (
    IndividualPricingStrategy,
    LargeBusinessPricingStrategy,
    PricingStrategy,
    SmallBusinessPricingStrategy,
)

ALL_STRATEGIES = [
    IndividualPricingStrategy(),
    SmallBusinessPricingStrategy(),
    LargeBusinessPricingStrategy(),
]


class TestPriceTables:

    @pytest.mark.parametrize(
        "strategy, product, expected",
        [
            (IndividualPricingStrategy(), ProductType.HIGH_END_PHONE, "1500"),
            (IndividualPricingStrategy(), ProductType.MID_RANGE_PHONE, "800"),
            (IndividualPricingStrategy(), ProductType.LAPTOP, "1200"),
            (SmallBusinessPricingStrategy(), ProductType.HIGH_END_PHONE, "1150"),
            (SmallBusinessPricingStrategy(), ProductType.MID_RANGE_PHONE, "600"),
            (SmallBusinessPricingStrategy(), ProductType.LAPTOP, "1000"),
            (LargeBusinessPricingStrategy(), ProductType.HIGH_END_PHONE, "1000"),
            (LargeBusinessPricingStrategy(), ProductType.MID_RANGE_PHONE, "550"),
            (LargeBusinessPricingStrategy(), ProductType.LAPTOP, "900"),
        ],
    )
    def test_unit_price(self, strategy, product, expected):
        assert strategy.get_unit_price(product) == Money.of(expected)

    @pytest.mark.parametrize("strategy", ALL_STRATEGIES, ids=repr)
    def test_every_strategy_prices_the_whole_catalog(self, strategy):
        assert set(strategy.prices) == set(ProductType)

    @pytest.mark.parametrize("strategy", ALL_STRATEGIES, ids=repr)
    def test_table_cannot_be_modified(self, strategy):
        with pytest.raises(TypeError):
            strategy.prices[ProductType.LAPTOP] = Money.of("1")  # type: ignore[index]
        assert strategy.get_unit_price(ProductType.LAPTOP) != Money.of("1")


class TestLookup:

    def test_try_get_returns_same_price_as_get(self):
        strategy = SmallBusinessPricingStrategy()
        for product in ProductType:
            assert strategy.try_get_unit_price(product) == strategy.get_unit_price(product)

    def test_try_get_returns_none_for_unpriced_product(self):
        assert IndividualPricingStrategy().try_get_unit_price("Tablet") is None  # type: ignore[arg-type]

    def test_get_raises_for_unpriced_product(self):
        with pytest.raises(UnknownProductError, match="Tablet") as exc_info:
            IndividualPricingStrategy().get_unit_price("Tablet")  # type: ignore[arg-type]
        assert exc_info.value.product == "Tablet"

    def test_unknown_product_is_a_lookup_error(self):
        with pytest.raises(PriceLookupError):
            LargeBusinessPricingStrategy().get_unit_price("Tablet")  # type: ignore[arg-type]


class TestStrategyBase:

    def test_base_strategy_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            PricingStrategy()  # type: ignore[abstract]

    def test_subclass_without_table_cannot_be_instantiated(self):
        class NoTable(PricingStrategy):
            pass

        with pytest.raises(TypeError):
            NoTable()  # type: ignore[abstract]


class TestStrategyEquality:

    def test_instances_of_same_strategy_are_equal(self):
        assert IndividualPricingStrategy() == IndividualPricingStrategy()

    def test_different_strategies_are_not_equal(self):
        assert SmallBusinessPricingStrategy() != LargeBusinessPricingStrategy()
