"""Customer entities.

A customer knows which pricing strategy applies to it. The cart never
inspects the customer's concrete type; it simply asks for the strategy.
Customers are frozen: identity and the fields that drive classification
cannot change after construction. A customer whose profile changes is
represented by a new Customer object.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from shop_pricing.domain.exceptions import (
    InvalidAnnualTurnoverError,
    InvalidCompanyNameError,
    InvalidFirstNameError,
    InvalidLastNameError,
    InvalidRegistrationNumberError,
    MissingCustomerIdError,
)
from shop_pricing.domain.service.pricing_strategy import (
    IndividualPricingStrategy,
    LargeBusinessPricingStrategy,
    PricingStrategy,
    SmallBusinessPricingStrategy,
)

# Turnover strictly above this makes a business a large account.
LARGE_ACCOUNT_THRESHOLD = Decimal("10000000")


def _is_blank(value: str | None) -> bool:
    return not isinstance(value, str) or not value.strip()


@dataclass(frozen=True)
class Customer(ABC):
    """Common identity shared by every kind of customer.

    Uniqueness of ``customer_id`` across customers is the caller's concern.
    """

    customer_id: str

    def __post_init__(self) -> None:
        if _is_blank(self.customer_id):
            raise MissingCustomerIdError()

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable name used in logs."""

    @abstractmethod
    def resolve_pricing_strategy(self) -> PricingStrategy:
        """Return the strategy applicable to the customer's current state."""


@dataclass(frozen=True)
class IndividualCustomer(Customer):
    first_name: str
    last_name: str

    def __post_init__(self) -> None:
        super().__post_init__()
        if _is_blank(self.first_name):
            raise InvalidFirstNameError()
        if _is_blank(self.last_name):
            raise InvalidLastNameError()

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def resolve_pricing_strategy(self) -> PricingStrategy:
        return IndividualPricingStrategy()


@dataclass(frozen=True)
class BusinessCustomer(Customer):
    """A company buying on its own account.

    ``annual_turnover`` accepts an int for convenience and is stored as a
    Decimal so the large-account comparison is exact.
    """

    company_name: str
    registration_number: str
    annual_turnover: Decimal
    vat_number: str | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        if _is_blank(self.company_name):
            raise InvalidCompanyNameError()
        if _is_blank(self.registration_number):
            raise InvalidRegistrationNumberError()

        turnover = self.annual_turnover
        if isinstance(turnover, int) and not isinstance(turnover, bool):
            turnover = Decimal(turnover)
            object.__setattr__(self, "annual_turnover", turnover)
        if not isinstance(turnover, Decimal) or not turnover.is_finite() or turnover < 0:
            raise InvalidAnnualTurnoverError(self.annual_turnover)

    @property
    def is_large_account(self) -> bool:
        return self.annual_turnover > LARGE_ACCOUNT_THRESHOLD

    @property
    def display_name(self) -> str:
        return self.company_name

    def resolve_pricing_strategy(self) -> PricingStrategy:
        if self.is_large_account:
            return LargeBusinessPricingStrategy()
        return SmallBusinessPricingStrategy()
