"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so callers can catch them uniformly and turn them into rejections.

Three kinds sit under the base class:

- ``ValidationError``: a required field is missing or malformed when an
  entity is constructed.
- ``InvariantViolationError``: a mutation or calculation would break a
  Cart or Money invariant.
- ``PriceLookupError``: a strategy was asked for a price it does not have.
"""

from __future__ import annotations

from typing import Any


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A required field was missing or malformed at construction."""


class InvariantViolationError(DomainException):
    """A mutation would break an aggregate or value object invariant."""


class PriceLookupError(DomainException):
    """A price was requested for a product outside the strategy's table."""


# --- Validation ---------------------------------------------------------------


class MissingCustomerIdError(ValidationError):
    def __init__(self) -> None:
        super().__init__("Customer ID is required")


class InvalidFirstNameError(ValidationError):
    def __init__(self) -> None:
        super().__init__("First name is required")


class InvalidLastNameError(ValidationError):
    def __init__(self) -> None:
        super().__init__("Last name is required")


class InvalidCompanyNameError(ValidationError):
    def __init__(self) -> None:
        super().__init__("Company name is required")


class InvalidRegistrationNumberError(ValidationError):
    def __init__(self) -> None:
        super().__init__("Registration number is required")


class InvalidAnnualTurnoverError(ValidationError):

    def __init__(self, turnover: Any) -> None:
        super().__init__(f"Annual turnover must be a non-negative amount, got {turnover!r}")
        self.turnover = turnover


# --- Invariants ---------------------------------------------------------------


class InvalidAmountError(InvariantViolationError):

    def __init__(self, amount: Any, reason: str = "cannot be negative") -> None:
        super().__init__(f"Money amount {reason}, got {amount}")
        self.amount = amount
        self.reason = reason


class InvalidQuantityError(InvariantViolationError):

    def __init__(self, quantity: int) -> None:
        super().__init__(f"Quantity must be positive, got {quantity}")
        self.quantity = quantity


class InvalidProductTypeError(InvariantViolationError):

    def __init__(self, product: Any) -> None:
        super().__init__(f"Product '{product}' is not priced by the current strategy")
        self.product = product


class MissingCustomerError(InvariantViolationError):
    def __init__(self) -> None:
        super().__init__("A cart cannot be created without a valid customer")


class MissingPricingStrategyError(InvariantViolationError):
    def __init__(self) -> None:
        super().__init__("No pricing strategy could be resolved for the customer")


# --- Lookup -------------------------------------------------------------------


class UnknownProductError(PriceLookupError):

    def __init__(self, product: Any) -> None:
        super().__init__(f"No unit price defined for product '{product}'")
        self.product = product
