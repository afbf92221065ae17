"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    Context,
    Decimal,
    Inexact,
    InvalidOperation,
    localcontext,
)
from typing import ClassVar

from shop_pricing.domain.exceptions import InvalidAmountError, InvalidQuantityError

CURRENCY_SYMBOL = "€"

# Unrounded arithmetic: results keep every digit, anything lossy traps.
_EXACT = Context(
    prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, traps=[Inexact, InvalidOperation]
)


@contextmanager
def _exact_arithmetic(*operands: object) -> Iterator[None]:
    try:
        with localcontext(_EXACT):
            yield
    except (Inexact, InvalidOperation) as exc:
        raise InvalidAmountError(operands, reason="cannot be computed exactly") from exc


@dataclass(frozen=True)
class Money:
    """Non-negative amount in euros.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations. Every operation returns a new
    instance that goes through the same validation.
    """

    ZERO: ClassVar[Money]

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise TypeError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise InvalidAmountError(self.amount, reason="must be a finite number")
        if self.amount < Decimal("0"):
            raise InvalidAmountError(self.amount)

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        with _exact_arithmetic(self.amount, other.amount):
            amount = self.amount + other.amount
        return Money(amount)

    def __mul__(self, quantity: int) -> Money:
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise TypeError(f"Can only multiply Money by int, got {type(quantity).__name__}")
        if quantity < 0:
            raise InvalidQuantityError(quantity)
        with _exact_arithmetic(self.amount, quantity):
            amount = self.amount * quantity
        return Money(amount)

    __rmul__ = __mul__

    def __lt__(self, other: Money) -> bool:
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        return self.amount >= other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount:.2f} {CURRENCY_SYMBOL}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise InvalidAmountError(amount, reason="is not a number") from exc


Money.ZERO = Money(Decimal("0"))
