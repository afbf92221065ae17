"""Catalog of priceable products.

The catalog is closed: every pricing strategy must price every member.
"""

from __future__ import annotations

from enum import Enum


class ProductType(Enum):
    HIGH_END_PHONE = "HighEndPhone"
    MID_RANGE_PHONE = "MidRangePhone"
    LAPTOP = "Laptop"

    def __str__(self) -> str:
        return self.value
