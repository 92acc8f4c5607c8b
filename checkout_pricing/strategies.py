"""Pricing strategies.

A strategy maps ``(quantity, unit_price)`` to the subtotal for that many
units of one product. The classes below cover the common shapes; any
callable with the same signature can be used in their place.
"""

from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Protocol

from .money import to_money
from .validation import require_non_negative, require_positive


class PricingStrategy(Protocol):
    """Callable computing a subtotal for a quantity of one product."""

    def __call__(self, quantity: int, unit_price: Decimal) -> Decimal: ...


@dataclass(frozen=True)
class FlatPrice:
    """Every unit at its listed price."""

    def __call__(self, quantity: int, unit_price: Decimal) -> Decimal:
        return quantity * unit_price


@dataclass(frozen=True)
class BuyNGetMFree:
    """Out of every ``buy + free`` units only ``buy`` are charged."""

    buy: int = 1
    free: int = 1

    def __post_init__(self) -> None:
        require_positive(self.buy, "buy must be at least 1")
        require_non_negative(self.free, "free cannot be negative")

    def __call__(self, quantity: int, unit_price: Decimal) -> Decimal:
        groups, remainder = divmod(quantity, self.buy + self.free)
        charged = groups * self.buy + min(remainder, self.buy)
        return charged * unit_price


@dataclass(frozen=True)
class BulkPrice:
    """All units drop to ``price`` once ``threshold`` units are bought."""

    threshold: int
    price: Decimal

    def __post_init__(self) -> None:
        require_positive(self.threshold, "threshold must be at least 1")
        price = to_money(self.price)
        require_non_negative(price, "bulk price cannot be negative")
        object.__setattr__(self, "price", price)

    def __call__(self, quantity: int, unit_price: Decimal) -> Decimal:
        if quantity >= self.threshold:
            return quantity * self.price
        return quantity * unit_price


@dataclass(frozen=True)
class BulkDiscount:
    """All units drop to ``unit_price * factor`` once ``threshold`` units are bought.

    ``factor`` is kept as a ``Fraction`` so thirds and similar ratios are
    applied as an exact multiply-then-divide instead of a truncated decimal.
    """

    threshold: int
    factor: Fraction

    def __post_init__(self) -> None:
        require_positive(self.threshold, "threshold must be at least 1")
        factor = Fraction(str(self.factor)) if isinstance(self.factor, float) else Fraction(self.factor)
        require_non_negative(factor, "discount factor cannot be negative")
        object.__setattr__(self, "factor", factor)

    def __call__(self, quantity: int, unit_price: Decimal) -> Decimal:
        if quantity >= self.threshold:
            return quantity * unit_price * self.factor.numerator / self.factor.denominator
        return quantity * unit_price
