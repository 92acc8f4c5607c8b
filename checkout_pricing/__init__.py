"""Supermarket checkout pricing with per-product special rules."""

from .checkout import BasketLine, Checkout
from .config import CheckoutSettings
from .errors import (
    CheckoutError,
    InvalidArgumentError,
    InvalidProductError,
    InvalidQuantityError,
)
from .logging_setup import configure_logging
from .money import CENT, ZERO, round_money, to_money
from .product import Product
from .rules import PricingRule
from .strategies import (
    BulkDiscount,
    BulkPrice,
    BuyNGetMFree,
    FlatPrice,
    PricingStrategy,
)

__all__ = [
    "BasketLine",
    "BulkDiscount",
    "BulkPrice",
    "BuyNGetMFree",
    "CENT",
    "Checkout",
    "CheckoutError",
    "CheckoutSettings",
    "FlatPrice",
    "InvalidArgumentError",
    "InvalidProductError",
    "InvalidQuantityError",
    "PricingRule",
    "PricingStrategy",
    "Product",
    "ZERO",
    "configure_logging",
    "round_money",
    "to_money",
]
