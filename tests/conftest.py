"""Shared pytest fixtures: the sample catalogue and its pricing rules."""

from decimal import Decimal
from fractions import Fraction

import pytest

from checkout_pricing import Checkout, PricingRule, Product


@pytest.fixture
def green_tea():
    return Product("GR1", "Green Tea", Decimal("3.11"))


@pytest.fixture
def strawberry():
    return Product("SR1", "Strawberry", Decimal("5.00"))


@pytest.fixture
def coffee():
    return Product("CF1", "Coffee", Decimal("11.23"))


@pytest.fixture
def catalogue(green_tea, strawberry, coffee):
    """Products keyed by code."""
    return {p.code: p for p in (green_tea, strawberry, coffee)}


@pytest.fixture
def pricing_rules():
    """Buy-one-get-one-free tea, bulk strawberries, bulk coffee at two thirds."""
    return [
        PricingRule.buy_one_get_one_free("GR1"),
        PricingRule.bulk_price("SR1", 3, Decimal("4.50")),
        PricingRule.bulk_discount("CF1", 3, Fraction(2, 3)),
    ]


@pytest.fixture
def checkout(pricing_rules):
    return Checkout(pricing_rules)
