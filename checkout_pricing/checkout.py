"""Checkout: scan products and price the basket.

The basket is grouped by product code on every ``total()`` call. Each
group is priced by the pricing rule registered for its code, or at unit
price times quantity when there is none, and the sum is rounded to the
currency quantum.

A ``Checkout`` is not synchronised. Use one instance per sale, or
serialise access to it.
"""

import uuid
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

import structlog

from .config import CheckoutSettings
from .errors import CheckoutError, InvalidArgumentError
from .money import ZERO, round_money, to_money
from .product import Product
from .rules import PricingRule

logger = structlog.get_logger()


@dataclass(frozen=True)
class BasketLine:
    """Quantity and unit price of one product code in the basket."""

    product_code: str
    quantity: int
    unit_price: Decimal


class Checkout:
    """Accumulates scanned products and prices them against a rule set."""

    def __init__(
        self,
        pricing_rules: Sequence[PricingRule],
        settings: CheckoutSettings | None = None,
    ):
        if not isinstance(pricing_rules, Sequence):
            raise InvalidArgumentError(
                f"pricing rules must be a sequence, got {type(pricing_rules).__name__}"
            )

        self.pricing_rules = pricing_rules
        self.settings = settings or CheckoutSettings()
        self._basket: list[Product] = []
        self.checkout_id = uuid.uuid4().hex
        self.log = logger.bind(checkout_id=self.checkout_id)

        seen = set()
        for rule in pricing_rules:
            if rule.product_code in seen:
                # First registered rule wins.
                self.log.warning("duplicate_pricing_rule", product_code=rule.product_code)
            seen.add(rule.product_code)

    def __len__(self) -> int:
        return len(self._basket)

    @property
    def basket(self) -> tuple[Product, ...]:
        return tuple(self._basket)

    def scan(self, product: Product) -> None:
        """Add a product to the basket.

        Raises:
            InvalidArgumentError: ``product`` is not a ``Product``. The basket is unchanged.
        """
        if not isinstance(product, Product):
            self.log.warning("scan_rejected", value_type=type(product).__name__)
            raise InvalidArgumentError(f"not a product: {product!r}")

        self._basket.append(product)
        self.log.debug("product_scanned", product_code=product.code, basket_size=len(self._basket))

    def summary(self) -> list[BasketLine]:
        """Group the basket by product code, in first-scanned order.

        The unit price of a group is the price of its first scanned item.
        """
        quantities: dict[str, int] = {}
        prices: dict[str, Decimal] = {}

        for product in self._basket:
            if product.code not in quantities:
                quantities[product.code] = 0
                prices[product.code] = product.price
            elif product.price != prices[product.code]:
                self.log.warning(
                    "divergent_unit_price",
                    product_code=product.code,
                    unit_price=str(prices[product.code]),
                    scanned_price=str(product.price),
                )
            quantities[product.code] += 1

        return [BasketLine(code, quantities[code], prices[code]) for code in quantities]

    def subtotals(self) -> dict[str, Decimal]:
        """Unrounded subtotal per product code."""
        return {line.product_code: self._subtotal(line) for line in self.summary()}

    def total(self) -> Decimal:
        """Total price of the basket, rounded to the currency quantum."""
        if not self._basket:
            return ZERO

        amount = sum(self.subtotals().values(), ZERO)
        total = round_money(amount, self.settings.currency_quantum, self.settings.rounding)

        self.log.info("basket_totalled", items=len(self._basket), total=str(total))
        return total

    def _rule_for(self, product_code: str) -> PricingRule | None:
        for rule in self.pricing_rules:
            if rule.product_code == product_code:
                return rule
        return None

    def _subtotal(self, line: BasketLine) -> Decimal:
        rule = self._rule_for(line.product_code)
        if rule is None:
            return line.quantity * line.unit_price

        try:
            return to_money(rule.apply(line.product_code, line.quantity, line.unit_price))
        except CheckoutError as e:
            self.log.error("pricing_rule_rejected", product_code=line.product_code, error=str(e))
            raise
