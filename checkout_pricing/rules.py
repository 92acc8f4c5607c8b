"""Pricing rules binding one product code to a pricing strategy."""

from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction

from .errors import InvalidProductError, InvalidQuantityError
from .strategies import BulkDiscount, BulkPrice, BuyNGetMFree, PricingStrategy
from .validation import require_callable, require_not_empty


@dataclass(frozen=True)
class PricingRule:
    """Special pricing for a single product code.

    It is assumed that a product has at most one pricing rule.
    """

    product_code: str
    rule_function: PricingStrategy

    def __post_init__(self) -> None:
        require_not_empty(self.product_code, "pricing rule needs a product code")
        require_callable(self.rule_function, f"rule for {self.product_code} is not callable")

    def apply(self, product_code: str, quantity: int, unit_price: Decimal) -> Decimal:
        """Price ``quantity`` units of ``product_code``.

        Raises:
            InvalidProductError: ``product_code`` is not the code this rule was built for.
            InvalidQuantityError: ``quantity`` is below one.
        """
        if product_code != self.product_code:
            raise InvalidProductError(self.product_code, product_code)
        if quantity < 1:
            raise InvalidQuantityError(quantity)

        return self.rule_function(quantity, unit_price)

    @classmethod
    def buy_one_get_one_free(cls, product_code: str) -> "PricingRule":
        return cls(product_code, BuyNGetMFree(buy=1, free=1))

    @classmethod
    def bulk_price(cls, product_code: str, threshold: int, price: Decimal) -> "PricingRule":
        return cls(product_code, BulkPrice(threshold=threshold, price=price))

    @classmethod
    def bulk_discount(cls, product_code: str, threshold: int, factor: Fraction) -> "PricingRule":
        return cls(product_code, BulkDiscount(threshold=threshold, factor=factor))
