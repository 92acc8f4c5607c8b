"""Error types for checkout pricing."""

from typing import Optional


class CheckoutError(Exception):
    """Base class for checkout errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class InvalidArgumentError(CheckoutError):
    """Invalid argument provided by caller."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(f"invalid argument: {message}", cause)


class InvalidProductError(CheckoutError):
    """Pricing rule invoked for a product code it does not govern."""

    def __init__(self, rule_code: str, product_code: str):
        super().__init__(
            f"invalid product: rule for {rule_code!r} applied to {product_code!r}"
        )
        self.rule_code = rule_code
        self.product_code = product_code


class InvalidQuantityError(CheckoutError):
    """Pricing rule invoked with a quantity below one."""

    def __init__(self, quantity: int):
        super().__init__(f"invalid quantity: {quantity}")
        self.quantity = quantity
