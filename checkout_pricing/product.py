"""Product value type."""

from dataclasses import dataclass
from decimal import Decimal

from .money import to_money
from .validation import require_non_negative, require_not_empty


@dataclass(frozen=True)
class Product:
    """A scannable product. ``price`` is the unit price as an exact decimal."""

    code: str
    name: str
    price: Decimal

    def __post_init__(self) -> None:
        require_not_empty(self.code, "product code is required")
        price = to_money(self.price)
        require_non_negative(price, f"price of {self.code} cannot be negative")
        object.__setattr__(self, "price", price)
