"""Exact decimal money helpers.

All amounts are ``Decimal``. Floats are converted through ``str`` so a
literal such as ``3.11`` keeps its written value instead of the nearest
binary fraction.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from .errors import InvalidArgumentError

ZERO = Decimal("0")
CENT = Decimal("0.01")
DEFAULT_ROUNDING = ROUND_HALF_UP


def to_money(value: Decimal | int | float | str) -> Decimal:
    """Convert a numeric value to ``Decimal`` without binary drift."""
    if isinstance(value, bool):
        raise InvalidArgumentError(f"not a monetary value: {value!r}")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, (float, str)):
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise InvalidArgumentError(f"not a monetary value: {value!r}", e) from e
    else:
        raise InvalidArgumentError(f"not a monetary value: {value!r}")

    if not amount.is_finite():
        raise InvalidArgumentError(f"not a monetary value: {value!r}")
    return amount


def round_money(
    amount: Decimal,
    quantum: Decimal = CENT,
    rounding: str = DEFAULT_ROUNDING,
) -> Decimal:
    """Round an amount to the currency quantum (two places, half-up by default)."""
    return to_money(amount).quantize(quantum, rounding=rounding)
