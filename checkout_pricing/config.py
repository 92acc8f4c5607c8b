"""Checkout settings, read from the environment."""

import decimal
import logging
import os
from dataclasses import dataclass
from decimal import Decimal

from .errors import InvalidArgumentError
from .money import CENT, DEFAULT_ROUNDING, to_money

ROUNDING_MODES = {
    name: getattr(decimal, name)
    for name in (
        "ROUND_HALF_UP",
        "ROUND_HALF_EVEN",
        "ROUND_HALF_DOWN",
        "ROUND_UP",
        "ROUND_DOWN",
        "ROUND_CEILING",
        "ROUND_FLOOR",
        "ROUND_05UP",
    )
}

LOG_FORMATS = ("json", "console")


@dataclass(frozen=True)
class CheckoutSettings:
    currency_quantum: Decimal = CENT
    rounding: str = DEFAULT_ROUNDING
    log_level: str = "INFO"
    log_format: str = "json"

    def __post_init__(self) -> None:
        quantum = to_money(self.currency_quantum)
        if quantum <= 0:
            raise InvalidArgumentError(f"currency quantum must be positive: {quantum}")
        object.__setattr__(self, "currency_quantum", quantum)

        if self.rounding not in ROUNDING_MODES.values():
            raise InvalidArgumentError(f"unknown rounding mode: {self.rounding!r}")
        if self.log_format not in LOG_FORMATS:
            raise InvalidArgumentError(f"unknown log format: {self.log_format!r}")
        log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise InvalidArgumentError(f"unknown log level: {self.log_level!r}")
        object.__setattr__(self, "log_level", log_level)

    @classmethod
    def from_env(cls) -> "CheckoutSettings":
        """Build settings from ``CHECKOUT_*`` environment variables."""
        rounding_name = os.environ.get("CHECKOUT_ROUNDING", "ROUND_HALF_UP").upper()
        if rounding_name not in ROUNDING_MODES:
            raise InvalidArgumentError(f"unknown rounding mode: {rounding_name!r}")

        return cls(
            currency_quantum=os.environ.get("CHECKOUT_CURRENCY_QUANTUM", "0.01"),
            rounding=ROUNDING_MODES[rounding_name],
            log_level=os.environ.get("CHECKOUT_LOG_LEVEL", "INFO"),
            log_format=os.environ.get("CHECKOUT_LOG_FORMAT", "json").lower(),
        )
