"""Validation helpers for precondition checks.

Keeps the argument checks of products, strategies and rules in one place.
"""

from decimal import Decimal

from .errors import InvalidArgumentError


def require_not_empty(value: str, error_msg: str) -> None:
    """Require that a string is non-empty."""
    if not value:
        raise InvalidArgumentError(error_msg)


def require_positive(value: int, error_msg: str) -> None:
    """Require that a value is greater than zero."""
    if value <= 0:
        raise InvalidArgumentError(error_msg)


def require_non_negative(value: int | Decimal, error_msg: str) -> None:
    """Require that a value is zero or greater."""
    if value < 0:
        raise InvalidArgumentError(error_msg)


def require_callable(value: object, error_msg: str) -> None:
    """Require that a value can be called."""
    if not callable(value):
        raise InvalidArgumentError(error_msg)
