"""Tests for decimal money helpers."""

from decimal import ROUND_HALF_EVEN, Decimal

import pytest

from checkout_pricing.errors import InvalidArgumentError
from checkout_pricing.money import CENT, ZERO, round_money, to_money


class TestToMoney:
    def test_decimal_passes_through(self):
        amount = Decimal("3.11")
        assert to_money(amount) is amount

    def test_float_keeps_written_value(self):
        assert to_money(3.11) == Decimal("3.11")
        assert to_money(0.1) + to_money(0.2) == Decimal("0.3")

    def test_int_and_str(self):
        assert to_money(5) == Decimal("5")
        assert to_money(" 11.23 ") == Decimal("11.23")

    @pytest.mark.parametrize("value", [True, None, [1], "abc", "NaN", float("inf")])
    def test_rejects_non_monetary_values(self, value):
        with pytest.raises(InvalidArgumentError):
            to_money(value)


class TestRoundMoney:
    @pytest.mark.parametrize(
        "amount, expected",
        [
            ("22.446", "22.45"),
            ("22.445", "22.45"),
            ("22.444", "22.44"),
            ("30.5699999999", "30.57"),
            ("0", "0.00"),
        ],
    )
    def test_rounds_half_up_to_cents(self, amount, expected):
        rounded = round_money(Decimal(amount))
        assert rounded == Decimal(expected)
        assert rounded.as_tuple().exponent == -2

    def test_custom_rounding_mode(self):
        assert round_money(Decimal("22.445"), CENT, ROUND_HALF_EVEN) == Decimal("22.44")

    def test_custom_quantum(self):
        assert round_money(Decimal("22.46"), Decimal("0.1")) == Decimal("22.5")


def test_zero_is_exact():
    assert ZERO == 0
    assert isinstance(ZERO, Decimal)


@pytest.mark.parametrize("value", [Decimal("NaN"), Decimal("sNaN"), Decimal("Infinity"), Decimal("-Infinity")])
def test_rejects_non_finite_decimals(value):
    with pytest.raises(InvalidArgumentError, match="not a monetary value"):
        to_money(value)
