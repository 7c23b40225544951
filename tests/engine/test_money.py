from decimal import Decimal

import pytest

from finance_calc.engine.money import get_compound_n, normalize_rate, to_money
from finance_calc.models.loan import CompoundPeriod


class TestToMoney:
    def test_rounds_half_up(self):
        assert to_money(Decimal("1.005")) == Decimal("1.01")
        assert to_money(Decimal("1.004")) == Decimal("1.00")

    def test_rounds_half_away_from_zero_for_negatives(self):
        assert to_money(Decimal("-1.005")) == Decimal("-1.01")

    def test_float_input_uses_decimal_text(self):
        # 2.675 is 2.67499999... as a binary float
        assert to_money(2.675) == Decimal("2.68")

    def test_custom_digits(self):
        assert to_money(Decimal("1.23456"), 4) == Decimal("1.2346")
        assert to_money(Decimal("599.5505"), 0) == Decimal("600")

    def test_fixed_precision(self):
        result = to_money(3)
        assert isinstance(result, Decimal)
        assert result.as_tuple().exponent == -2
        assert str(result) == "3.00"


class TestNormalizeRate:
    def test_fraction_unchanged(self):
        assert normalize_rate(Decimal("0.05")) == Decimal("0.05")

    def test_percentage_divided(self):
        assert normalize_rate(5) == Decimal("0.05")
        assert normalize_rate(Decimal("1.5")) == Decimal("0.015")

    def test_one_is_one_hundred_percent(self):
        assert normalize_rate(1) == Decimal("1")
        assert normalize_rate(1.0) == Decimal("1")


class TestCompoundN:
    @pytest.mark.parametrize(
        "period,expected",
        [
            ("daily", Decimal("365")),
            ("weekly", Decimal("52")),
            ("biweekly", Decimal("26")),
            ("semimonthly", Decimal("24")),
            ("monthly", Decimal("12")),
            ("bimonthly", Decimal("6")),
            ("quarterly", Decimal("4")),
            ("semiannually", Decimal("2")),
            ("annually", Decimal("1")),
            ("biannually", Decimal("0.5")),
        ],
    )
    def test_mapping(self, period, expected):
        assert get_compound_n(period) == expected

    def test_accepts_enum(self):
        assert get_compound_n(CompoundPeriod.QUARTERLY) == Decimal("4")

    def test_unknown_period(self):
        with pytest.raises(ValueError, match="fortnightly"):
            get_compound_n("fortnightly")
