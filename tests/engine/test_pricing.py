from decimal import Decimal

import pytest

from finance_calc.engine.pricing import calculate_margin, calculate_markup


class TestMargin:
    def test_basic(self):
        assert calculate_margin(75, 100) == Decimal("0.25")

    def test_loss(self):
        assert calculate_margin(120, 100) == Decimal("-0.2")

    def test_zero_selling_price(self):
        with pytest.raises(ValueError):
            calculate_margin(75, 0)


class TestMarkup:
    def test_basic(self):
        assert calculate_markup(80, 100) == Decimal("0.25")

    def test_markup_exceeds_margin(self):
        assert calculate_markup(75, 100) > calculate_margin(75, 100)

    def test_zero_cost(self):
        with pytest.raises(ValueError):
            calculate_markup(0, 100)
