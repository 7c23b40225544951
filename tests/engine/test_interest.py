from decimal import Decimal

import pytest

from finance_calc.engine.interest import (
    calculate_apy,
    calculate_compound_interest,
    calculate_present_value_from_future_value,
    calculate_simple_interest,
    calculate_simple_interest_loan,
)
from finance_calc.models.loan import CompoundPeriod


class TestAPY:
    def test_monthly(self):
        apy = calculate_apy(Decimal("0.05"), "monthly")
        # (1 + 0.05/12)^12 - 1 = 5.1162%
        assert abs(apy - Decimal("0.051162")) < Decimal("0.000001")

    def test_percentage_rate(self):
        assert calculate_apy(5, "monthly") == calculate_apy(Decimal("0.05"), "monthly")

    def test_annual_equals_apr(self):
        assert calculate_apy(Decimal("0.05"), CompoundPeriod.ANNUALLY) == Decimal("0.05")

    def test_more_compounding_yields_more(self):
        daily = calculate_apy(Decimal("0.05"), "daily")
        monthly = calculate_apy(Decimal("0.05"), "monthly")
        quarterly = calculate_apy(Decimal("0.05"), "quarterly")
        assert daily > monthly > quarterly > Decimal("0.05")

    def test_unknown_period(self):
        with pytest.raises(ValueError):
            calculate_apy(Decimal("0.05"), "hourly")


class TestCompoundInterest:
    def test_annual(self):
        assert calculate_compound_interest(1000, Decimal("0.12"), "annually", 12) == Decimal("1120.00")

    def test_monthly(self):
        # 1000 * 1.01^12
        assert calculate_compound_interest(1000, 12, "monthly", 12) == Decimal("1126.83")

    def test_biannual(self):
        # One compounding event every two years: 1000 * (1 + 0.10/0.5)^1
        assert calculate_compound_interest(1000, Decimal("0.10"), "biannually", 24) == Decimal("1200.00")

    def test_zero_months(self):
        assert calculate_compound_interest(1000, Decimal("0.05"), "daily", 0) == Decimal("1000.00")


class TestSimpleInterest:
    def test_basic(self):
        assert calculate_simple_interest(1000, 12, 12) == Decimal("1120.00")

    def test_partial_year(self):
        # 5000 * 0.06/12 * 6 = 150
        assert calculate_simple_interest(5000, Decimal("0.06"), 6) == Decimal("5150.00")


class TestSimpleInterestLoan:
    def test_one_year(self):
        loan = calculate_simple_interest_loan(1000, 12, 12)
        assert loan.total_interest == Decimal("120.00")
        assert loan.total_amount == Decimal("1120.00")
        assert loan.payment == Decimal("93.33")
        assert loan.months == 12
        assert loan.total_principal == Decimal("1000")
        assert loan.interest == Decimal("0.12")

    def test_non_positive_months_coerced(self):
        for months in (0, -6):
            loan = calculate_simple_interest_loan(1000, 12, months)
            assert loan.months == 1
            assert loan.total_amount == Decimal("1010.00")
            assert loan.payment == Decimal("1010.00")

    def test_zero_principal(self):
        with pytest.raises(ValueError):
            calculate_simple_interest_loan(0, 12, 12)


class TestPresentValue:
    def test_one_year(self):
        assert calculate_present_value_from_future_value(1120, Decimal("0.12"), 1) == Decimal("1000.00")

    def test_percentage_rate(self):
        assert calculate_present_value_from_future_value(1120, 12, 1) == Decimal("1000.00")

    def test_zero_years(self):
        assert calculate_present_value_from_future_value(1000, 5, 0) == Decimal("1000.00")

    def test_discounts(self):
        pv = calculate_present_value_from_future_value(10000, Decimal("0.07"), 10)
        assert Decimal("5000") < pv < Decimal("5100")  # ~5083.49
