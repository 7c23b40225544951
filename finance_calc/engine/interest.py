"""Closed-form interest formulas: APY, compound, simple, present value.

Pure functions. No I/O.
"""

from decimal import Decimal

from finance_calc.engine.money import (
    DEFAULT_DIGITS,
    get_compound_n,
    normalize_rate,
    to_decimal,
    to_money,
)
from finance_calc.models.loan import CompoundPeriod, SimpleInterestLoan


def calculate_apy(apr: Decimal | float | int, compound: CompoundPeriod | str) -> Decimal:
    """APY = (1 + apr/n)^n - 1."""
    n = get_compound_n(compound)
    return (1 + normalize_rate(apr) / n) ** n - 1


def calculate_compound_interest(
    principal: Decimal | float | int,
    apr: Decimal | float | int,
    compound: CompoundPeriod | str,
    months: int,
    digits: int = DEFAULT_DIGITS,
) -> Decimal:
    """Future value of principal held `months` months: P(1 + apr/n)^(n*t)."""
    n = get_compound_n(compound)
    periods = n * months / 12
    return to_money(to_decimal(principal) * (1 + normalize_rate(apr) / n) ** periods, digits)


def calculate_simple_interest(
    principal: Decimal | float | int,
    apr: Decimal | float | int,
    months: int,
    digits: int = DEFAULT_DIGITS,
) -> Decimal:
    """Future value under simple interest: P + P * (apr/12) * months."""
    principal = to_decimal(principal)
    ir = normalize_rate(apr) / 12
    return to_money(principal + principal * ir * months, digits)


def calculate_simple_interest_loan(
    principal: Decimal | float | int,
    apr: Decimal | float | int,
    months: int,
    digits: int = DEFAULT_DIGITS,
) -> SimpleInterestLoan:
    """Repay principal plus simple interest in equal monthly installments.

    A term of zero or fewer months is treated as a single month.
    """
    principal = to_decimal(principal)
    if principal == 0:
        raise ValueError("principal must be non-zero")
    if months <= 0:
        months = 1

    total = calculate_simple_interest(principal, apr, months, digits)

    return SimpleInterestLoan(
        payment=to_money(total / months, digits),
        months=months,
        total_principal=principal,
        total_interest=to_money(total - principal, digits),
        total_amount=total,
        interest=(total - principal) / principal,
    )


def calculate_present_value_from_future_value(
    future_value: Decimal | float | int,
    apr: Decimal | float | int,
    years: Decimal | float | int,
    digits: int = DEFAULT_DIGITS,
) -> Decimal:
    """Discount a future amount at a constant annual rate: FV / (1 + apr)^years."""
    growth = (1 + normalize_rate(apr)) ** to_decimal(years)
    return to_money(to_decimal(future_value) / growth, digits)
