"""Money rounding and rate helpers shared by every calculator.

Pure functions. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from finance_calc.models.loan import CompoundPeriod

DEFAULT_DIGITS = 2

# Compounding events per year
COMPOUND_N: dict[CompoundPeriod, Decimal] = {
    CompoundPeriod.DAILY: Decimal("365"),
    CompoundPeriod.WEEKLY: Decimal("52"),
    CompoundPeriod.BIWEEKLY: Decimal("26"),
    CompoundPeriod.SEMIMONTHLY: Decimal("24"),
    CompoundPeriod.MONTHLY: Decimal("12"),
    CompoundPeriod.BIMONTHLY: Decimal("6"),
    CompoundPeriod.QUARTERLY: Decimal("4"),
    CompoundPeriod.SEMIANNUALLY: Decimal("2"),
    CompoundPeriod.ANNUALLY: Decimal("1"),
    CompoundPeriod.BIANNUALLY: Decimal("0.5"),  # Once every two years
}


def to_decimal(value: Decimal | float | int) -> Decimal:
    """Coerce a number to Decimal. Floats go through str() so 0.06 stays 0.06."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_money(value: Decimal | float | int, digits: int = DEFAULT_DIGITS) -> Decimal:
    """Round half away from zero to `digits` decimal places."""
    return to_decimal(value).quantize(Decimal(1).scaleb(-digits), ROUND_HALF_UP)


def normalize_rate(apr: Decimal | float | int) -> Decimal:
    """Rates above 1 are percentages (5 -> 0.05). Exactly 1 means 100%."""
    rate = to_decimal(apr)
    if rate > 1:
        rate /= 100
    return rate


def get_compound_n(compound: CompoundPeriod | str) -> Decimal:
    """Number of compounding events per year for a named period."""
    try:
        period = compound if isinstance(compound, CompoundPeriod) else CompoundPeriod(compound)
    except ValueError:
        raise ValueError(f"Unknown compounding period: {compound!r}") from None
    return COMPOUND_N[period]
