"""Margin and markup ratios."""

from decimal import Decimal

from finance_calc.engine.money import to_decimal


def calculate_margin(cost: Decimal | float | int, selling_price: Decimal | float | int) -> Decimal:
    """Margin = (selling price - cost) / selling price."""
    selling_price = to_decimal(selling_price)
    if selling_price == 0:
        raise ValueError("selling_price must be non-zero to compute margin")
    return (selling_price - to_decimal(cost)) / selling_price


def calculate_markup(cost: Decimal | float | int, selling_price: Decimal | float | int) -> Decimal:
    """Markup = (selling price - cost) / cost."""
    cost = to_decimal(cost)
    if cost == 0:
        raise ValueError("cost must be non-zero to compute markup")
    return (to_decimal(selling_price) - cost) / cost
