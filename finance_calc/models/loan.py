"""Value records produced by the finance engine.

Every record is frozen: the engine builds fresh values on each call and never
mutates a result after returning it.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class PaymentMode(Enum):
    FIXED = "fixed"          # Payment computed in month 1, then held (mortgage-style)
    DECLINING = "declining"  # Payment recomputed every month from the remaining balance


class CompoundPeriod(Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    SEMIMONTHLY = "semimonthly"
    MONTHLY = "monthly"
    BIMONTHLY = "bimonthly"
    QUARTERLY = "quarterly"
    SEMIANNUALLY = "semiannually"
    ANNUALLY = "annually"
    BIANNUALLY = "biannually"


@dataclass(frozen=True)
class AmortizationPayment:
    """One month's split of a payment into interest and principal."""
    payment: Decimal
    interest: Decimal
    principal: Decimal
    balance: Decimal  # Remaining balance after the payment


@dataclass(frozen=True)
class ExtraPayment:
    amount: Decimal
    month: int  # 1-based
    fill: bool = False  # Repeat the amount every later month until another entry overrides it


@dataclass(frozen=True)
class AmortizationRow:
    month: int
    payment: Decimal
    principal: Decimal
    extra_principal: Decimal
    interest: Decimal

    # Running totals through this month (extra principal included)
    total_paid: Decimal
    principal_paid: Decimal
    interest_paid: Decimal

    balance: Decimal


@dataclass(frozen=True)
class SimpleInterestLoan:
    payment: Decimal
    months: int
    total_principal: Decimal
    total_interest: Decimal
    total_amount: Decimal
    interest: Decimal  # Effective rate over the life of the loan (total_interest / principal)


@dataclass(frozen=True)
class AmortizationLoan(SimpleInterestLoan):
    # Baseline figures, as if no extra payments were made
    unadjusted_total_interest: Decimal = Decimal("0")
    unadjusted_total_amount: Decimal = Decimal("0")
    unadjusted_interest: Decimal = Decimal("0")

    months_saved: int = 0
    interest_saved: Decimal = Decimal("0")
