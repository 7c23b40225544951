"""Amortization engine: single payment, month-by-month table, loan summary.

Pure functions: numbers in, frozen dataclasses out. No I/O.
Every monetary figure passes through to_money so rounding drift cannot
accumulate across rows.
"""

import logging
from collections.abc import Iterable
from decimal import Decimal

from finance_calc.config import settings
from finance_calc.engine.errors import AmortizationError, NonAmortizingPaymentError
from finance_calc.engine.money import DEFAULT_DIGITS, normalize_rate, to_decimal, to_money
from finance_calc.models.loan import (
    AmortizationLoan,
    AmortizationPayment,
    AmortizationRow,
    ExtraPayment,
    PaymentMode,
)

logger = logging.getLogger(__name__)


def calculate_amortization_payment(
    principal: Decimal | float | int,
    apr: Decimal | float | int,
    months: int,
    fixed_payment: Decimal | float | int | None = None,
    digits: int = DEFAULT_DIGITS,
) -> AmortizationPayment:
    """Split one month's payment into interest and principal.

    Args:
        principal: Balance at the start of the month
        apr: Annual rate, as a fraction (0.05) or a percentage (5)
        months: Months remaining on the loan, this one included
        fixed_payment: Use this payment instead of the annuity formula
            (mortgage-style loans keep the month-1 payment for the whole term)
        digits: Decimal places for every monetary output

    M = P * [r(1+r)^n] / [(1+r)^n - 1], r = apr / 12.
    When the formula is indeterminate (zero rate, no months left) the
    balance is paid off in full this month.
    """
    principal = to_decimal(principal)
    rate = normalize_rate(apr)
    ir = rate / 12

    interest = to_money(principal * rate / 12, digits)
    zero = to_money(0, digits)

    if fixed_payment is not None:
        payment = to_money(fixed_payment, digits)
    elif ir == 0 or months <= 0:
        logger.debug(
            "Annuity formula indeterminate (rate=%s, months=%s); paying off %s",
            rate, months, principal,
        )
        return AmortizationPayment(
            payment=to_money(principal + interest, digits),
            interest=interest,
            principal=to_money(principal, digits),
            balance=zero,
        )
    else:
        factor = (1 + ir) ** months
        payment = to_money(principal * ir * factor / (factor - 1), digits)

    principal_paid = to_money(payment - interest, digits)
    balance = to_money(principal - principal_paid, digits)

    # Final payment adjustment: never pay past zero
    if balance < 0:
        overflow = -balance
        payment = to_money(payment - overflow, digits)
        principal_paid = to_money(principal_paid - overflow, digits)
        balance = zero

    return AmortizationPayment(
        payment=payment,
        interest=interest,
        principal=principal_paid,
        balance=balance,
    )


def extra_payment_schedule(
    extra_payments: Iterable[ExtraPayment],
    months: int,
) -> dict[int, Decimal]:
    """Map month -> extra principal amount.

    Entries are applied in ascending month order and later writes win, so a
    fill entry runs through the nominal term until a later entry replaces it.
    """
    amounts: dict[int, Decimal] = {}
    for extra in sorted(extra_payments, key=lambda e: e.month):
        amount = to_decimal(extra.amount)
        amounts[extra.month] = amount
        if extra.fill:
            for month in range(extra.month + 1, months + 1):
                amounts[month] = amount
    return amounts


def calculate_amortization_table(
    principal: Decimal | float | int,
    apr: Decimal | float | int,
    months: int,
    extra_payments: Iterable[ExtraPayment] = (),
    mode: PaymentMode = PaymentMode.FIXED,
    digits: int = DEFAULT_DIGITS,
    payment: Decimal | float | int | None = None,
    max_months: int | None = None,
) -> list[AmortizationRow]:
    """Generate the month-by-month schedule until the balance reaches zero.

    Args:
        principal: Loan amount
        apr: Annual rate, as a fraction or a percentage
        months: Nominal term in months
        extra_payments: Additional principal payments (any order)
        mode: FIXED locks the month-1 payment; DECLINING recomputes it monthly
        digits: Decimal places for every monetary output
        payment: Monthly payment to use from month 1 instead of the formula
        max_months: Row limit (default settings.max_term_multiple * months)

    The table length is driven by the balance, not the term: extra payments
    shorten it, and rounding can add a final stub month.

    Raises:
        NonAmortizingPaymentError: a held payment stops reducing the balance,
            or the row limit is reached before it hits zero.
    """
    balance = to_decimal(principal)
    extra_amounts = extra_payment_schedule(extra_payments, months)
    limit = max_months if max_months is not None else settings.max_term_multiple * max(months, 1)

    zero = to_money(0, digits)
    fixed_amount = to_money(payment, digits) if payment is not None else None
    total_paid = principal_paid = interest_paid = zero

    rows: list[AmortizationRow] = []
    month = 0

    while True:
        if month >= limit:
            logger.warning(
                "Balance %s still outstanding after %d months; giving up", balance, month
            )
            raise NonAmortizingPaymentError(
                f"Loan did not amortize within {limit} months (balance {balance})",
                months_computed=month,
            )

        info = calculate_amortization_payment(
            balance, apr, months - month, fixed_amount, digits
        )
        month += 1

        extra = zero
        row_balance = info.balance
        scheduled = extra_amounts.get(month)
        if scheduled:
            extra = to_money(scheduled, digits)
            row_balance = to_money(row_balance - extra, digits)
            # Extra payment overshoot: only pay what is left
            if row_balance < 0:
                logger.debug("Month %d extra payment exceeds balance by %s", month, -row_balance)
                extra = to_money(extra + row_balance, digits)
                row_balance = zero

        total_paid = to_money(total_paid + info.payment + extra, digits)
        principal_paid = to_money(principal_paid + info.principal + extra, digits)
        interest_paid = to_money(interest_paid + info.interest, digits)

        rows.append(AmortizationRow(
            month=month,
            payment=info.payment,
            principal=info.principal,
            extra_principal=extra,
            interest=info.interest,
            total_paid=total_paid,
            principal_paid=principal_paid,
            interest_paid=interest_paid,
            balance=row_balance,
        ))

        if row_balance <= 0:
            break

        if mode is PaymentMode.FIXED and fixed_amount is None:
            fixed_amount = info.payment

        # Held payment no longer reducing the balance
        if fixed_amount is not None and not scheduled and row_balance >= balance:
            logger.warning(
                "Payment %s does not cover interest %s in month %d",
                info.payment, info.interest, month,
            )
            raise NonAmortizingPaymentError(
                f"Payment {info.payment} does not reduce balance {balance} "
                f"(interest {info.interest})",
                months_computed=month,
            )

        balance = row_balance

    return rows


def calculate_amortization_loan(
    principal: Decimal | float | int,
    apr: Decimal | float | int,
    months: int,
    extra_payments: Iterable[ExtraPayment] = (),
    mode: PaymentMode = PaymentMode.FIXED,
    digits: int = DEFAULT_DIGITS,
    payment: Decimal | float | int | None = None,
    max_months: int | None = None,
) -> AmortizationLoan:
    """Summarize a loan and what its extra payments save.

    Builds a baseline table with no extra payments and an adjusted table
    with them, then diffs the final rows.
    """
    principal = to_decimal(principal)
    if principal <= 0:
        raise ValueError("principal must be > 0")

    base_table = calculate_amortization_table(
        principal, apr, months, (), mode, digits, payment, max_months
    )
    adjusted_table = calculate_amortization_table(
        principal, apr, months, extra_payments, mode, digits, payment, max_months
    )
    if not base_table or not adjusted_table:
        raise AmortizationError("Amortization table generation returned no rows")

    base = base_table[-1]
    adjusted = adjusted_table[-1]
    first = adjusted_table[0]

    return AmortizationLoan(
        payment=first.payment,
        months=adjusted.month,
        total_principal=principal,
        total_interest=adjusted.interest_paid,
        total_amount=to_money(adjusted.interest_paid + principal, digits),
        interest=adjusted.interest_paid / principal,
        unadjusted_total_interest=base.interest_paid,
        unadjusted_total_amount=to_money(base.interest_paid + principal, digits),
        unadjusted_interest=base.interest_paid / principal,
        months_saved=base.month - adjusted.month,
        interest_saved=to_money(base.interest_paid - adjusted.interest_paid, digits),
    )


def calculate_principal_from_amortization_payment(
    payment: Decimal | float | int,
    apr: Decimal | float | int,
    months: int,
    digits: int = DEFAULT_DIGITS,
) -> Decimal:
    """Loan amount a monthly payment supports: P = M * [1 - (1+r)^-n] / r."""
    payment = to_decimal(payment)
    ir = normalize_rate(apr) / 12
    if ir == 0:
        return to_money(payment * months, digits)
    return to_money(payment * (1 - (1 + ir) ** -months) / ir, digits)
