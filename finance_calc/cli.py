"""Command-line loan calculator.

Usage:
    python -m finance_calc.cli payment 100000 6 360
    python -m finance_calc.cli table 20000 5.5 60 --extra 200@12+ --extra 0@36
    python -m finance_calc.cli loan 300000 0.065 360 --extra 5000@1 --declining
    python -m finance_calc.cli simple-loan 1000 12 12
    python -m finance_calc.cli apy 5 --compound daily
"""

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation

from finance_calc.config import settings
from finance_calc.engine.amortization import (
    calculate_amortization_loan,
    calculate_amortization_payment,
    calculate_amortization_table,
)
from finance_calc.engine.errors import FinanceCalcError
from finance_calc.engine.interest import calculate_apy, calculate_simple_interest_loan
from finance_calc.models.loan import CompoundPeriod, ExtraPayment, PaymentMode

logger = logging.getLogger(__name__)


# ── Helpers ──────────────────────────────────────────────────────────────────

def _dollar(v) -> str:
    return f"${v:,}"


def _pct(v) -> str:
    return f"{float(v) * 100:.2f}%"


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


def parse_extra(value: str) -> ExtraPayment:
    """Parse AMOUNT@MONTH, with a trailing '+' to fill later months."""
    fill = value.endswith("+")
    amount, sep, month = value.rstrip("+").partition("@")
    try:
        if not sep:
            raise ValueError(value)
        return ExtraPayment(amount=Decimal(amount), month=int(month), fill=fill)
    except (ValueError, InvalidOperation):
        raise argparse.ArgumentTypeError(
            f"extra payment must look like AMOUNT@MONTH or AMOUNT@MONTH+, got {value!r}"
        )


# ── Report sections ──────────────────────────────────────────────────────────

def print_payment(result) -> None:
    _header("Next Payment")
    print(f"  Payment:          {_dollar(result.payment)}")
    print(f"  Interest:         {_dollar(result.interest)}")
    print(f"  Principal:        {_dollar(result.principal)}")
    print(f"  Balance after:    {_dollar(result.balance)}")
    print()


def print_table(rows) -> None:
    _header(f"Amortization Table ({len(rows)} months)")
    print(f"  {'Month':>5}  {'Payment':>12}  {'Principal':>12}  {'Extra':>10}  "
          f"{'Interest':>10}  {'Balance':>14}")
    for row in rows:
        print(f"  {row.month:>5}  {row.payment:>12,}  {row.principal:>12,}  "
              f"{row.extra_principal:>10,}  {row.interest:>10,}  {row.balance:>14,}")
    if rows:
        last = rows[-1]
        print()
        print(f"  Total paid:       {_dollar(last.total_paid)}")
        print(f"  Principal paid:   {_dollar(last.principal_paid)}")
        print(f"  Interest paid:    {_dollar(last.interest_paid)}")
    print()


def print_loan(loan) -> None:
    _header("Loan Summary")
    print(f"  Monthly payment:  {_dollar(loan.payment)}")
    print(f"  Months:           {loan.months}")
    print(f"  Principal:        {_dollar(loan.total_principal)}")
    print(f"  Total interest:   {_dollar(loan.total_interest)} ({_pct(loan.interest)} of principal)")
    print(f"  Total amount:     {_dollar(loan.total_amount)}")
    if hasattr(loan, "months_saved"):
        print()
        print("  Without extra payments:")
        print(f"    Total interest: {_dollar(loan.unadjusted_total_interest)}")
        print(f"    Total amount:   {_dollar(loan.unadjusted_total_amount)}")
        print(f"  Months saved:     {loan.months_saved}")
        print(f"  Interest saved:   {_dollar(loan.interest_saved)}")
    print()


# ── Entry point ──────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Loan and interest calculator")
    parser.add_argument("--digits", type=int, default=settings.default_digits,
                        help=f"Decimal places for money (default: {settings.default_digits})")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    sub = parser.add_subparsers(dest="command", required=True)

    loan_args = argparse.ArgumentParser(add_help=False)
    loan_args.add_argument("principal", type=Decimal, help="Loan amount")
    loan_args.add_argument("apr", type=Decimal, help="Annual rate, fraction (0.06) or percent (6)")
    loan_args.add_argument("months", type=int, help="Loan term in months")

    payment = sub.add_parser("payment", parents=[loan_args], help="Split the next payment")
    payment.add_argument("--fixed-payment", type=Decimal, help="Use this payment amount")

    for name, help_text in (("table", "Print the amortization table"),
                            ("loan", "Summarize the loan and extra-payment savings")):
        p = sub.add_parser(name, parents=[loan_args], help=help_text)
        p.add_argument("--extra", type=parse_extra, action="append", default=[],
                       help="Extra principal AMOUNT@MONTH (append '+' to repeat every later month)")
        p.add_argument("--declining", action="store_true",
                       help="Recompute the payment every month instead of holding it")
        p.add_argument("--payment", type=Decimal, help="Monthly payment override")

    sub.add_parser("simple-loan", parents=[loan_args], help="Simple-interest loan totals")

    apy = sub.add_parser("apy", help="Annual percentage yield for a nominal rate")
    apy.add_argument("apr", type=Decimal)
    apy.add_argument("--compound", choices=[p.value for p in CompoundPeriod], default="monthly")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    try:
        if args.command == "payment":
            print_payment(calculate_amortization_payment(
                args.principal, args.apr, args.months, args.fixed_payment, args.digits
            ))
        elif args.command in ("table", "loan"):
            kwargs = dict(
                extra_payments=args.extra,
                mode=PaymentMode.DECLINING if args.declining else PaymentMode.FIXED,
                digits=args.digits,
                payment=args.payment,
            )
            if args.command == "table":
                print_table(calculate_amortization_table(
                    args.principal, args.apr, args.months, **kwargs
                ))
            else:
                print_loan(calculate_amortization_loan(
                    args.principal, args.apr, args.months, **kwargs
                ))
        elif args.command == "simple-loan":
            print_loan(calculate_simple_interest_loan(
                args.principal, args.apr, args.months, args.digits
            ))
        elif args.command == "apy":
            apy = calculate_apy(args.apr, args.compound)
            print(f"APY ({args.compound}): {_pct(apy)}")
    except (FinanceCalcError, ValueError) as e:
        logger.debug("Calculation failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
