"""Amortization routes: single payment, full table, loan summary."""

import logging
from dataclasses import asdict

from fastapi import APIRouter, HTTPException

from finance_calc.api.schemas import (
    AmortizationLoanResponse,
    AmortizationPaymentRequest,
    AmortizationPaymentResponse,
    AmortizationRowResponse,
    AmortizationTableRequest,
    AmortizationTableResponse,
    AmountResponse,
    PrincipalFromPaymentRequest,
)
from finance_calc.engine.amortization import (
    calculate_amortization_loan,
    calculate_amortization_payment,
    calculate_amortization_table,
    calculate_principal_from_amortization_payment,
)
from finance_calc.engine.errors import AmortizationError, NonAmortizingPaymentError
from finance_calc.models.loan import ExtraPayment, PaymentMode

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/amortization", tags=["amortization"])


def _table_kwargs(req: AmortizationTableRequest) -> dict:
    """Translate a table request into engine keyword arguments."""
    return dict(
        principal=req.principal,
        apr=req.apr,
        months=req.months,
        extra_payments=[
            ExtraPayment(amount=e.amount, month=e.month, fill=e.fill)
            for e in req.extra_payments
        ],
        mode=PaymentMode.FIXED if req.fixed_payment else PaymentMode.DECLINING,
        digits=req.digits,
        payment=req.payment,
    )


@router.post("/payment", response_model=AmortizationPaymentResponse)
def amortization_payment(req: AmortizationPaymentRequest):
    """Interest/principal split of the next payment."""
    result = calculate_amortization_payment(
        req.principal, req.apr, req.months, req.fixed_payment, req.digits
    )
    return AmortizationPaymentResponse(**asdict(result))


@router.post("/table", response_model=AmortizationTableResponse)
def amortization_table(req: AmortizationTableRequest):
    """Month-by-month schedule until the balance reaches zero."""
    try:
        rows = calculate_amortization_table(**_table_kwargs(req))
    except NonAmortizingPaymentError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return AmortizationTableResponse(
        months=len(rows),
        rows=[AmortizationRowResponse(**asdict(row)) for row in rows],
    )


@router.post("/loan", response_model=AmortizationLoanResponse)
def amortization_loan(req: AmortizationTableRequest):
    """Loan totals, with months and interest saved by the extra payments."""
    try:
        loan = calculate_amortization_loan(**_table_kwargs(req))
    except NonAmortizingPaymentError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except AmortizationError as e:
        logger.error("Loan summary failed for %s: %s", req, e)
        raise HTTPException(status_code=500, detail="Loan computation failed")

    return AmortizationLoanResponse(**asdict(loan))


@router.post("/principal", response_model=AmountResponse)
def principal_from_payment(req: PrincipalFromPaymentRequest):
    """Loan amount a monthly payment supports."""
    amount = calculate_principal_from_amortization_payment(
        req.payment, req.apr, req.months, req.digits
    )
    return AmountResponse(amount=amount)
