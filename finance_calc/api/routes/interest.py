"""Interest routes: APY, compound and simple interest, present value."""

from dataclasses import asdict

from fastapi import APIRouter, HTTPException

from finance_calc.api.schemas import (
    APYRequest,
    AmountResponse,
    CompoundInterestRequest,
    PresentValueRequest,
    RatioResponse,
    SimpleInterestLoanResponse,
    SimpleInterestRequest,
)
from finance_calc.engine.interest import (
    calculate_apy,
    calculate_compound_interest,
    calculate_present_value_from_future_value,
    calculate_simple_interest,
    calculate_simple_interest_loan,
)

router = APIRouter(prefix="/api/v1/interest", tags=["interest"])


@router.post("/apy", response_model=RatioResponse)
def apy(req: APYRequest):
    try:
        return RatioResponse(ratio=calculate_apy(req.apr, req.compound))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/compound", response_model=AmountResponse)
def compound_interest(req: CompoundInterestRequest):
    try:
        amount = calculate_compound_interest(
            req.principal, req.apr, req.compound, req.months, req.digits
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return AmountResponse(amount=amount)


@router.post("/simple", response_model=AmountResponse)
def simple_interest(req: SimpleInterestRequest):
    return AmountResponse(
        amount=calculate_simple_interest(req.principal, req.apr, req.months, req.digits)
    )


@router.post("/simple-loan", response_model=SimpleInterestLoanResponse)
def simple_interest_loan(req: SimpleInterestRequest):
    try:
        loan = calculate_simple_interest_loan(req.principal, req.apr, req.months, req.digits)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return SimpleInterestLoanResponse(**asdict(loan))


@router.post("/present-value", response_model=AmountResponse)
def present_value(req: PresentValueRequest):
    return AmountResponse(
        amount=calculate_present_value_from_future_value(
            req.future_value, req.apr, req.years, req.digits
        )
    )
