"""Pricing routes: margin and markup."""

from fastapi import APIRouter, HTTPException

from finance_calc.api.schemas import PricingRequest, RatioResponse
from finance_calc.engine.pricing import calculate_margin, calculate_markup

router = APIRouter(prefix="/api/v1/pricing", tags=["pricing"])


@router.post("/margin", response_model=RatioResponse)
def margin(req: PricingRequest):
    try:
        return RatioResponse(ratio=calculate_margin(req.cost, req.selling_price))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/markup", response_model=RatioResponse)
def markup(req: PricingRequest):
    try:
        return RatioResponse(ratio=calculate_markup(req.cost, req.selling_price))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
