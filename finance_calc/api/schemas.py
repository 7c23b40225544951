"""Pydantic schemas for API request/response models."""

from decimal import Decimal

from pydantic import BaseModel, Field

from finance_calc.config import settings


def _default_digits() -> int:
    return settings.default_digits


# ---- Request schemas ----

class ExtraPaymentRequest(BaseModel):
    amount: Decimal = Field(..., ge=0, description="Extra principal to pay")
    month: int = Field(..., ge=1, description="1-based month the extra amount is paid")
    fill: bool = Field(False, description="Repeat the amount every later month")


class AmortizationPaymentRequest(BaseModel):
    principal: Decimal = Field(..., gt=0)
    apr: Decimal = Field(..., ge=0, description="Annual rate as a fraction (0.05) or percentage (5)")
    months: int = Field(..., ge=1)
    fixed_payment: Decimal | None = None
    digits: int = Field(default_factory=_default_digits, ge=0, le=10)


class AmortizationTableRequest(BaseModel):
    principal: Decimal = Field(..., gt=0)
    apr: Decimal = Field(..., ge=0, description="Annual rate as a fraction (0.05) or percentage (5)")
    months: int = Field(..., ge=1)
    extra_payments: list[ExtraPaymentRequest] = []
    fixed_payment: bool = Field(True, description="Hold the month-1 payment (False = declining)")
    payment: Decimal | None = Field(None, gt=0, description="Monthly payment override")
    digits: int = Field(default_factory=_default_digits, ge=0, le=10)


class PrincipalFromPaymentRequest(BaseModel):
    payment: Decimal = Field(..., gt=0)
    apr: Decimal = Field(..., ge=0)
    months: int = Field(..., ge=1)
    digits: int = Field(default_factory=_default_digits, ge=0, le=10)


class APYRequest(BaseModel):
    apr: Decimal = Field(..., ge=0)
    compound: str = "monthly"


class CompoundInterestRequest(BaseModel):
    principal: Decimal
    apr: Decimal = Field(..., ge=0)
    compound: str = "monthly"
    months: int = Field(..., ge=0)
    digits: int = Field(default_factory=_default_digits, ge=0, le=10)


class SimpleInterestRequest(BaseModel):
    principal: Decimal
    apr: Decimal = Field(..., ge=0)
    months: int
    digits: int = Field(default_factory=_default_digits, ge=0, le=10)


class PresentValueRequest(BaseModel):
    future_value: Decimal
    apr: Decimal = Field(..., ge=0)
    years: Decimal = Field(..., ge=0)
    digits: int = Field(default_factory=_default_digits, ge=0, le=10)


class PricingRequest(BaseModel):
    cost: Decimal
    selling_price: Decimal


# ---- Response schemas ----

class AmortizationPaymentResponse(BaseModel):
    payment: Decimal
    interest: Decimal
    principal: Decimal
    balance: Decimal


class AmortizationRowResponse(BaseModel):
    month: int
    payment: Decimal
    principal: Decimal
    extra_principal: Decimal
    interest: Decimal
    total_paid: Decimal
    principal_paid: Decimal
    interest_paid: Decimal
    balance: Decimal


class AmortizationTableResponse(BaseModel):
    months: int
    rows: list[AmortizationRowResponse]


class SimpleInterestLoanResponse(BaseModel):
    payment: Decimal
    months: int
    total_principal: Decimal
    total_interest: Decimal
    total_amount: Decimal
    interest: Decimal


class AmortizationLoanResponse(SimpleInterestLoanResponse):
    unadjusted_total_interest: Decimal
    unadjusted_total_amount: Decimal
    unadjusted_interest: Decimal
    months_saved: int
    interest_saved: Decimal


class AmountResponse(BaseModel):
    amount: Decimal


class RatioResponse(BaseModel):
    ratio: Decimal
