"""
Financial calculator API endpoints.

These endpoints accept form inputs and return calculated results with
display strings. They need no authentication and never touch the backend.
"""

import enum
from datetime import date
from typing import Dict, List, Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from app.api.views import money_display
from app.calculations.compound_interest import (
    COMPOUNDING_FREQUENCIES,
    calculate_compound_interest,
)
from app.calculations.emi import (
    calculate_emi,
    generate_emi_schedule,
    monthly_to_annual_rate,
)

router = APIRouter()

MAX_TENURE_MONTHS = 1200


class RateType(str, enum.Enum):
    annual = "annual"
    monthly = "monthly"


class CompoundInterestInput(BaseModel):
    """Input for compound interest calculation."""

    principal: float = Field(..., gt=0)
    annual_rate_percent: float = Field(..., ge=0)
    years: float = Field(..., gt=0)
    compounding_frequency: int = Field(12, ge=1)
    monthly_contribution: float = Field(0.0, ge=0)


class CompoundInterestResponse(BaseModel):
    """Future value breakdown."""

    future_value: float
    total_interest: float
    total_contributions: float
    principal: float
    future_value_display: str
    total_interest_display: str
    total_contributions_display: str
    principal_display: str


@router.get("/compound-interest/frequencies", response_model=Dict[str, int])
async def list_compounding_frequencies():
    """Compounding presets offered by the calculator form."""
    return COMPOUNDING_FREQUENCIES


@router.post("/compound-interest", response_model=CompoundInterestResponse)
async def calculate_compound_interest_endpoint(inputs: CompoundInterestInput):
    """Calculate the future value of an investment."""
    result = calculate_compound_interest(
        principal=inputs.principal,
        annual_rate_percent=inputs.annual_rate_percent,
        years=inputs.years,
        compounding_frequency=inputs.compounding_frequency,
        monthly_contribution=inputs.monthly_contribution,
    )

    return CompoundInterestResponse(
        future_value=result.future_value,
        total_interest=result.total_interest,
        total_contributions=result.total_contributions,
        principal=inputs.principal,
        future_value_display=money_display(result.future_value),
        total_interest_display=money_display(result.total_interest),
        total_contributions_display=money_display(result.total_contributions),
        principal_display=money_display(inputs.principal),
    )


class EmiInput(BaseModel):
    """Input for EMI calculation."""

    principal: float = Field(..., gt=0)
    rate_percent: float = Field(..., ge=0)
    rate_type: RateType = RateType.annual
    tenure_months: int = Field(..., ge=1, le=MAX_TENURE_MONTHS)

    @property
    def annual_rate_percent(self) -> float:
        if self.rate_type == RateType.monthly:
            return monthly_to_annual_rate(self.rate_percent)
        return self.rate_percent


class EmiResponse(BaseModel):
    """Installment and totals over the tenure."""

    emi: float
    total_payment: float
    total_interest: float
    annual_rate_percent: float
    emi_display: str
    total_payment_display: str
    total_interest_display: str


@router.post("/emi", response_model=EmiResponse)
async def calculate_emi_endpoint(inputs: EmiInput):
    """Calculate the equated monthly installment for a loan."""
    result = calculate_emi(
        inputs.principal, inputs.annual_rate_percent, inputs.tenure_months
    )

    return EmiResponse(
        emi=result.emi,
        total_payment=result.total_payment,
        total_interest=result.total_interest,
        annual_rate_percent=inputs.annual_rate_percent,
        emi_display=money_display(result.emi),
        total_payment_display=money_display(result.total_payment),
        total_interest_display=money_display(result.total_interest),
    )


class EmiScheduleInput(EmiInput):
    """Input for EMI schedule generation."""

    start_date: Optional[date] = None


class EmiScheduleRow(BaseModel):
    period: int
    date: Optional[str] = None
    beginning_balance: float
    emi: float
    interest: float
    principal: float
    ending_balance: float


class EmiScheduleResponse(BaseModel):
    schedule: List[EmiScheduleRow]
    total_interest: float
    total_principal: float


@router.post("/emi/schedule", response_model=EmiScheduleResponse)
async def calculate_emi_schedule(inputs: EmiScheduleInput):
    """Generate the month-by-month repayment schedule."""
    schedule = generate_emi_schedule(
        principal=inputs.principal,
        annual_rate_percent=inputs.annual_rate_percent,
        tenure_months=inputs.tenure_months,
        start_date=inputs.start_date,
    )

    return {
        "schedule": schedule,
        "total_interest": round(sum(row["interest"] for row in schedule), 2),
        "total_principal": round(sum(row["principal"] for row in schedule), 2),
    }
