"""
Saved EMI plan endpoints.

The installment is recomputed here before saving, so a stored plan always
matches the calculator for its principal, rate and tenure.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from app.api.calculations import EmiInput
from app.api.deps import get_backend
from app.api.views import amount_display, money_display, time_display
from app.backend import BankingBackend
from app.calculations.emi import calculate_emi
from app.formatting import to_minor_units

logger = logging.getLogger(__name__)

router = APIRouter()


class EmiPlanResponse(BaseModel):
    principal: int
    principal_display: str
    rate: float
    tenure_months: int
    emi: float
    emi_display: str
    total_payment: float
    total_payment_display: str
    total_interest: float
    total_interest_display: str
    created_at: int
    created_at_display: str


@router.get("", response_model=List[EmiPlanResponse])
def list_emi_plans(backend: BankingBackend = Depends(get_backend)):
    """Get the caller's saved EMI plans."""
    return [
        EmiPlanResponse(
            **plan.model_dump(),
            principal_display=amount_display(plan.principal),
            emi_display=money_display(plan.emi),
            total_payment_display=money_display(plan.total_payment),
            total_interest_display=money_display(plan.total_interest),
            created_at_display=time_display(plan.created_at),
        )
        for plan in backend.get_emi_plans()
    ]


@router.post("", status_code=status.HTTP_201_CREATED)
def save_emi_plan(
    inputs: EmiInput,
    backend: BankingBackend = Depends(get_backend),
):
    """Calculate and save an EMI plan."""
    annual_rate = inputs.annual_rate_percent
    result = calculate_emi(inputs.principal, annual_rate, inputs.tenure_months)

    backend.save_emi_plan(
        principal=to_minor_units(inputs.principal),
        rate=annual_rate,
        tenure_months=inputs.tenure_months,
        emi=result.emi,
        total_payment=result.total_payment,
        total_interest=result.total_interest,
    )
    logger.info(f"Saved EMI plan for {inputs.tenure_months} months at {annual_rate}%")

    return {
        "message": "EMI plan saved successfully",
        "emi": result.emi,
        "total_payment": result.total_payment,
        "total_interest": result.total_interest,
    }
