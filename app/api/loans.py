"""
Loan application endpoints.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from app.api.deps import get_backend
from app.api.views import amount_display, time_display
from app.backend import BankingBackend
from app.backend.schemas import LoanStatus, LoanType
from app.formatting import to_minor_units

logger = logging.getLogger(__name__)

router = APIRouter()


class LoanApplicationCreate(BaseModel):
    """Schema for a loan application. Amount and income are in major units."""

    loan_type: LoanType
    name: str
    amount: float = Field(..., gt=0)
    tenure: int = Field(..., ge=1, description="Tenure in months")
    income: float = Field(..., gt=0)
    purpose: str
    documents: str = ""


class LoanApplicationResponse(BaseModel):
    loan_type: LoanType
    name: str
    amount: int
    amount_display: str
    tenure: int
    income: int
    income_display: str
    purpose: str
    documents: str
    status: LoanStatus
    timestamp: int
    timestamp_display: str


@router.get("", response_model=List[LoanApplicationResponse])
def list_loan_applications(backend: BankingBackend = Depends(get_backend)):
    """Get the caller's loan applications."""
    return [
        LoanApplicationResponse(
            **application.model_dump(),
            amount_display=amount_display(application.amount),
            income_display=amount_display(application.income),
            timestamp_display=time_display(application.timestamp),
        )
        for application in backend.get_loan_applications()
    ]


@router.post("", status_code=status.HTTP_201_CREATED)
def apply_loan(
    application: LoanApplicationCreate,
    backend: BankingBackend = Depends(get_backend),
):
    """Submit a loan application."""
    name = application.name.strip()
    purpose = application.purpose.strip()
    if not name or not purpose:
        raise HTTPException(status_code=400, detail="Please fill in all required fields")

    backend.apply_loan(
        loan_type=application.loan_type,
        name=name,
        amount=to_minor_units(application.amount),
        tenure=application.tenure,
        income=to_minor_units(application.income),
        purpose=purpose,
        documents=application.documents.strip(),
    )
    logger.info(f"Submitted {application.loan_type.value} loan application")

    return {"message": "Loan application submitted successfully"}
