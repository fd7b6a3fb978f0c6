"""
Insurance inquiry endpoints.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from app.api.deps import get_backend
from app.api.views import amount_display, time_display
from app.backend import BankingBackend
from app.backend.schemas import InquiryStatus, InsuranceCategory
from app.formatting import to_minor_units

logger = logging.getLogger(__name__)

router = APIRouter()


class InsuranceInquiryCreate(BaseModel):
    """Schema for an insurance inquiry. Coverage is in major units."""

    category: InsuranceCategory
    coverage_amount: float = Field(..., gt=0)
    notes: str = ""
    contact_preference: str = "email"


class InsuranceInquiryResponse(BaseModel):
    category: InsuranceCategory
    coverage_amount: int
    coverage_amount_display: str
    notes: str
    contact_preference: str
    status: InquiryStatus
    timestamp: int
    timestamp_display: str


@router.get("", response_model=List[InsuranceInquiryResponse])
def list_insurance_inquiries(backend: BankingBackend = Depends(get_backend)):
    """Get the caller's insurance inquiries."""
    return [
        InsuranceInquiryResponse(
            **inquiry.model_dump(),
            coverage_amount_display=amount_display(inquiry.coverage_amount),
            timestamp_display=time_display(inquiry.timestamp),
        )
        for inquiry in backend.get_insurance_inquiries()
    ]


@router.post("", status_code=status.HTTP_201_CREATED)
def submit_insurance_inquiry(
    inquiry: InsuranceInquiryCreate,
    backend: BankingBackend = Depends(get_backend),
):
    """Submit an insurance inquiry."""
    contact_preference = inquiry.contact_preference.strip()
    if not contact_preference:
        raise HTTPException(status_code=400, detail="Contact preference is required")

    backend.submit_insurance_inquiry(
        category=inquiry.category,
        coverage_amount=to_minor_units(inquiry.coverage_amount),
        notes=inquiry.notes.strip(),
        contact_preference=contact_preference,
    )
    logger.info(f"Submitted {inquiry.category.value} insurance inquiry")

    return {"message": "Insurance inquiry submitted successfully"}
