"""
Money transfer endpoints.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from app.api.deps import get_backend
from app.api.views import amount_display, time_display
from app.backend import BankingBackend
from app.backend.schemas import MoneyTransfer, TransferStatus, TransferType
from app.formatting import to_minor_units

logger = logging.getLogger(__name__)

router = APIRouter()


class TransferCreate(BaseModel):
    """Schema for creating a transfer. Amount is in major units."""

    from_account: str
    beneficiary: str
    amount: float = Field(..., gt=0)
    note: str = ""
    transfer_type: TransferType = TransferType.imps


class TransferResponse(BaseModel):
    from_account: str
    beneficiary: str
    amount: int
    amount_display: str
    note: str
    transfer_type: TransferType
    status: TransferStatus
    timestamp: int
    timestamp_display: str


def transfer_response(transfer: MoneyTransfer) -> TransferResponse:
    return TransferResponse(
        from_account=transfer.from_account,
        beneficiary=transfer.beneficiary,
        amount=transfer.amount,
        amount_display=amount_display(transfer.amount),
        note=transfer.note,
        transfer_type=transfer.transfer_type,
        status=transfer.status,
        timestamp=transfer.timestamp,
        timestamp_display=time_display(transfer.timestamp),
    )


@router.get("", response_model=List[TransferResponse])
def list_transfers(backend: BankingBackend = Depends(get_backend)):
    """Get the caller's transfer history."""
    return [transfer_response(t) for t in backend.get_transfer_history()]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_transfer(
    transfer: TransferCreate,
    backend: BankingBackend = Depends(get_backend),
):
    """Submit a new transfer."""
    from_account = transfer.from_account.strip()
    beneficiary = transfer.beneficiary.strip()
    if not from_account or not beneficiary:
        raise HTTPException(
            status_code=400, detail="Please fill in all required fields"
        )

    amount = to_minor_units(transfer.amount)
    if amount <= 0:
        raise HTTPException(status_code=400, detail="Please enter a valid amount")

    backend.create_transfer(
        from_account=from_account,
        beneficiary=beneficiary,
        amount=amount,
        note=transfer.note.strip(),
        transfer_type=transfer.transfer_type,
    )
    logger.info(f"Submitted {transfer.transfer_type.value} transfer of {amount} minor units")

    return {"message": "Transfer submitted successfully", "amount": amount}
