"""
Dashboard summary endpoint.
"""

from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.api.deps import get_backend
from app.api.transfers import TransferResponse, transfer_response
from app.backend import BankingBackend
from app.config import get_settings

router = APIRouter()


class DashboardResponse(BaseModel):
    loan_count: int
    card_count: int
    emi_plans_count: int
    recent_transfers: List[TransferResponse]


@router.get("", response_model=DashboardResponse)
def get_dashboard(backend: BankingBackend = Depends(get_backend)):
    """Counts of the caller's records and their most recent transfers."""
    summary = backend.get_dashboard_summary()
    limit = get_settings().recent_transfers_limit
    recent = sorted(summary.recent_transfers, key=lambda t: t.timestamp, reverse=True)

    return DashboardResponse(
        loan_count=summary.loan_count,
        card_count=summary.card_count,
        emi_plans_count=summary.emi_plans_count,
        recent_transfers=[transfer_response(t) for t in recent[:limit]],
    )
