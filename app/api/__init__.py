"""
API routes for the banking demo.
"""

from fastapi import APIRouter

from app.api import (
    calculations,
    cards,
    dashboard,
    emi_plans,
    insurance,
    loans,
    profile,
    transfers,
)

router = APIRouter()

# Include sub-routers
router.include_router(calculations.router, prefix="/calculate", tags=["calculations"])
router.include_router(profile.router, prefix="/profile", tags=["profile"])
router.include_router(transfers.router, prefix="/transfers", tags=["transfers"])
router.include_router(cards.router, prefix="/cards", tags=["cards"])
router.include_router(loans.router, prefix="/loans", tags=["loans"])
router.include_router(insurance.router, prefix="/insurance", tags=["insurance"])
router.include_router(emi_plans.router, prefix="/emi-plans", tags=["emi-plans"])
router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
