"""
Pytest configuration and shared fixtures.
"""

import time
from typing import Dict, List, Optional

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi import Depends
from fastapi.testclient import TestClient
from jose import jwt

from app.main import app
from app.api.deps import get_backend
from app.auth.dependencies import Caller, get_current_caller
from app.backend import BankingBackend
from app.backend.schemas import (
    Card,
    DashboardSummary,
    EmiPlan,
    InsuranceInquiry,
    LoanApplication,
    MoneyTransfer,
    UserProfile,
    UserRole,
)
from app.config import get_settings


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "integration: marks integration tests")


@pytest.fixture(scope="session")
def anyio_backend():
    """Backend for async tests."""
    return "asyncio"


class InMemoryBackend(BankingBackend):
    """Backend stand-in that keeps one caller's records in dicts."""

    def __init__(self, store: Dict, principal: str):
        self.store = store
        self.principal = principal
        self.records = store.setdefault(
            principal,
            {
                "profile": None,
                "transfers": [],
                "cards": [],
                "loans": [],
                "insurance": [],
                "emi_plans": [],
            },
        )

    def get_caller_user_profile(self) -> Optional[UserProfile]:
        return self.records["profile"]

    def save_caller_user_profile(self, profile: UserProfile) -> None:
        self.records["profile"] = profile

    def get_user_profile(self, user: str) -> Optional[UserProfile]:
        return self.store.get(user, {}).get("profile")

    def get_caller_user_role(self) -> UserRole:
        return self.store.get("_roles", {}).get(self.principal, UserRole.user)

    def is_caller_admin(self) -> bool:
        return self.get_caller_user_role() == UserRole.admin

    def assign_caller_user_role(self, user: str, role: UserRole) -> None:
        self.store.setdefault("_roles", {})[user] = role

    def create_transfer(self, from_account, beneficiary, amount, note, transfer_type):
        self.records["transfers"].append(
            MoneyTransfer(
                from_account=from_account,
                beneficiary=beneficiary,
                amount=amount,
                note=note,
                transfer_type=transfer_type,
                timestamp=time.time_ns(),
            )
        )

    def get_transfer_history(self) -> List[MoneyTransfer]:
        return list(self.records["transfers"])

    def add_card(self, nickname, card_type, issuer, last4, expiry):
        self.records["cards"].append(
            Card(
                nickname=nickname,
                card_type=card_type,
                issuer=issuer,
                last4=last4,
                expiry=expiry,
            )
        )

    def remove_card(self, nickname: str) -> None:
        self.records["cards"] = [
            c for c in self.records["cards"] if c.nickname != nickname
        ]

    def get_all_cards(self) -> List[Card]:
        return list(self.records["cards"])

    def apply_loan(self, loan_type, name, amount, tenure, income, purpose, documents):
        self.records["loans"].append(
            LoanApplication(
                loan_type=loan_type,
                name=name,
                amount=amount,
                tenure=tenure,
                income=income,
                purpose=purpose,
                documents=documents,
                timestamp=time.time_ns(),
            )
        )

    def get_loan_applications(self) -> List[LoanApplication]:
        return list(self.records["loans"])

    def submit_insurance_inquiry(self, category, coverage_amount, notes, contact_preference):
        self.records["insurance"].append(
            InsuranceInquiry(
                category=category,
                coverage_amount=coverage_amount,
                notes=notes,
                contact_preference=contact_preference,
                timestamp=time.time_ns(),
            )
        )

    def get_insurance_inquiries(self) -> List[InsuranceInquiry]:
        return list(self.records["insurance"])

    def save_emi_plan(self, principal, rate, tenure_months, emi, total_payment, total_interest):
        self.records["emi_plans"].append(
            EmiPlan(
                principal=principal,
                rate=rate,
                tenure_months=tenure_months,
                emi=emi,
                total_payment=total_payment,
                total_interest=total_interest,
                created_at=time.time_ns(),
            )
        )

    def get_emi_plans(self) -> List[EmiPlan]:
        return list(self.records["emi_plans"])

    def get_dashboard_summary(self) -> DashboardSummary:
        return DashboardSummary(
            loan_count=len(self.records["loans"]),
            card_count=len(self.records["cards"]),
            emi_plans_count=len(self.records["emi_plans"]),
            recent_transfers=self.records["transfers"],
        )


@pytest.fixture
def backend_store():
    """Records of every caller, keyed by principal."""
    return {}


@pytest.fixture(autouse=True)
def override_backend(backend_store):
    """Route backend dependencies to the in-memory store for each test."""

    def override_get_backend(caller: Caller = Depends(get_current_caller)):
        yield InMemoryBackend(backend_store, caller.principal)

    app.dependency_overrides[get_backend] = override_get_backend
    yield
    app.dependency_overrides.pop(get_backend, None)


def make_token(principal: str, **claims) -> str:
    """Sign a token the way the identity provider would."""
    settings = get_settings()
    payload = {"sub": principal, "exp": int(time.time()) + 600, **claims}
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


@pytest.fixture
def token_factory():
    """Mint signed tokens for a principal."""
    return make_token


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def auth_headers():
    """Authorization headers for a regular caller."""
    return {"Authorization": f"Bearer {make_token('user-principal')}"}


@pytest.fixture
def admin_headers(backend_store):
    """Authorization headers for a caller the backend reports as admin."""
    backend_store.setdefault("_roles", {})["admin-principal"] = UserRole.admin
    return {"Authorization": f"Bearer {make_token('admin-principal')}"}
