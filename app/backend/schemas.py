"""
Record types exchanged with the remote banking backend.

Money is always integer minor units (hundredths) and time is always integer
nanoseconds since the epoch. Field names travel in camelCase on the wire.
"""

import enum
from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CardType(str, enum.Enum):
    credit = "credit"
    debit = "debit"


class TransferType(str, enum.Enum):
    imps = "imps"
    neft = "neft"
    rtgs = "rtgs"


class TransferStatus(str, enum.Enum):
    submitted = "submitted"
    completed = "completed"
    failed = "failed"


class LoanType(str, enum.Enum):
    home = "home"
    business = "business"
    vehicle = "vehicle"


class LoanStatus(str, enum.Enum):
    submitted = "submitted"
    under_review = "underReview"


class InsuranceCategory(str, enum.Enum):
    home = "home"
    life = "life"
    vehicle = "vehicle"
    health = "health"


class InquiryStatus(str, enum.Enum):
    submitted = "submitted"
    reviewed = "reviewed"


class UserRole(str, enum.Enum):
    admin = "admin"
    user = "user"
    guest = "guest"


class BackendRecord(BaseModel):
    """Base for wire records: camelCase aliases, snake_case attributes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserProfile(BackendRecord):
    name: str
    email: str
    phone: str


class MoneyTransfer(BackendRecord):
    from_account: str
    beneficiary: str
    amount: int
    note: str = ""
    transfer_type: TransferType
    status: TransferStatus = TransferStatus.submitted
    timestamp: int


class Card(BackendRecord):
    nickname: str
    card_type: CardType
    issuer: str
    last4: str
    expiry: str


class LoanApplication(BackendRecord):
    loan_type: LoanType
    name: str
    amount: int
    tenure: int
    income: int
    purpose: str
    documents: str = ""
    status: LoanStatus = LoanStatus.submitted
    timestamp: int


class InsuranceInquiry(BackendRecord):
    category: InsuranceCategory
    coverage_amount: int
    notes: str = ""
    contact_preference: str
    status: InquiryStatus = InquiryStatus.submitted
    timestamp: int


class EmiPlan(BackendRecord):
    principal: int
    rate: float
    tenure_months: int
    emi: float
    total_payment: float
    total_interest: float
    created_at: int


class DashboardSummary(BackendRecord):
    loan_count: int = 0
    card_count: int = 0
    emi_plans_count: int = 0
    recent_transfers: List[MoneyTransfer] = []
