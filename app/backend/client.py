"""
Banking Backend Client Module

Interface to the remote banking backend that owns transfers, cards, loan
applications, insurance inquiries, EMI plans and user profiles, plus the
HTTP adapter used in production.

Wire format: every operation is ``POST {base_url}/rpc/{method}`` with a JSON
object of camelCase arguments and the caller's bearer token. The response body
is the JSON result (``null`` for operations that return nothing).
"""

import abc
import logging
from typing import Any, Dict, List, Optional

import httpx

from app.backend.schemas import (
    Card,
    CardType,
    DashboardSummary,
    EmiPlan,
    InsuranceCategory,
    InsuranceInquiry,
    LoanApplication,
    LoanType,
    MoneyTransfer,
    TransferType,
    UserProfile,
    UserRole,
)

logger = logging.getLogger(__name__)


class BackendError(Exception):
    """Raised when the remote backend rejects a call or cannot be reached."""

    def __init__(self, method: str, detail: str, status_code: Optional[int] = None):
        self.method = method
        self.detail = detail
        self.status_code = status_code
        super().__init__(f"{method} failed: {detail}")


class BankingBackend(abc.ABC):
    """Operations the remote banking backend exposes to an authenticated caller."""

    # Profiles and roles

    @abc.abstractmethod
    def get_caller_user_profile(self) -> Optional[UserProfile]: ...

    @abc.abstractmethod
    def save_caller_user_profile(self, profile: UserProfile) -> None: ...

    @abc.abstractmethod
    def get_user_profile(self, user: str) -> Optional[UserProfile]: ...

    @abc.abstractmethod
    def get_caller_user_role(self) -> UserRole: ...

    @abc.abstractmethod
    def is_caller_admin(self) -> bool: ...

    @abc.abstractmethod
    def assign_caller_user_role(self, user: str, role: UserRole) -> None: ...

    # Transfers

    @abc.abstractmethod
    def create_transfer(
        self,
        from_account: str,
        beneficiary: str,
        amount: int,
        note: str,
        transfer_type: TransferType,
    ) -> None: ...

    @abc.abstractmethod
    def get_transfer_history(self) -> List[MoneyTransfer]: ...

    # Cards

    @abc.abstractmethod
    def add_card(
        self,
        nickname: str,
        card_type: CardType,
        issuer: str,
        last4: str,
        expiry: str,
    ) -> None: ...

    @abc.abstractmethod
    def remove_card(self, nickname: str) -> None: ...

    @abc.abstractmethod
    def get_all_cards(self) -> List[Card]: ...

    # Loans

    @abc.abstractmethod
    def apply_loan(
        self,
        loan_type: LoanType,
        name: str,
        amount: int,
        tenure: int,
        income: int,
        purpose: str,
        documents: str,
    ) -> None: ...

    @abc.abstractmethod
    def get_loan_applications(self) -> List[LoanApplication]: ...

    # Insurance

    @abc.abstractmethod
    def submit_insurance_inquiry(
        self,
        category: InsuranceCategory,
        coverage_amount: int,
        notes: str,
        contact_preference: str,
    ) -> None: ...

    @abc.abstractmethod
    def get_insurance_inquiries(self) -> List[InsuranceInquiry]: ...

    # EMI plans

    @abc.abstractmethod
    def save_emi_plan(
        self,
        principal: int,
        rate: float,
        tenure_months: int,
        emi: float,
        total_payment: float,
        total_interest: float,
    ) -> None: ...

    @abc.abstractmethod
    def get_emi_plans(self) -> List[EmiPlan]: ...

    # Dashboard

    @abc.abstractmethod
    def get_dashboard_summary(self) -> DashboardSummary: ...

    def close(self) -> None:
        """Release any resources held by the backend connection."""


class HttpBankingBackend(BankingBackend):
    """REST adapter for the remote banking backend, bound to one caller token."""

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = 5.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def _call(self, method: str, allow_missing: bool = False, **arguments: Any) -> Any:
        headers = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        logger.debug(f"Calling backend {method}")
        try:
            response = self._client.post(
                f"{self.base_url}/rpc/{method}",
                json=arguments,
                headers=headers,
            )
        except httpx.HTTPError as e:
            logger.error(f"Backend connection failed during {method}: {e}")
            raise BackendError(method, str(e)) from e

        if response.status_code == 404 and allow_missing:
            return None
        if response.status_code >= 400:
            logger.error(
                f"Backend returned {response.status_code} for {method}: {response.text}"
            )
            raise BackendError(method, response.text, response.status_code)

        if not response.content:
            return None
        return response.json()

    def get_caller_user_profile(self) -> Optional[UserProfile]:
        data = self._call("getCallerUserProfile", allow_missing=True)
        return UserProfile.model_validate(data) if data else None

    def save_caller_user_profile(self, profile: UserProfile) -> None:
        self._call("saveCallerUserProfile", profile=profile.model_dump(by_alias=True))

    def get_user_profile(self, user: str) -> Optional[UserProfile]:
        data = self._call("getUserProfile", allow_missing=True, user=user)
        return UserProfile.model_validate(data) if data else None

    def get_caller_user_role(self) -> UserRole:
        return UserRole(self._call("getCallerUserRole"))

    def is_caller_admin(self) -> bool:
        return bool(self._call("isCallerAdmin"))

    def assign_caller_user_role(self, user: str, role: UserRole) -> None:
        self._call("assignCallerUserRole", user=user, role=role.value)

    def create_transfer(
        self,
        from_account: str,
        beneficiary: str,
        amount: int,
        note: str,
        transfer_type: TransferType,
    ) -> None:
        self._call(
            "createTransfer",
            fromAccount=from_account,
            beneficiary=beneficiary,
            amount=amount,
            note=note,
            transferType=transfer_type.value,
        )

    def get_transfer_history(self) -> List[MoneyTransfer]:
        return [
            MoneyTransfer.model_validate(item)
            for item in self._call("getTransferHistory") or []
        ]

    def add_card(
        self,
        nickname: str,
        card_type: CardType,
        issuer: str,
        last4: str,
        expiry: str,
    ) -> None:
        self._call(
            "addCard",
            nickname=nickname,
            cardType=card_type.value,
            issuer=issuer,
            last4=last4,
            expiry=expiry,
        )

    def remove_card(self, nickname: str) -> None:
        self._call("removeCard", nickname=nickname)

    def get_all_cards(self) -> List[Card]:
        return [Card.model_validate(item) for item in self._call("getAllCards") or []]

    def apply_loan(
        self,
        loan_type: LoanType,
        name: str,
        amount: int,
        tenure: int,
        income: int,
        purpose: str,
        documents: str,
    ) -> None:
        self._call(
            "applyLoan",
            loanType=loan_type.value,
            name=name,
            amount=amount,
            tenure=tenure,
            income=income,
            purpose=purpose,
            documents=documents,
        )

    def get_loan_applications(self) -> List[LoanApplication]:
        return [
            LoanApplication.model_validate(item)
            for item in self._call("getLoanApplications") or []
        ]

    def submit_insurance_inquiry(
        self,
        category: InsuranceCategory,
        coverage_amount: int,
        notes: str,
        contact_preference: str,
    ) -> None:
        self._call(
            "submitInsuranceInquiry",
            category=category.value,
            coverageAmount=coverage_amount,
            notes=notes,
            contactPreference=contact_preference,
        )

    def get_insurance_inquiries(self) -> List[InsuranceInquiry]:
        return [
            InsuranceInquiry.model_validate(item)
            for item in self._call("getInsuranceInquiries") or []
        ]

    def save_emi_plan(
        self,
        principal: int,
        rate: float,
        tenure_months: int,
        emi: float,
        total_payment: float,
        total_interest: float,
    ) -> None:
        self._call(
            "saveEmiPlan",
            principal=principal,
            rate=rate,
            tenureMonths=tenure_months,
            emi=emi,
            totalPayment=total_payment,
            totalInterest=total_interest,
        )

    def get_emi_plans(self) -> List[EmiPlan]:
        return [EmiPlan.model_validate(item) for item in self._call("getEmiPlans") or []]

    def get_dashboard_summary(self) -> DashboardSummary:
        data: Dict[str, Any] = self._call("getDashboardSummary") or {}
        return DashboardSummary.model_validate(data)

    def close(self) -> None:
        """Close the HTTP client"""
        self._client.close()
