"""
Caller profile and role endpoints.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from app.api.deps import get_backend, require_admin
from app.backend import BankingBackend
from app.backend.schemas import UserProfile, UserRole

logger = logging.getLogger(__name__)

router = APIRouter()


class ProfileInput(BaseModel):
    """Schema for saving the caller's profile."""

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    phone: str = ""


class ProfileResponse(BaseModel):
    name: str
    email: str
    phone: str


class RoleResponse(BaseModel):
    role: UserRole
    is_admin: bool


class RoleAssignment(BaseModel):
    role: UserRole


def _profile_response(profile: UserProfile) -> ProfileResponse:
    return ProfileResponse(name=profile.name, email=profile.email, phone=profile.phone)


@router.get("", response_model=ProfileResponse)
def get_profile(backend: BankingBackend = Depends(get_backend)):
    """Get the caller's profile."""
    profile = backend.get_caller_user_profile()
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found",
        )
    return _profile_response(profile)


@router.put("", response_model=ProfileResponse)
def save_profile(
    profile: ProfileInput,
    backend: BankingBackend = Depends(get_backend),
):
    """Create or replace the caller's profile."""
    name = profile.name.strip()
    email = profile.email.strip()
    if not name or not email:
        raise HTTPException(status_code=400, detail="Name and email are required")

    record = UserProfile(name=name, email=email, phone=profile.phone.strip())
    backend.save_caller_user_profile(record)
    logger.info("Saved caller profile")
    return _profile_response(record)


@router.get("/role", response_model=RoleResponse)
def get_role(backend: BankingBackend = Depends(get_backend)):
    """Get the caller's role."""
    role = backend.get_caller_user_role()
    return RoleResponse(role=role, is_admin=role == UserRole.admin)


@router.get("/{user}", response_model=ProfileResponse)
def get_user_profile(
    user: str,
    backend: BankingBackend = Depends(require_admin),
):
    """Look up another user's profile. Admin only."""
    profile = backend.get_user_profile(user)
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found",
        )
    return _profile_response(profile)


@router.put("/{user}/role", response_model=RoleAssignment)
def assign_role(
    user: str,
    assignment: RoleAssignment,
    backend: BankingBackend = Depends(require_admin),
):
    """Assign a role to a user. Admin only."""
    backend.assign_caller_user_role(user, assignment.role)
    logger.info(f"Assigned role {assignment.role.value} to {user}")
    return assignment
