"""
Shared FastAPI dependencies for routes that talk to the banking backend.
"""

from typing import Generator

from fastapi import Depends, HTTPException, status

from app.auth.dependencies import Caller, get_current_caller
from app.backend import BankingBackend, HttpBankingBackend
from app.config import get_settings


def get_backend(
    caller: Caller = Depends(get_current_caller),
) -> Generator[BankingBackend, None, None]:
    """Dependency for a backend connection acting on behalf of the caller."""
    settings = get_settings()
    backend = HttpBankingBackend(
        settings.backend_url,
        token=caller.token,
        timeout=settings.backend_timeout_seconds,
    )
    try:
        yield backend
    finally:
        backend.close()


def require_admin(
    backend: BankingBackend = Depends(get_backend),
) -> BankingBackend:
    """
    Require the current caller to be an admin.

    Raises HTTPException 403 if the backend does not report the caller as admin.
    """
    if not backend.is_caller_admin():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )

    return backend
