"""
FastAPI dependencies for authentication.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import HTTPException, status, Request

from app.auth.jwt import decode_token


@dataclass(frozen=True)
class Caller:
    """Authenticated caller: identity from the token plus the token itself."""

    principal: str
    token: str


def get_token_from_request(request: Request) -> Optional[str]:
    """
    Extract JWT token from request.

    Checks in order:
    1. Authorization header (Bearer token)
    2. access_token cookie

    Returns:
        Token string if found, None otherwise
    """
    # Check Authorization header
    auth_header = request.headers.get("Authorization")
    if auth_header and auth_header.startswith("Bearer "):
        return auth_header[7:]  # Remove "Bearer " prefix

    # Check cookie
    token = request.cookies.get("access_token")
    return token


async def get_current_caller_optional(request: Request) -> Optional[Caller]:
    """
    Get the current caller if authenticated, None otherwise.

    Use this for routes that work both with and without authentication.
    """
    token = get_token_from_request(request)
    if not token:
        return None

    payload = decode_token(token)
    if not payload:
        return None

    principal = payload.get("sub")
    if not principal:
        return None

    return Caller(principal=principal, token=token)


async def get_current_caller(request: Request) -> Caller:
    """
    Get the current authenticated caller.

    Raises HTTPException 401 if not authenticated.
    """
    caller = await get_current_caller_optional(request)

    if not caller:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return caller
