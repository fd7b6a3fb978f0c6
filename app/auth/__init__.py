"""
Authentication module.
"""

from app.auth.jwt import decode_token
from app.auth.dependencies import (
    Caller,
    get_current_caller,
    get_current_caller_optional,
)

__all__ = [
    "decode_token",
    "Caller",
    "get_current_caller",
    "get_current_caller_optional",
]
