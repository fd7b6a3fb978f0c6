"""
JWT token verification using python-jose.

Tokens are issued by the identity provider; this service only checks the
signature and expiry and reads the caller identity from the ``sub`` claim.
"""

from typing import Optional, Dict, Any

from jose import jwt, JWTError

from app.config import get_settings

settings = get_settings()


def decode_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Decode and validate a JWT token.

    Args:
        token: The JWT token string

    Returns:
        Decoded payload dict if valid, None if invalid/expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
        return payload
    except JWTError:
        return None

