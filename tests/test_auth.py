"""
Tests for token verification and caller resolution.
"""

import time

from jose import jwt

from app.auth.jwt import decode_token
from app.config import get_settings


class TestTokens:
    """Test JWT verification."""

    def test_valid_token_decodes(self, token_factory):
        payload = decode_token(token_factory("principal-1"))
        assert payload["sub"] == "principal-1"

    def test_expired_token_rejected(self, token_factory):
        token = token_factory("principal-1", exp=int(time.time()) - 10)
        assert decode_token(token) is None

    def test_wrong_signature_rejected(self):
        settings = get_settings()
        token = jwt.encode(
            {"sub": "principal-1"}, "some-other-secret", algorithm=settings.jwt_algorithm
        )
        assert decode_token(token) is None

    def test_garbage_rejected(self):
        assert decode_token("garbage") is None


class TestCallerResolution:
    """Test how requests are tied to a caller."""

    def test_cookie_token_accepted(self, client, token_factory):
        client.cookies.set("access_token", token_factory("cookie-principal"))
        response = client.get("/api/profile/role")
        assert response.status_code == 200

    def test_token_without_subject_rejected(self, client):
        settings = get_settings()
        token = jwt.encode(
            {"exp": int(time.time()) + 60},
            settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
        )
        response = client.get(
            "/api/cards", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 401

    def test_non_bearer_scheme_rejected(self, client, token_factory):
        response = client.get(
            "/api/cards", headers={"Authorization": f"Basic {token_factory('x')}"}
        )
        assert response.status_code == 401
