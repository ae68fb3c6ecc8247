"""Unit tests for token decoding and authorization dependencies."""

from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import jwt
import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials

from moviesapi.auth import (
    Claims,
    decode_token,
    get_optional_claims,
    require_admin,
    require_claims,
    resolve_user_id,
)
from moviesapi.config import settings


def bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestDecodeToken:
    def test_returns_typed_claims(self, token_factory):
        claims = decode_token(token_factory(email="admin@example.com", role="admin"))

        assert claims.email == "admin@example.com"
        assert claims.role == "admin"
        assert claims.is_admin is True

    def test_keeps_unknown_claims(self, token_factory):
        claims = decode_token(token_factory(email="a@example.com", sub="123"))

        assert claims.model_extra["sub"] == "123"
        assert claims.is_admin is False

    def test_rejects_expired_token(self, token_factory):
        token = token_factory(expires_in=timedelta(seconds=-1), email="a@example.com")

        with pytest.raises(jwt.ExpiredSignatureError):
            decode_token(token)

    def test_rejects_token_without_expiry(self):
        token = jwt.encode({"email": "a@example.com"}, settings.jwt_secret, algorithm="HS256")

        with pytest.raises(jwt.MissingRequiredClaimError):
            decode_token(token)

    def test_rejects_wrong_signature(self):
        token = jwt.encode(
            {"email": "a@example.com", "exp": 4102444800},
            "some-other-secret-of-sufficient-length",
            algorithm="HS256",
        )

        with pytest.raises(jwt.InvalidSignatureError):
            decode_token(token)


class TestDependencies:
    async def test_optional_claims_is_none_without_header(self):
        assert await get_optional_claims(None) is None

    async def test_optional_claims_ignores_garbage(self):
        assert await get_optional_claims(bearer("garbage")) is None

    async def test_require_claims_rejects_missing_header(self):
        with pytest.raises(HTTPException) as exc_info:
            await require_claims(None)

        assert exc_info.value.status_code == 401
        assert exc_info.value.headers == {"WWW-Authenticate": "Bearer"}

    async def test_require_claims_rejects_invalid_token(self):
        with pytest.raises(HTTPException) as exc_info:
            await require_claims(bearer("garbage"))

        assert exc_info.value.status_code == 401

    async def test_require_admin_accepts_admin_role(self):
        claims = Claims(email="admin@example.com", role="admin")

        assert await require_admin(claims) is claims

    async def test_require_admin_forbids_other_roles(self):
        with pytest.raises(HTTPException) as exc_info:
            await require_admin(Claims(email="viewer@example.com", role="viewer"))

        assert exc_info.value.status_code == 403


class TestResolveUserId:
    async def test_returns_matching_user_id(self):
        db = AsyncMock()
        result = MagicMock()
        result.scalar_one_or_none.return_value = "user-1"
        db.execute = AsyncMock(return_value=result)

        assert await resolve_user_id(db, Claims(email="viewer@example.com")) == "user-1"

    async def test_unknown_email_is_unauthorized(self):
        db = AsyncMock()
        result = MagicMock()
        result.scalar_one_or_none.return_value = None
        db.execute = AsyncMock(return_value=result)

        with pytest.raises(HTTPException) as exc_info:
            await resolve_user_id(db, Claims(email="ghost@example.com"))

        assert exc_info.value.status_code == 401

    async def test_missing_email_claim_is_unauthorized(self):
        db = AsyncMock()

        with pytest.raises(HTTPException) as exc_info:
            await resolve_user_id(db, Claims(role="admin"))

        assert exc_info.value.status_code == 401
        db.execute.assert_not_awaited()
