"""
Bearer-token authorization.

Tokens are issued by the identity service and validated here with the shared
HMAC secret. The decoded payload is exposed to endpoints as a typed `Claims`
object; `require_claims` and `require_admin` gate endpoints before dispatch.
"""

import logging

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel, ConfigDict
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from moviesapi.config import settings
from moviesapi.models import User

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"

bearer_scheme = HTTPBearer(auto_error=False)


class Claims(BaseModel):
    """Claims carried by a validated access token."""

    model_config = ConfigDict(extra="allow")

    email: str | None = None
    role: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE


def decode_token(token: str) -> Claims:
    """
    Validate a JWT and return its claims.

    Signature, expiry and (when configured) issuer and audience are checked
    with no clock skew allowance.

    Raises:
        jwt.InvalidTokenError: If the token fails any check
    """
    payload = jwt.decode(
        token,
        settings.jwt_secret,
        algorithms=[settings.jwt_algorithm],
        audience=settings.jwt_audience,
        issuer=settings.jwt_issuer,
        leeway=0,
        options={
            "require": ["exp"],
            "verify_aud": settings.jwt_audience is not None,
        },
    )
    return Claims.model_validate(payload)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_optional_claims(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Claims | None:
    """Claims of the caller, or None for anonymous callers and unusable tokens."""
    if credentials is None:
        return None
    try:
        return decode_token(credentials.credentials)
    except jwt.InvalidTokenError as e:
        logger.debug(f"Ignoring invalid bearer token on anonymous endpoint: {e}")
        return None


async def require_claims(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Claims:
    """Claims of the caller; 401 when no valid token was sent."""
    if credentials is None:
        raise _unauthorized("Not authenticated")
    try:
        return decode_token(credentials.credentials)
    except jwt.InvalidTokenError as e:
        logger.info(f"Rejected bearer token: {e}")
        raise _unauthorized("Invalid token") from e


async def require_admin(claims: Claims = Depends(require_claims)) -> Claims:
    """Claims of an admin caller; 403 for authenticated non-admins."""
    if not claims.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin role required")
    return claims


async def resolve_user_id(db: AsyncSession, claims: Claims) -> str:
    """
    Look up the stored user behind the token's email claim.

    Raises:
        HTTPException: 401 if the claim is missing or matches no user
    """
    if not claims.email:
        raise _unauthorized("Token has no email claim")

    result = await db.execute(select(User.id).where(User.email == claims.email))
    user_id = result.scalar_one_or_none()
    if user_id is None:
        logger.warning(f"No user found for email claim {claims.email!r}")
        raise _unauthorized("Unknown user")
    return user_id
