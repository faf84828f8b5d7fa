"""Bearer token issuance and verification (HS256 JWT)."""

from datetime import UTC, datetime, timedelta

import jwt

from shopsmart.config import get_settings
from shopsmart.errors import Unauthenticated


def issue_token(account) -> str:
    """Issue a signed token naming the account as subject."""
    settings = get_settings()
    now = datetime.now(UTC)
    payload = {
        "id": str(account.id),
        "email": account.email,
        "role": account.role,
        "iat": now,
        "exp": now + timedelta(minutes=settings.jwt_expires_minutes),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict:
    """Verify signature and expiry, returning the claims.

    Raises:
        Unauthenticated: if the token is expired, malformed or lacks a subject.
    """
    settings = get_settings()
    try:
        claims = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError:
        raise Unauthenticated("Not authorized, token expired") from None
    except jwt.InvalidTokenError:
        raise Unauthenticated("Not authorized, token failed") from None

    if not claims.get("id"):
        raise Unauthenticated("Not authorized, token failed")
    return claims
