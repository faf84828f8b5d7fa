"""FastAPI dependencies for authentication (``protect``) and role checks (``authorize``)."""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from shopsmart.auth.policies import ensure_role
from shopsmart.auth.tokens import decode_token
from shopsmart.errors import Unauthenticated
from shopsmart.identity.account.account import Account
from shopsmart.utils.logging import add_context

_bearer = HTTPBearer(auto_error=False)


def resolve_account(token: str | None):
    """Turn a raw bearer token into a live ``Account``."""
    if not token:
        raise Unauthenticated("Not authorized, no token")

    claims = decode_token(token)
    try:
        return current_domain.repository_for(Account).get(claims["id"])
    except ObjectNotFoundError:
        raise Unauthenticated("Not authorized, account no longer exists") from None


async def protect(credentials: HTTPAuthorizationCredentials | None = Depends(_bearer)):
    """Resolve the acting account from the ``Authorization: Bearer`` header."""
    token = credentials.credentials if credentials and credentials.scheme.lower() == "bearer" else None
    account = resolve_account(token)
    add_context(account_id=str(account.id))
    return account


def authorize(*roles):
    """Build a dependency that admits only accounts holding one of ``roles``."""

    async def dependency(account=Depends(protect)):
        ensure_role(account, *roles)
        return account

    return dependency
