"""Credential checks: login and re-authentication."""

from shopsmart.auth.tokens import issue_token
from shopsmart.errors import Unauthenticated
from shopsmart.identity.account.registration import find_account_by_email


def login(email, password):
    """Return the account's profile with a fresh bearer token.

    Unknown emails and wrong passwords fail the same way.
    """
    address = (email or "").strip().lower()
    account = find_account_by_email(address) if address else None
    if account is None or not account.check_password(password):
        raise Unauthenticated("Invalid email or password")

    return {**account.to_profile(), "token": issue_token(account)}


def confirm_password(account, password):
    """Re-authenticate an already signed-in account."""
    if not account.check_password(password):
        raise Unauthenticated("Incorrect password")
    return True
