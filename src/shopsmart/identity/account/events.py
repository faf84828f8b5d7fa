"""Domain events for the Account aggregate."""

from protean.fields import DateTime, Identifier, String

from shopsmart.domain import shopsmart


@shopsmart.event(part_of="Account")
class AccountRegistered:
    """A new shopper account was created."""

    __version__ = 1

    account_id: Identifier(required=True)
    name: String(required=True)
    email: String(required=True)
    role: String(required=True)
    registered_at: DateTime(required=True)


@shopsmart.event(part_of="Account")
class ProfileUpdated:
    """An account holder changed their name, address or phone."""

    __version__ = 1

    account_id: Identifier(required=True)
    name: String(required=True)
    address: String()
    phone: String()


@shopsmart.event(part_of="Account")
class RoleChanged:
    """An administrator promoted or demoted an account."""

    __version__ = 1

    account_id: Identifier(required=True)
    previous_role: String(required=True)
    new_role: String(required=True)
    changed_by: Identifier(required=True)

