"""Account aggregate root — shopper identity, credentials, contact details and role."""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from shopsmart.domain import shopsmart
from shopsmart.identity.account.events import AccountRegistered, ProfileUpdated, RoleChanged
from shopsmart.identity.shared.email import normalize_email
from shopsmart.identity.shared.passwords import verify_password

# Stored by older clients when no address was captured
PLACEHOLDER_ADDRESS = "N/A"


class Role(Enum):
    """Enumeration of account roles."""

    USER = "user"
    ADMIN = "admin"


@shopsmart.aggregate
class Account:
    """A registered shopper or administrator.

    The address doubles as the shipping address: order placement copies it
    onto the order at the moment of purchase.
    """

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254, unique=True)
    password_hash: String(required=True, max_length=255)
    address: String(max_length=500)
    phone: String(max_length=20)
    role: String(choices=Role, default=Role.USER.value)
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def register(cls, name, email, password_hash, address, phone, role=Role.USER.value):
        """Create an account from an already hashed password."""
        missing = [
            field
            for field, value in (
                ("name", name),
                ("email", email),
                ("password", password_hash),
                ("address", address),
                ("phone", phone),
            )
            if not value or not str(value).strip()
        ]
        if missing:
            raise ValidationError(
                {field: ["This field is required for registration"] for field in missing}
            )

        now = datetime.now(UTC)
        account = cls(
            name=name.strip(),
            email=normalize_email(email),
            password_hash=password_hash,
            address=address.strip(),
            phone=phone.strip(),
            role=role,
            created_at=now,
            updated_at=now,
        )
        account.raise_(
            AccountRegistered(
                account_id=account.id,
                name=account.name,
                email=account.email,
                role=account.role,
                registered_at=now,
            )
        )
        return account

    @property
    def is_admin(self):
        return self.role == Role.ADMIN.value

    def has_shipping_address(self):
        address = (self.address or "").strip()
        return bool(address) and address != PLACEHOLDER_ADDRESS

    def check_password(self, password):
        return verify_password(password, self.password_hash)

    def update_profile(self, name=None, address=None, phone=None):
        """Update contact details. Blank values are ignored."""
        if name is not None and name.strip():
            self.name = name.strip()
        if address is not None and address.strip():
            self.address = address.strip()
        if phone is not None and phone.strip():
            self.phone = phone.strip()

        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProfileUpdated(
                account_id=self.id,
                name=self.name,
                address=self.address,
                phone=self.phone,
            )
        )

    def change_role(self, role, changed_by):
        if role not in {r.value for r in Role}:
            raise ValidationError({"role": ['Invalid role specified. Role must be "user" or "admin".']})

        previous = self.role
        self.role = role
        self.updated_at = datetime.now(UTC)

        self.raise_(
            RoleChanged(
                account_id=self.id,
                previous_role=previous,
                new_role=role,
                changed_by=changed_by,
            )
        )

    def to_profile(self):
        """Public view of the account; never includes the password hash."""
        return {
            "id": str(self.id),
            "name": self.name,
            "email": self.email,
            "role": self.role,
            "address": self.address,
            "phone": self.phone,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
