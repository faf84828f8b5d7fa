"""Account registration — command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from shopsmart.domain import logger, shopsmart
from shopsmart.identity.account.account import Account
from shopsmart.identity.shared.email import normalize_email
from shopsmart.identity.shared.passwords import MAX_PASSWORD_BYTES, fits_bcrypt, hash_password
from shopsmart.ordering.cart.cart import Cart


@shopsmart.command(part_of="Account")
class RegisterAccount:
    """Create a shopper account. The password arrives already hashed."""

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    password_hash: String(required=True, max_length=255)
    address: String(required=True, max_length=500)
    phone: String(required=True, max_length=20)


def find_account_by_email(email):
    accounts = current_domain.repository_for(Account)._dao.query.filter(email=email).all().items
    return accounts[0] if accounts else None


@shopsmart.command_handler(part_of=Account)
class RegisterAccountHandler:
    @handle(RegisterAccount)
    def register_account(self, command):
        email = normalize_email(command.email)
        if find_account_by_email(email) is not None:
            raise ValidationError({"email": ["User with this email already exists"]})

        account = Account.register(
            name=command.name,
            email=email,
            password_hash=command.password_hash,
            address=command.address,
            phone=command.phone,
        )
        current_domain.repository_for(Account).add(account)
        current_domain.repository_for(Cart).add(Cart.create(account_id=account.id))

        logger.info("account_registered", account_id=str(account.id))
        return str(account.id)


def register_account(name, email, password, address, phone):
    """Hash ``password`` and register the account. Returns the new account id."""
    if not password or not password.strip():
        raise ValidationError({"password": ["This field is required for registration"]})
    if not fits_bcrypt(password):
        raise ValidationError({"password": [f"Password cannot be longer than {MAX_PASSWORD_BYTES} bytes"]})

    command = RegisterAccount(
        name=name,
        email=email,
        password_hash=hash_password(password),
        address=address,
        phone=phone,
    )
    return current_domain.process(command, asynchronous=False)
