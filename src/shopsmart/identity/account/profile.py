"""Account profile management — command and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from shopsmart.domain import shopsmart
from shopsmart.identity.account.account import Account


@shopsmart.command(part_of="Account")
class UpdateProfile:
    account_id: Identifier(required=True)
    name: String(max_length=100)
    address: String(max_length=500)
    phone: String(max_length=20)


@shopsmart.command_handler(part_of=Account)
class ManageProfileHandler:
    @handle(UpdateProfile)
    def update_profile(self, command):
        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_id)
        account.update_profile(
            name=command.name,
            address=command.address,
            phone=command.phone,
        )
        repo.add(account)
