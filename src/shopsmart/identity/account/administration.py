"""Account administration — role changes and account deletion.

Both operations are admin-only and neither may target the acting admin's
own account. Deleting an account also deletes everything keyed to it:
orders, feedback, cart and wishlist.
"""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from shopsmart.auth.policies import ensure_not_self
from shopsmart.domain import logger, shopsmart
from shopsmart.identity.account.account import Account
from shopsmart.ordering.cart.cart import Cart
from shopsmart.ordering.order.order import Order
from shopsmart.ordering.wishlist.wishlist import Wishlist
from shopsmart.reviews.feedback.feedback import Feedback


@shopsmart.command(part_of="Account")
class ChangeRole:
    acting_account_id: Identifier(required=True)
    account_id: Identifier(required=True)
    role: String(required=True, max_length=20)


@shopsmart.command(part_of="Account")
class DeleteAccount:
    acting_account_id: Identifier(required=True)
    account_id: Identifier(required=True)


# Aggregates holding an ``account_id`` reference, deleted with the account
_OWNED_BY_ACCOUNT = (Order, Feedback, Cart, Wishlist)


@shopsmart.command_handler(part_of=Account)
class AccountAdministrationHandler:
    @handle(ChangeRole)
    def change_role(self, command):
        ensure_not_self(command.acting_account_id, command.account_id, "change the role of")

        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_id)
        account.change_role(command.role, changed_by=command.acting_account_id)
        repo.add(account)

        logger.info(
            "account_role_changed",
            account_id=str(account.id),
            new_role=account.role,
            changed_by=str(command.acting_account_id),
        )

    @handle(DeleteAccount)
    def delete_account(self, command):
        ensure_not_self(command.acting_account_id, command.account_id, "delete")

        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_id)

        removed = {}
        for aggregate_cls in _OWNED_BY_ACCOUNT:
            dao = current_domain.repository_for(aggregate_cls)._dao
            owned = dao.query.filter(account_id=str(account.id)).all().items
            for record in owned:
                dao.delete(record)
            removed[aggregate_cls.__name__.lower()] = len(owned)

        repo._dao.delete(account)

        logger.info(
            "account_deleted",
            account_id=str(command.account_id),
            deleted_by=str(command.acting_account_id),
            **removed,
        )
