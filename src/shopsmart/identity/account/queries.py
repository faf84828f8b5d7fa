"""Read-side helpers for accounts."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from shopsmart.errors import NotFound
from shopsmart.identity.account.account import Account
from shopsmart.ordering.cart.contents import cart_contents
from shopsmart.ordering.wishlist.contents import wishlist_contents
from shopsmart.reviews.feedback.queries import feedback_by_account


def get_account(account_id):
    try:
        return current_domain.repository_for(Account).get(account_id)
    except ObjectNotFoundError:
        raise NotFound("User not found", account_id=str(account_id)) from None


def account_detail(account):
    """Profile plus the account's cart, wishlist and feedback."""
    return {
        **account.to_profile(),
        "cart": cart_contents(account.id),
        "wishlist": wishlist_contents(account.id),
        "feedback": feedback_by_account(account.id),
    }


def list_accounts():
    accounts = current_domain.repository_for(Account)._dao.query.order_by("-created_at").all().items
    return [account_detail(account) for account in accounts]
