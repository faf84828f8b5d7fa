"""Read-side helpers for feedback."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from shopsmart.catalogue.product.listing import find_product
from shopsmart.identity.account.account import Account
from shopsmart.reviews.feedback.feedback import Feedback


def _author_name(account_id):
    try:
        return current_domain.repository_for(Account).get(account_id).name
    except ObjectNotFoundError:
        return None


def feedback_to_dict(feedback):
    return {
        "id": str(feedback.id),
        "product_id": str(feedback.product_id),
        "account_id": str(feedback.account_id),
        "rating": feedback.rating,
        "comment": feedback.comment or "",
        "created_at": feedback.created_at.isoformat() if feedback.created_at else None,
    }


def feedback_for_product(product_id):
    """Feedback on one product, newest first, with the author's name."""
    entries = (
        current_domain.repository_for(Feedback)
        ._dao.query.filter(product_id=str(product_id))
        .order_by("-created_at")
        .all()
        .items
    )
    return [{**feedback_to_dict(f), "author": _author_name(f.account_id)} for f in entries]


def feedback_by_account(account_id):
    entries = current_domain.repository_for(Feedback)._dao.query.filter(account_id=str(account_id)).all().items
    return [feedback_to_dict(f) for f in entries]


def all_feedback():
    """Every feedback entry, newest first, with author and product names."""
    entries = current_domain.repository_for(Feedback)._dao.query.order_by("-created_at").all().items
    results = []
    for f in entries:
        product = find_product(f.product_id)
        results.append(
            {
                **feedback_to_dict(f),
                "author": _author_name(f.account_id),
                "product_name": product.name if product else None,
            }
        )
    return results
