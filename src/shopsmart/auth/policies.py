"""Policy predicates layered on top of ``protect``/``authorize``.

Each predicate is a plain function of the acting account and a target, so
workflows compose them instead of re-deriving identity checks per endpoint.
"""

from shopsmart.errors import Forbidden, SelfModificationForbidden


def is_self(actor_id, target_id) -> bool:
    return str(actor_id) == str(target_id)


def has_role(account, *roles) -> bool:
    return account is not None and account.role in roles


def ensure_role(account, *roles):
    if not has_role(account, *roles):
        raise Forbidden("Forbidden: Insufficient permissions", required_roles=list(roles))


def ensure_not_self(actor_id, target_id, action):
    """Reject an administrative ``action`` aimed at the actor's own account."""
    if is_self(actor_id, target_id):
        raise SelfModificationForbidden(f"You cannot {action} your own account.", account_id=str(target_id))
