"""Error kinds surfaced to API callers.

Each kind carries the HTTP status it maps to. Field-level validation keeps
using ``protean.exceptions.ValidationError``; these classes cover the
workflow and access-control failures that callers need to tell apart.
"""


class ShopSmartError(Exception):
    """Base class for all ShopSmart error kinds."""

    status_code = 500

    def __init__(self, message, **details):
        super().__init__(message)
        self.message = message
        self.details = details

    @property
    def kind(self):
        return type(self).__name__

    def to_dict(self):
        return {"error": self.message, "kind": self.kind, "details": self.details}


class Internal(ShopSmartError):
    status_code = 500


# --- Access control ---


class Unauthenticated(ShopSmartError):
    status_code = 401


class Forbidden(ShopSmartError):
    status_code = 403


class SelfModificationForbidden(Forbidden):
    pass


# --- Lookups ---


class NotFound(ShopSmartError):
    status_code = 404


class ProductNotFound(NotFound):
    def __init__(self, product_id):
        super().__init__(f"Product with ID {product_id} not found.", product_id=str(product_id))


# --- Order placement ---


class MissingShippingAddress(ShopSmartError):
    status_code = 400

    def __init__(self, account_id):
        super().__init__(
            "Account profile is missing a shipping address. Please update your profile.",
            account_id=str(account_id),
        )


class EmptyOrder(ShopSmartError):
    status_code = 400

    def __init__(self):
        super().__init__("Cart is empty. Cannot place an empty order.")


class InsufficientStock(ShopSmartError):
    status_code = 400

    def __init__(self, product_id, product_name, available, requested):
        super().__init__(
            f"Insufficient stock for {product_name}. Available: {available}, Requested: {requested}",
            product_id=str(product_id),
            product_name=product_name,
            available=available,
            requested=requested,
        )
        self.available = available
        self.requested = requested


# --- Order status ---


class InvalidStatus(ShopSmartError):
    status_code = 400

    def __init__(self, status):
        super().__init__(f"Invalid order status provided: {status!r}.", status=status)


class IllegalTransitionFromCancelled(ShopSmartError):
    status_code = 400

    def __init__(self, order_id, target_status):
        super().__init__(
            f"Order {order_id} is cancelled and cannot move to {target_status}.",
            order_id=str(order_id),
            target_status=target_status,
        )
