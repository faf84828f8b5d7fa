"""Read side of the cart: entries with their product details resolved."""

from shopsmart.catalogue.product.listing import find_product
from shopsmart.ordering.cart.cart import find_cart


def cart_contents(account_id):
    """Return the account's cart entries, oldest first.

    Entries whose product has since been removed from the catalogue are
    reported with ``product: None``.
    """
    cart = find_cart(account_id)
    if cart is None:
        return []

    contents = []
    for item in cart.entries():
        product = find_product(item.product_id)
        contents.append(
            {
                "product_id": str(item.product_id),
                "quantity": item.quantity,
                "product": (
                    {
                        "name": product.name,
                        "price": product.price,
                        "image": product.image,
                        "stock": product.stock,
                    }
                    if product
                    else None
                ),
            }
        )
    return contents
