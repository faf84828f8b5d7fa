"""Read side of the wishlist."""

from shopsmart.catalogue.product.listing import find_product, product_to_dict
from shopsmart.ordering.wishlist.wishlist import find_wishlist


def wishlist_contents(account_id):
    """Saved products with full details; products removed since are skipped."""
    wishlist = find_wishlist(account_id)
    if wishlist is None:
        return []

    products = (find_product(item.product_id) for item in wishlist.entries())
    return [product_to_dict(product) for product in products if product is not None]
