"""Read-side helpers for the catalogue: single product lookup and paged listing."""

import math

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.query import Q

from shopsmart.catalogue.product.product import Product
from shopsmart.errors import NotFound

SORTABLE_FIELDS = ("name", "price", "stock", "category", "created_at")
DEFAULT_PAGE_SIZE = 8


def product_to_dict(product):
    return {
        "id": str(product.id),
        "name": product.name,
        "description": product.description,
        "price": product.price,
        "image": product.image,
        "category": product.category,
        "stock": product.stock,
        "weight": product.weight,
        "dimensions": product.dimensions,
        "created_at": product.created_at.isoformat() if product.created_at else None,
        "updated_at": product.updated_at.isoformat() if product.updated_at else None,
    }


def get_product(product_id):
    try:
        return current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        raise NotFound("Product not found", product_id=str(product_id)) from None


def find_product(product_id):
    """Return the product or ``None`` when it no longer exists."""
    try:
        return current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        return None


def list_products(search=None, category=None, sort_by=None, order="asc", page=1, limit=DEFAULT_PAGE_SIZE):
    """Search, filter, sort and paginate the catalogue.

    ``search`` matches name or description and ``category`` matches
    case-insensitively; ``category="all"`` disables the category filter.
    Without ``sort_by`` the newest products come first.
    """
    page = max(int(page), 1)
    limit = max(int(limit), 1)

    query = current_domain.repository_for(Product)._dao.query
    if search:
        query = query.filter(Q(name__icontains=search) | Q(description__icontains=search))
    if category and category.lower() != "all":
        query = query.filter(category__icontains=category)

    if sort_by in SORTABLE_FIELDS:
        query = query.order_by(f"-{sort_by}" if order == "desc" else sort_by)
    else:
        query = query.order_by("-created_at")

    results = query.offset((page - 1) * limit).limit(limit).all()

    return {
        "products": [product_to_dict(product) for product in results.items],
        "current_page": page,
        "total_pages": math.ceil(results.total / limit),
        "total_products": results.total,
    }
