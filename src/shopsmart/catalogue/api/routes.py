"""FastAPI endpoints for the product catalogue."""

from fastapi import APIRouter, Depends, Query
from protean.utils.globals import current_domain

from shopsmart.auth.access import authorize
from shopsmart.catalogue.api.schemas import AddProductRequest, MessageResponse, UpdateProductRequest
from shopsmart.catalogue.product.listing import DEFAULT_PAGE_SIZE, get_product, list_products, product_to_dict
from shopsmart.catalogue.product.management import AddProduct, RemoveProduct, UpdateProduct
from shopsmart.identity.account.account import Role

product_router = APIRouter(prefix="/products", tags=["products"])

admin_only = authorize(Role.ADMIN.value)


@product_router.get("")
async def read_products(
    search: str | None = None,
    category: str | None = None,
    sort_by: str | None = None,
    order: str = "asc",
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=100),
):
    return list_products(
        search=search,
        category=category,
        sort_by=sort_by,
        order=order,
        page=page,
        limit=limit,
    )


@product_router.get("/{product_id}")
async def read_product(product_id: str):
    return product_to_dict(get_product(product_id))


@product_router.post("", status_code=201)
async def add_product(body: AddProductRequest, admin=Depends(admin_only)):
    command = AddProduct(
        name=body.name,
        description=body.description,
        price=body.price,
        category=body.category,
        stock=body.stock,
        image=body.image,
        weight=body.weight,
        dimensions=body.dimensions,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return product_to_dict(get_product(product_id))


@product_router.put("/{product_id}")
async def update_product(product_id: str, body: UpdateProductRequest, admin=Depends(admin_only)):
    get_product(product_id)
    command = UpdateProduct(product_id=product_id, **body.model_dump(exclude_none=True))
    current_domain.process(command, asynchronous=False)
    return product_to_dict(get_product(product_id))


@product_router.delete("/{product_id}", response_model=MessageResponse)
async def remove_product(product_id: str, admin=Depends(admin_only)) -> MessageResponse:
    get_product(product_id)
    current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)
    return MessageResponse(message="Product removed")
