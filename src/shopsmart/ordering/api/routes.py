"""FastAPI endpoints for the cart, wishlist and orders."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from shopsmart.auth.access import authorize, protect
from shopsmart.identity.account.account import Role
from shopsmart.ordering.api.schemas import (
    AddToCartRequest,
    AddToWishlistRequest,
    MessageResponse,
    PlaceOrderRequest,
    UpdateCartItemRequest,
    UpdateOrderStatusRequest,
)
from shopsmart.ordering.cart.contents import cart_contents
from shopsmart.ordering.cart.items import AddToCart, ClearCart, RemoveFromCart, UpdateCartItem
from shopsmart.ordering.order.inventory import place_order, update_order_status
from shopsmart.ordering.order.queries import all_orders, get_order, orders_for_account
from shopsmart.ordering.order.removal import DeleteOrder
from shopsmart.ordering.wishlist.contents import wishlist_contents
from shopsmart.ordering.wishlist.management import AddToWishlist, RemoveFromWishlist

cart_router = APIRouter(prefix="/cart", tags=["cart"])
wishlist_router = APIRouter(prefix="/wishlist", tags=["wishlist"])
order_router = APIRouter(prefix="/orders", tags=["orders"])

admin_only = authorize(Role.ADMIN.value)


# --- Cart ---


@cart_router.get("")
async def read_cart(account=Depends(protect)):
    return cart_contents(account.id)


@cart_router.post("", status_code=201)
async def add_to_cart(body: AddToCartRequest, account=Depends(protect)):
    command = AddToCart(account_id=account.id, product_id=body.product_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return cart_contents(account.id)


@cart_router.put("/{product_id}")
async def update_cart_item(product_id: str, body: UpdateCartItemRequest, account=Depends(protect)):
    command = UpdateCartItem(account_id=account.id, product_id=product_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return cart_contents(account.id)


@cart_router.delete("/{product_id}")
async def remove_from_cart(product_id: str, account=Depends(protect)):
    current_domain.process(RemoveFromCart(account_id=account.id, product_id=product_id), asynchronous=False)
    return cart_contents(account.id)


@cart_router.delete("", response_model=MessageResponse)
async def clear_cart(account=Depends(protect)) -> MessageResponse:
    current_domain.process(ClearCart(account_id=account.id), asynchronous=False)
    return MessageResponse(message="Cart cleared")


# --- Wishlist ---


@wishlist_router.get("")
async def read_wishlist(account=Depends(protect)):
    return wishlist_contents(account.id)


@wishlist_router.post("", status_code=201)
async def add_to_wishlist(body: AddToWishlistRequest, account=Depends(protect)):
    current_domain.process(AddToWishlist(account_id=account.id, product_id=body.product_id), asynchronous=False)
    return wishlist_contents(account.id)


@wishlist_router.delete("/{product_id}")
async def remove_from_wishlist(product_id: str, account=Depends(protect)):
    current_domain.process(RemoveFromWishlist(account_id=account.id, product_id=product_id), asynchronous=False)
    return wishlist_contents(account.id)


# --- Orders ---


@order_router.post("", status_code=201)
async def create_order(body: PlaceOrderRequest, account=Depends(protect)):
    return place_order(
        account_id=account.id,
        items=[line.model_dump() for line in body.items],
        payment_method=body.payment_method,
    )


@order_router.get("")
async def read_my_orders(account=Depends(protect)):
    return orders_for_account(account.id)


@order_router.get("/admin")
async def read_all_orders(admin=Depends(admin_only)):
    return all_orders()


@order_router.put("/admin/{order_id}/status")
async def change_order_status(order_id: str, body: UpdateOrderStatusRequest, admin=Depends(admin_only)):
    return update_order_status(order_id=order_id, status=body.status)


@order_router.delete("/{order_id}", response_model=MessageResponse)
async def delete_order(order_id: str, admin=Depends(admin_only)) -> MessageResponse:
    get_order(order_id)
    current_domain.process(DeleteOrder(order_id=order_id), asynchronous=False)
    return MessageResponse(message="Order removed")
