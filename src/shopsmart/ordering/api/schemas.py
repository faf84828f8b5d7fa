"""Pydantic request schemas for the Ordering API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Cart & wishlist ---


class AddToCartRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"product_id": "prod-001", "quantity": 2}]}}

    product_id: str
    quantity: int = Field(1, ge=1)


class UpdateCartItemRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"quantity": 3}]}}

    quantity: int = Field(..., ge=0)


class AddToWishlistRequest(BaseModel):
    product_id: str


# --- Orders ---


class OrderLine(BaseModel):
    product_id: str
    quantity: int = Field(..., ge=1)


class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "items": [{"product_id": "prod-001", "quantity": 3}],
                    "payment_method": "Cash on Delivery",
                }
            ]
        }
    }

    items: list[OrderLine]
    payment_method: str = Field(..., min_length=1, max_length=100)


class UpdateOrderStatusRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "Shipped"}]}}

    status: str = Field(..., max_length=50)


class MessageResponse(BaseModel):
    message: str
