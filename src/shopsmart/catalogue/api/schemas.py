"""Pydantic request schemas for the Catalogue API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AddProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Trail Running Shoe",
                    "description": "Lightweight shoe with a grippy outsole.",
                    "price": 89.99,
                    "category": "Footwear",
                    "stock": 25,
                    "weight": 0.6,
                    "dimensions": "30x20x12 cm",
                }
            ]
        }
    }

    name: str = Field(..., max_length=255)
    description: str
    price: float = Field(..., ge=0)
    category: str = Field(..., max_length=100)
    stock: int = Field(0, ge=0)
    image: str | None = Field(None, max_length=500)
    weight: float | None = Field(None, ge=0)
    dimensions: str | None = Field(None, max_length=100)


class UpdateProductRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"price": 79.99, "stock": 40}]}}

    name: str | None = Field(None, max_length=255)
    description: str | None = None
    price: float | None = Field(None, ge=0)
    category: str | None = Field(None, max_length=100)
    stock: int | None = Field(None, ge=0)
    image: str | None = Field(None, max_length=500)
    weight: float | None = Field(None, ge=0)
    dimensions: str | None = Field(None, max_length=100)


class MessageResponse(BaseModel):
    message: str
