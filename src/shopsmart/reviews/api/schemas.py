"""Pydantic request schemas for the feedback API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SubmitFeedbackRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"product_id": "prod-001", "rating": 5, "comment": "Fits perfectly, very comfortable."}]
        }
    }

    product_id: str
    rating: int
    comment: str | None = Field(None, max_length=2000)


class MessageResponse(BaseModel):
    message: str
