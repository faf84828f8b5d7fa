"""Reviews API package."""

from shopsmart.reviews.api.routes import feedback_router

__all__ = ["feedback_router"]
