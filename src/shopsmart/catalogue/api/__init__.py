"""Catalogue API package."""

from shopsmart.catalogue.api.routes import product_router

__all__ = ["product_router"]
