"""ShopSmart FastAPI application factory.

The domain must be initialised before ``create_app`` is called. Each request
runs inside a pushed domain context with a request id bound into the
structlog context. The domain's providers are released when the app shuts
down.
"""

import time
from contextlib import asynccontextmanager
from uuid import uuid4

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shopsmart.api.errors import register_exception_handlers
from shopsmart.catalogue.api import product_router
from shopsmart.config import get_settings
from shopsmart.identity.api import auth_router, users_router
from shopsmart.ordering.api import cart_router, order_router, wishlist_router
from shopsmart.reviews.api import feedback_router
from shopsmart.utils.logging import add_context, clear_context, get_logger

logger = get_logger(__name__)


def create_app(domain) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("api_started", domain=domain.name)
        yield
        domain.close()
        logger.info("api_stopped", domain=domain.name)

    app = FastAPI(
        title="ShopSmart API",
        description="E-commerce backend — catalogue, accounts, cart, wishlist, feedback and orders",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(get_settings().cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the domain context and bind request-scoped log context."""
        clear_context()
        request_id = request.headers.get("X-Request-ID") or str(uuid4())
        add_context(request_id=request_id, path=request.url.path, method=request.method)

        started = time.perf_counter()
        with domain.domain_context():
            response = await call_next(request)

        response.headers["X-Request-ID"] = request_id
        logger.debug(
            "request_completed",
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return response

    register_exception_handlers(app)

    api = APIRouter(prefix="/api")
    for router in (
        auth_router,
        users_router,
        product_router,
        cart_router,
        wishlist_router,
        order_router,
        feedback_router,
    ):
        api.include_router(router)
    app.include_router(api)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": domain.name})

    return app
