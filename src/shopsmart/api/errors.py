"""Map domain and framework exceptions onto JSON error responses.

Every failure leaves the API as ``{"error", "kind", "details"}`` with the
status code of its kind.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

from shopsmart.errors import Internal, NotFound, ShopSmartError
from shopsmart.utils.logging import get_logger

logger = get_logger(__name__)


def _error_response(error: ShopSmartError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


def _first_message(messages: dict) -> str:
    for field, errors in messages.items():
        if errors:
            first = errors[0] if isinstance(errors, list) else errors
            return f"{field}: {first}"
    return "Validation failed"


async def handle_shopsmart_error(request: Request, exc: ShopSmartError):
    if exc.status_code >= 500:
        logger.error("request_failed", path=request.url.path, kind=exc.kind, error=exc.message)
    return _error_response(exc)


async def handle_validation_error(request: Request, exc: ValidationError):
    messages = exc.messages if isinstance(exc.messages, dict) else {"_entity": [str(exc.messages)]}
    return JSONResponse(
        status_code=400,
        content={"error": _first_message(messages), "kind": "ValidationError", "details": messages},
    )


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    messages = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()) if part != "body") or "_request"
        messages.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return JSONResponse(
        status_code=400,
        content={"error": _first_message(messages), "kind": "ValidationError", "details": messages},
    )


async def handle_object_not_found(request: Request, exc: ObjectNotFoundError):
    return _error_response(NotFound("Resource not found"))


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception("unhandled_error", path=request.url.path, error_type=type(exc).__name__)
    return _error_response(Internal("Internal server error"))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ShopSmartError, handle_shopsmart_error)
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(ObjectNotFoundError, handle_object_not_found)
    app.add_exception_handler(Exception, handle_unexpected_error)
