"""Map domain failures onto HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.shared.errors import ErrorKind, StorefrontError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_STATUS_BY_KIND = {
    ErrorKind.INVALID_REQUEST: 422,
    ErrorKind.CONSTRAINT_VIOLATION: 409,
    ErrorKind.INTERNAL: 500,
}


async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    status_code = _STATUS_BY_KIND[exc.kind]
    if status_code >= 500:
        logger.error("request_failed", path=request.url.path, kind=exc.kind.value)
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "kind": exc.kind.value, "errors": exc.messages},
    )


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"success": False, "kind": ErrorKind.INVALID_REQUEST.value, "errors": exc.messages},
    )


async def not_found_handler(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"success": False, "detail": "Not found"})


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StorefrontError, storefront_error_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(ObjectNotFoundError, not_found_handler)
