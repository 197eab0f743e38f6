"""Exception-to-response mapping for the HTTP surface.

Every failure reaches the caller as ``{timestamp, status, error, path}``;
validation failures add ``errors`` with one entry per violated field rule.
"""

from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.shared.exceptions import ConflictError, ForbiddenError, UnauthorizedError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def error_body(request: Request, status: int, error: str, **extra) -> dict:
    return {
        "timestamp": datetime.now(UTC).isoformat(),
        "status": status,
        "error": error,
        "path": request.url.path,
        **extra,
    }


def _field_errors(messages) -> list[dict]:
    if not isinstance(messages, dict):
        return [{"field_name": "_entity", "message": str(messages)}]

    errors = []
    for field_name, field_messages in messages.items():
        if isinstance(field_messages, str | dict):
            field_messages = [field_messages]
        errors.extend({"field_name": field_name, "message": str(message)} for message in field_messages)
    return errors


async def handle_not_found(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content=error_body(request, 404, "Resource not found"))


async def handle_validation(request: Request, exc: ValidationError) -> JSONResponse:
    body = error_body(request, 422, "Invalid data", errors=_field_errors(exc.messages))
    return JSONResponse(status_code=422, content=body)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"field_name": str(error["loc"][-1]) if error.get("loc") else "_request", "message": error["msg"]}
        for error in exc.errors()
    ]
    return JSONResponse(status_code=422, content=error_body(request, 422, "Invalid data", errors=errors))


async def handle_unauthorized(request: Request, exc: UnauthorizedError) -> JSONResponse:
    return JSONResponse(
        status_code=401,
        content=error_body(request, 401, exc.message),
        headers={"WWW-Authenticate": "Bearer"},
    )


async def handle_forbidden(request: Request, exc: ForbiddenError) -> JSONResponse:
    return JSONResponse(status_code=403, content=error_body(request, 403, exc.message))


async def handle_conflict(request: Request, exc: ConflictError) -> JSONResponse:
    return JSONResponse(status_code=400, content=error_body(request, 400, exc.message))


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error("request.unhandled_error", path=request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content=error_body(request, 500, "Internal server error"))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ObjectNotFoundError, handle_not_found)
    app.add_exception_handler(ValidationError, handle_validation)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(UnauthorizedError, handle_unauthorized)
    app.add_exception_handler(ForbiddenError, handle_forbidden)
    app.add_exception_handler(ConflictError, handle_conflict)
    app.add_exception_handler(Exception, handle_unexpected)
