"""Maps exceptions onto the JSON error envelope and HTTP status codes."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from textstats.api.exceptions import InvalidTextIdError, TextNotFoundError
from textstats.api.schemas import ErrorEnvelope, FieldError
from textstats.database.exceptions import DuplicateTextError
from textstats.logging.logger import Log


def _error_response(
    status_code: int, message: str, errors: list[FieldError] | None = None
) -> JSONResponse:
    body = ErrorEnvelope(message=message, errors=errors)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _field_name(loc: tuple[object, ...]) -> str:
    # Drop the "body"/"query"/"path" prefix FastAPI puts on every location.
    parts = [str(part) for part in loc[1:]] or [str(part) for part in loc]
    return ".".join(parts)


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        FieldError(field=_field_name(tuple(err.get("loc", ()))), message=err.get("msg", ""))
        for err in exc.errors()
    ]
    return _error_response(400, "Validation failed", errors)


async def handle_invalid_id(request: Request, exc: InvalidTextIdError) -> JSONResponse:
    return _error_response(400, "Invalid ID format")


async def handle_not_found(request: Request, exc: TextNotFoundError) -> JSONResponse:
    return _error_response(404, "Text not found")


async def handle_duplicate(request: Request, exc: DuplicateTextError) -> JSONResponse:
    return _error_response(
        409,
        "Duplicate entry",
        [FieldError(field=exc.field, message=f"{exc.field} already exists")],
    )


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    Log.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return _error_response(500, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(InvalidTextIdError, handle_invalid_id)
    app.add_exception_handler(TextNotFoundError, handle_not_found)
    app.add_exception_handler(DuplicateTextError, handle_duplicate)
    app.add_exception_handler(Exception, handle_unexpected)
