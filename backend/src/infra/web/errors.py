import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.exceptions.outage_store_error import OutageStoreError

logger = structlog.stdlib.get_logger(__name__)


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def format_validation_errors(errors) -> str:
    messages = []

    for error in errors:
        message = str(error.get("msg", "Invalid request"))
        message = message.removeprefix("Value error, ")

        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
        if location and error.get("type") != "value_error":
            message = f"{'.'.join(location)}: {message}"

        messages.append(message)

    return "; ".join(messages) or "Invalid request"


async def handle_http_exception(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def handle_request_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, format_validation_errors(exc.errors()))


async def handle_outage_store_error(request: Request, exc: OutageStoreError) -> JSONResponse:
    logger.error(
        "Outage store failure",
        path=request.url.path,
        method=request.method,
        error=exc.message,
        cause=repr(exc.__cause__),
        exc_info=exc,
    )

    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(OutageStoreError, handle_outage_store_error)
