"""BAP Explorer — Error response helpers and exception handlers."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bap_explorer.core.errors import InvalidParameter, NotFound

logger = logging.getLogger(__name__)


def error_response(message: str, status_code: int = status.HTTP_400_BAD_REQUEST) -> JSONResponse:
    """Uniform `{error}` body used by every endpoint."""
    return JSONResponse(status_code=status_code, content={"error": message})


async def invalid_parameter_handler(request: Request, exc: InvalidParameter) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return error_response(exc.message)


async def not_found_handler(request: Request, exc: NotFound) -> JSONResponse:
    logger.info("Not found %s %s: %s", request.method, request.url.path, exc.message)
    return error_response(exc.message, status.HTTP_404_NOT_FOUND)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Non-numeric pagination values and unknown filter values become 400 `{error}`."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        name = first.get("loc", ("", "parameter"))[-1]
        message = f"Invalid parameter '{name}': {first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request parameters"
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return error_response(message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidParameter, invalid_parameter_handler)  # type: ignore[arg-type]
    app.add_exception_handler(NotFound, not_found_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]
