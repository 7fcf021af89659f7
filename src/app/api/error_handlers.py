"""Application-wide exception handlers producing problem-details bodies."""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.shared.exceptions import EntityValidationFailed
from src.app.logging import get_logger

logger = get_logger(__name__)

VALIDATION_TITLE = "One or more validation errors occurred."
UNEXPECTED_TITLE = "Internal Server Error"
UNEXPECTED_DETAIL = "An unexpected problem occurred while processing your request."

# pydantic prefixes messages raised from validators
_VALUE_ERROR_PREFIX = "Value error, "


def _validation_problem(errors: dict[str, list[str]]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "title": VALIDATION_TITLE,
            "status": status.HTTP_400_BAD_REQUEST,
            "errors": errors,
        },
    )


def _field_name(loc: tuple) -> str:
    # ("body", "cuit") -> "cuit"; ("path", "client_id") -> "client_id"; ("body",) -> "body"
    parts = [str(part) for part in loc[1:]] or [str(part) for part in loc]
    return ".".join(parts)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        message = str(error.get("msg", ""))
        if message.startswith(_VALUE_ERROR_PREFIX):
            message = message[len(_VALUE_ERROR_PREFIX):]
        errors.setdefault(_field_name(tuple(error.get("loc", ()))), []).append(message)
    logger.info(f"Rejected {request.method} {request.url.path}: {errors}")
    return _validation_problem(errors)


async def entity_validation_handler(request: Request, exc: EntityValidationFailed) -> JSONResponse:
    logger.info(f"Rejected {request.method} {request.url.path}: {exc.errors}")
    return _validation_problem(exc.errors)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "title": UNEXPECTED_TITLE,
            "status": status.HTTP_500_INTERNAL_SERVER_ERROR,
            "detail": UNEXPECTED_DETAIL,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(EntityValidationFailed, entity_validation_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
