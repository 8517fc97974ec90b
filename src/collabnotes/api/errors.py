"""Exception handlers turning application errors into JSON responses."""

import traceback
from typing import List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from ..config import get_settings
from ..core.exceptions import AppError, ErrorKind
from ..core.logging import REQUEST_ID_HEADER, get_logger
from ..core.schemas.common import ErrorResponse, FieldError

logger = get_logger("errors")

STATUS_BY_KIND = {
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.RATE_LIMITED: status.HTTP_429_TOO_MANY_REQUESTS,
    ErrorKind.CONFIGURATION: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.PERSISTENCE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

DATABASE_ERROR = "Database error"
INTERNAL_ERROR = "Internal server error"
VALIDATION_ERROR = "Validation error"


def status_for(kind: ErrorKind) -> int:
    return STATUS_BY_KIND.get(kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


def request_id_of(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None) or request.headers.get(REQUEST_ID_HEADER)


def build_error_body(
    status_code: int,
    message: str,
    request_id: Optional[str] = None,
    errors: Optional[List[FieldError]] = None,
    stack: Optional[str] = None,
) -> dict:
    body = ErrorResponse(
        status=status_code, message=message, request_id=request_id, errors=errors, stack=stack
    )
    return body.model_dump(exclude_none=True)


def _error_response(request: Request, status_code: int, message: str, **kwargs) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=build_error_body(status_code, message, request_id_of(request), **kwargs),
    )


def _log_extra(request: Request, **extra) -> dict:
    return {
        "request_id": request_id_of(request),
        "method": request.method,
        "path": request.url.path,
        **extra,
    }


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    status_code = status_for(exc.kind)
    log = logger.error if status_code >= 500 else logger.warning
    log(
        exc.message,
        extra=_log_extra(request, error_type=type(exc).__name__, status_code=status_code),
    )
    return _error_response(request, status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        FieldError(path=".".join(str(part) for part in err.get("loc", ())), message=err.get("msg", ""))
        for err in exc.errors()
    ]
    logger.warning(
        VALIDATION_ERROR,
        extra=_log_extra(
            request,
            error_type="RequestValidationError",
            validation_errors=[e.model_dump() for e in errors],
        ),
    )
    return _error_response(request, status.HTTP_400_BAD_REQUEST, VALIDATION_ERROR, errors=errors)


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(
        DATABASE_ERROR,
        exc_info=exc,
        extra=_log_extra(request, error_type=type(exc).__name__),
    )
    return _error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, DATABASE_ERROR)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    settings = get_settings()
    logger.error(
        str(exc) or INTERNAL_ERROR,
        exc_info=exc,
        extra=_log_extra(request, error_type=type(exc).__name__),
    )

    message = INTERNAL_ERROR if settings.is_production else (str(exc) or INTERNAL_ERROR)
    stack = None
    if settings.is_development:
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return _error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, message, stack=stack)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on ``app``."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
