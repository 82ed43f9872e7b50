"""
Every error leaves the API as `{"detail": ...}`.

Domain errors carry their own status; request validation failures and stray
ValueErrors are the client's fault (400); anything else is a 500.
"""

from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from drivent.platform.exception.exceptions import CustomBaseError
from drivent.platform.logging.loguru_io import Logger


def _detail(status_code: int, detail: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={'detail': detail})


async def handle_custom_error(request: Request, exc: Exception) -> JSONResponse:
    if isinstance(exc, CustomBaseError):
        return _detail(exc.status_code, exc.message)
    return _detail(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


async def handle_value_error(request: Request, exc: Exception) -> JSONResponse:
    return _detail(status.HTTP_400_BAD_REQUEST, str(exc))


async def handle_validation_error(request: Request, exc: Exception) -> JSONResponse:
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    # ctx can hold the ValueError raised inside a field validator
    return _detail(status.HTTP_400_BAD_REQUEST, jsonable_encoder(errors))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.exception(f'Unhandled {type(exc).__name__} on {request.method} {request.url.path}')
    return _detail(status.HTTP_500_INTERNAL_SERVER_ERROR, 'Internal server error')


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CustomBaseError, handle_custom_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(ValueError, handle_value_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
