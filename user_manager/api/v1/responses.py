# File: user_manager/api/v1/responses.py

"""
Response envelope helpers and the exception handlers that produce them.

Every response body is ``{"message", "success", "data"}``.
"""

import logging
from typing import Any, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from user_manager.core.exceptions import DomainError
from user_manager.schemas.result import Result

logger = logging.getLogger(__name__)

APPLICATION_ERROR = "Ocorreu um erro interno na aplicação, tente novamente!"
INVALID_REQUEST = "Requisição inválida!"


class ApiError(Exception):
    """Raised by dependencies/routes to answer with a failure envelope."""

    def __init__(self, status_code: int, message: str, data: Any = None):
        self.status_code = status_code
        self.message = message
        self.data = data
        super().__init__(message)


def success(message: str, data: Any = None) -> Result:
    return Result(message=message, success=True, data=data)


def failure(status_code: int, message: str, data: Any = None) -> JSONResponse:
    body = Result(message=message, success=False, data=data)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def application_error() -> JSONResponse:
    return failure(status.HTTP_500_INTERNAL_SERVER_ERROR, APPLICATION_ERROR)


def domain_error(message: str, errors: Optional[List[str]] = None) -> JSONResponse:
    return failure(status.HTTP_400_BAD_REQUEST, message, errors)


def _describe(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path"))
    return f"{location}: {error.get('msg')}" if location else str(error.get("msg"))


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    return domain_error(exc.message, exc.errors)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return failure(exc.status_code, exc.message, exc.data)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return failure(status.HTTP_400_BAD_REQUEST, INVALID_REQUEST, [_describe(e) for e in exc.errors()])


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return application_error()


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
