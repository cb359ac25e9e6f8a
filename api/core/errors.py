"""
Application error taxonomy and its HTTP mapping.

Services raise these; `register_exception_handlers` turns them into JSON
responses shaped as `{"error": "..."}` (plus `details` where relevant).
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Erro interno do servidor."


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def payload(self) -> dict[str, Any]:
        return {"error": self.message}


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidReferenceError(AppError):
    # Dangling foreign key: the referenced parent row does not exist.
    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT


class ExternalServiceError(AppError):
    """
    A third-party provider failed. Carries the provider's status code and
    whatever body it returned.
    """

    def __init__(self, message: str, *, status_code: int, details: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details

    def payload(self) -> dict[str, Any]:
        return {"error": self.message, "details": self.details}


async def _app_error_handler(_: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.payload()))


async def _request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {"campo": ".".join(str(p) for p in err.get("loc", ()) if p != "body"), "motivo": err.get("msg")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Dados inválidos ou campos obrigatórios ausentes.", "details": details},
    )


async def _http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown routes and wrong methods share the {"error": ...} envelope.
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=exc.headers,
    )


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error method=%s path=%s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, _app_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
