"""
Error envelope shared by the data endpoints.

Failures are rendered as `{"success": false, "message": ..., "error": ...}`.
`error` carries the underlying driver message and is omitted for client errors.
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

INVALID_BODY_MESSAGE = "Invalid request body"


class ApiError(Exception):
    def __init__(self, status_code: int, message: str, *, error: str | None = None) -> None:
        self.status_code = status_code
        self.message = message
        self.error = error
        super().__init__(message)


def error_body(message: str, error: str | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"success": False, "message": message}
    if error is not None:
        body["error"] = error
    return body


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def api_error_handler(_: Request, exc: ApiError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.message, exc.error),
        )

    # Bodies that are not JSON objects of the expected shape are client errors.
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(INVALID_BODY_MESSAGE),
        )
