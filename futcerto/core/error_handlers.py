"""Centralized exception handlers for the FutCerto API."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from futcerto.core.errors import AuthRequired, FutCertoError

logger = logging.getLogger(__name__)


def domain_error_payload(exc: FutCertoError) -> dict[str, str]:
    return {"code": exc.code.value, "title": exc.title, "detail": exc.message}


def register_exception_handlers(app: FastAPI) -> None:
    """Register FastAPI exception handlers that return a normalized JSON payload."""

    @app.exception_handler(FutCertoError)
    async def domain_exception_handler(
        request: Request, exc: FutCertoError
    ) -> JSONResponse:  # type: ignore[override]
        response = JSONResponse(
            status_code=exc.status_code, content=domain_error_payload(exc)
        )
        if isinstance(exc, AuthRequired):
            response.headers["WWW-Authenticate"] = "Bearer"
        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:  # type: ignore[override]
        # Routing errors (unknown path, wrong method) share the domain payload shape.
        response = JSONResponse(
            status_code=exc.status_code,
            content={
                "code": f"HTTP_{exc.status_code}",
                "title": "Erro",
                "detail": str(exc.detail),
            },
        )

        if exc.headers:
            for key, value in exc.headers.items():
                response.headers[key] = value

        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:  # type: ignore[override]
        messages = []
        for error in exc.errors():
            location = [str(loc) for loc in error.get("loc", []) if loc != "body"]
            message = error.get("msg", "Invalid input")
            if location:
                messages.append(f"{'.'.join(location)}: {message}")
            else:
                messages.append(message)

        detail = "; ".join(messages) if messages else "Invalid request"
        return JSONResponse(status_code=422, content={"detail": detail})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:  # type: ignore[override]
        logger.exception(
            "Unhandled exception while processing %s %s", request.method, request.url
        )
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})


__all__ = ["register_exception_handlers", "domain_error_payload"]
