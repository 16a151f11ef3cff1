"""
FastAPI Application - Static Greeting Service
"""

from __future__ import annotations

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from greeter.config import Settings
from greeter.constants import GREETING
from greeter.observability.metrics import MetricsMiddleware


# ==========================================
# Handlers
# ==========================================
async def handle_root() -> PlainTextResponse:
    return PlainTextResponse(GREETING)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render every routing miss (404, 405) as ``{"detail": ...}``.

    Framework headers such as ``Allow`` on a 405 are passed through.
    """
    return JSONResponse(
        {"detail": exc.detail},
        status_code=exc.status_code,
        headers=exc.headers,
    )


# ==========================================
# FastAPI Application
# ==========================================
def create_app(settings: Settings) -> FastAPI:
    app = FastAPI(
        title="Greeter",
        description="Static greeting service",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings

    # Order: metrics → correlation id
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(CorrelationIdMiddleware, header_name="X-Request-ID")
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # The only route. HEAD is GET without a body.
    app.add_api_route(
        "/",
        handle_root,
        methods=["GET", "HEAD"],
        response_class=PlainTextResponse,
        include_in_schema=False,
    )
    return app
