from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from registry.api.metrics import router as metrics_router
from registry.api.pages import router as pages_router
from registry.api.users import router as users_router
from registry.config import get_settings
from registry.errors import RegistryError
from registry.observability.logging import configure_logging
from registry.observability.middleware import RequestContextMiddleware
from registry.services.user_service import UserRegistryService

logger = logging.getLogger(__name__)


async def _registry_error_handler(request: Request, exc: Exception) -> Response:
    if not isinstance(exc, RegistryError):
        return JSONResponse({"detail": "Internal Server Error"}, status_code=500)
    logger.warning("users.rejected", extra={"kind": exc.kind, "reason": exc.message})
    return JSONResponse({"detail": exc.message, "kind": exc.kind}, status_code=400)


async def _not_found_handler(request: Request, exc: Exception) -> Response:
    if not isinstance(exc, StarletteHTTPException):
        return JSONResponse({"detail": "Internal Server Error"}, status_code=500)
    # Known paths with an unsupported method answer 404 like unknown paths.
    if exc.status_code == 405:
        return JSONResponse({"detail": "Not Found"}, status_code=404)
    return await http_exception_handler(request, exc)


def create_app(registry: UserRegistryService | None = None) -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    # Unknown paths, trailing-slash variants and docs routes all answer 404.
    app = FastAPI(
        title="User Registry",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.registry = registry if registry is not None else UserRegistryService()

    app.add_middleware(RequestContextMiddleware, excluded_metric_paths={"/api/metrics"})
    app.add_exception_handler(RegistryError, _registry_error_handler)
    app.add_exception_handler(StarletteHTTPException, _not_found_handler)

    app.include_router(pages_router)
    app.include_router(users_router)
    app.include_router(metrics_router)
    return app


app = create_app()
