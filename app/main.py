"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import Settings, settings as default_settings
from app.core.dependencies import build_repositories
from app.core.errors import ApiError
from app.core.logging import setup_logging
from app.api import dishes, health, orders

logger = logging.getLogger(__name__)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Render a classified error as {message}."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render routing errors (unknown path, unsupported method) as {message}."""
    if exc.status_code == 404:
        message = f"Path not found: {request.url.path}"
    elif exc.status_code == 405:
        message = f"{request.method} not allowed for {request.url.path}"
    else:
        message = str(exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"message": message}, headers=exc.headers)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unclassified failure and answer with a generic 500."""
    logger.error(
        f"[API] Unhandled error - {request.method} {request.url.path}, "
        f"Error: {type(exc).__name__}: {str(exc)}",
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with its own repositories."""
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        # Startup
        setup_logging(settings.log_level)
        logger.info(
            f"[STARTUP] {settings.app_name} - "
            f"{await app.state.dish_repository.count()} dishes, "
            f"{await app.state.order_repository.count()} orders"
        )
        yield
        # Shutdown
        pass

    app = FastAPI(
        title=settings.app_name,
        description="Dish catalog and order queue for restaurant ordering",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.dish_repository, app.state.order_repository = build_repositories(settings)

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Include routers
    app.include_router(health.router, tags=["health"])
    app.include_router(dishes.router, tags=["dishes"])
    app.include_router(orders.router, tags=["orders"])

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run(
        "app.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=False,
        log_level=default_settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
