"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog_admin.config import get_settings
from catalog_admin.infrastructure.logging.log_config import setup_logging
from catalog_admin.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: configure logging and own the shared HTTP client."""
    settings = get_settings()
    setup_logging()

    app.state.http_client = httpx.AsyncClient(timeout=settings.catalog_api_timeout)
    logger.info("Catalog backend at %s", settings.catalog_api_base_url)

    yield

    # Shutdown
    await app.state.http_client.aclose()
    app.state.http_client = None


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "catalog_admin.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
