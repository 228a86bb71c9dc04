"""FastAPI dependency injection: wires infrastructure to the application layer."""

from fastapi import Depends, Request

from catalog_admin.config import get_settings
from catalog_admin.application.interfaces import CatalogHttpClient
from catalog_admin.application.services import CatalogServices
from catalog_admin.infrastructure.catalog_api import CatalogApiClient


def get_catalog_client(request: Request) -> CatalogHttpClient:
    """Provides a CatalogApiClient bound to the lifespan's shared httpx client.

    Falls back to per-call clients when the lifespan has not run (tests,
    scripts).
    """
    settings = get_settings()
    return CatalogApiClient(
        settings.catalog_api_base_url,
        timeout=settings.catalog_api_timeout,
        http_client=getattr(request.app.state, "http_client", None),
    )


def get_catalog_services(
    client: CatalogHttpClient = Depends(get_catalog_client),
) -> CatalogServices:
    """Provides every catalog service module over one client."""
    return CatalogServices.from_client(client)
