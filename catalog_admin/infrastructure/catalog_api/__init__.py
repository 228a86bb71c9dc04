"""Catalog backend infrastructure package."""

from .catalog_api_client import CatalogApiClient

__all__ = ["CatalogApiClient"]
