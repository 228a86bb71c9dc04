"""Service module for product kinds (custom field templates per product type)."""

from typing import Any

from catalog_admin.application.schemas import ApiResponse, Page, ProductKind, ProductKindEnvelope

from .base import CatalogService, Payload, segment, serialize


class ProductKindService(CatalogService):
    """Create and update answer with ``{"kind": {...}}`` rather than the bare record."""

    async def get_kinds(self, page: int = 1, limit: int = 50) -> ApiResponse[Page[ProductKind]]:
        return await self._list_page(ProductKind, "/product-kinds", page, limit)

    async def create_kind(self, data: Payload) -> ApiResponse[ProductKindEnvelope]:
        body = await self._client.post("/product-kinds", json=serialize(ProductKind, data))
        return self._parse(ApiResponse[ProductKindEnvelope], body)

    async def update_kind(self, kind_id: str, data: Payload) -> ApiResponse[ProductKindEnvelope]:
        body = await self._client.put(
            f"/product-kinds/{segment(kind_id)}", json=serialize(ProductKind, data)
        )
        return self._parse(ApiResponse[ProductKindEnvelope], body)

    async def delete_kind(self, kind_id: str) -> ApiResponse[Any]:
        return await self._delete(f"/product-kinds/{segment(kind_id)}")
