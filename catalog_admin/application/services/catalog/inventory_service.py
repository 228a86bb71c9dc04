"""Service module for inventory items and warehouses."""

from typing import Any

from catalog_admin.application.schemas import (
    ApiResponse,
    InventoryItem,
    Page,
    Stats,
    StockUpdate,
    Warehouse,
)

from .base import CatalogService, Payload, segment, serialize


class InventoryService(CatalogService):

    # ── Inventory ────────────────────────────────────────────────────

    async def get_inventory(self, page: int = 1, limit: int = 20) -> ApiResponse[Page[InventoryItem]]:
        return await self._list_page(InventoryItem, "/inventory", page, limit)

    async def get_inventory_summary(self) -> ApiResponse[Stats]:
        return await self._stats("/inventory/summary")

    async def get_low_stock_items(self, threshold: int = 10) -> ApiResponse[list[InventoryItem]]:
        return await self._list(InventoryItem, "/inventory/low-stock", {"threshold": threshold})

    async def get_inventory_by_product(self, product_id: str) -> ApiResponse[list[InventoryItem]]:
        return await self._list(InventoryItem, f"/inventory/product/{segment(product_id)}")

    async def get_inventory_by_warehouse(self, warehouse_id: str) -> ApiResponse[list[InventoryItem]]:
        return await self._list(InventoryItem, f"/inventory/warehouse/{segment(warehouse_id)}")

    async def update_stock(self, inventory_id: str, data: Payload) -> ApiResponse[InventoryItem]:
        """Record a stock movement (``operation`` is ``add`` or ``subtract``)."""
        return await self._action(
            InventoryItem,
            "POST",
            f"/inventory/{segment(inventory_id)}/stock",
            serialize(StockUpdate, data),
        )

    async def reserve_stock(self, inventory_id: str, quantity: int) -> ApiResponse[InventoryItem]:
        return await self._action(
            InventoryItem, "POST", f"/inventory/{segment(inventory_id)}/reserve", {"quantity": quantity}
        )

    async def release_reserved_stock(self, inventory_id: str, quantity: int) -> ApiResponse[InventoryItem]:
        return await self._action(
            InventoryItem, "POST", f"/inventory/{segment(inventory_id)}/release", {"quantity": quantity}
        )

    # ── Warehouses ───────────────────────────────────────────────────

    async def get_warehouses(self, page: int = 1, limit: int = 20) -> ApiResponse[Page[Warehouse]]:
        return await self._list_page(Warehouse, "/warehouses", page, limit)

    async def get_active_warehouses(self) -> ApiResponse[list[Warehouse]]:
        return await self._list(Warehouse, "/warehouses/active")

    async def get_primary_warehouse(self) -> ApiResponse[Warehouse]:
        return await self._one(Warehouse, "/warehouses/primary")

    async def create_warehouse(self, data: Payload) -> ApiResponse[Warehouse]:
        return await self._create(Warehouse, "/warehouses", data)

    async def update_warehouse(self, warehouse_id: str, data: Payload) -> ApiResponse[Warehouse]:
        return await self._update(Warehouse, f"/warehouses/{segment(warehouse_id)}", data)

    async def delete_warehouse(self, warehouse_id: str) -> ApiResponse[Any]:
        return await self._delete(f"/warehouses/{segment(warehouse_id)}")
