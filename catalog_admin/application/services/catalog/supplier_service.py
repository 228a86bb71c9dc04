"""Service module for suppliers and purchase orders."""

from collections.abc import Sequence
from typing import Any

from catalog_admin.application.schemas import (
    ApiResponse,
    Page,
    PurchaseOrder,
    ReceivedItem,
    Stats,
    Supplier,
)

from .base import CatalogService, Payload, segment


class SupplierService(CatalogService):

    # ── Suppliers ────────────────────────────────────────────────────

    async def get_suppliers(self, page: int = 1, limit: int = 20) -> ApiResponse[Page[Supplier]]:
        return await self._list_page(Supplier, "/suppliers", page, limit)

    async def get_active_suppliers(self) -> ApiResponse[list[Supplier]]:
        return await self._list(Supplier, "/suppliers/active")

    async def get_supplier_stats(self) -> ApiResponse[Stats]:
        return await self._stats("/suppliers/stats")

    async def search_suppliers(self, search_term: str) -> ApiResponse[list[Supplier]]:
        return await self._list(Supplier, "/suppliers/search", {"q": search_term})

    async def get_suppliers_by_rating(self, min_rating: float) -> ApiResponse[list[Supplier]]:
        return await self._list(Supplier, f"/suppliers/rating/{segment(min_rating)}")

    async def create_supplier(self, data: Payload) -> ApiResponse[Supplier]:
        return await self._create(Supplier, "/suppliers", data)

    async def update_supplier(self, supplier_id: str, data: Payload) -> ApiResponse[Supplier]:
        return await self._update(Supplier, f"/suppliers/{segment(supplier_id)}", data)

    async def delete_supplier(self, supplier_id: str) -> ApiResponse[Any]:
        return await self._delete(f"/suppliers/{segment(supplier_id)}")

    # ── Purchase orders ──────────────────────────────────────────────

    async def get_purchase_orders(
        self, page: int = 1, limit: int = 20
    ) -> ApiResponse[Page[PurchaseOrder]]:
        return await self._list_page(PurchaseOrder, "/purchase-orders", page, limit)

    async def get_purchase_order_summary(self) -> ApiResponse[Stats]:
        return await self._stats("/purchase-orders/summary")

    async def get_pending_orders(self) -> ApiResponse[list[PurchaseOrder]]:
        return await self._list(PurchaseOrder, "/purchase-orders/pending")

    async def get_overdue_orders(self) -> ApiResponse[list[PurchaseOrder]]:
        return await self._list(PurchaseOrder, "/purchase-orders/overdue")

    async def get_orders_by_supplier(self, supplier_id: str) -> ApiResponse[list[PurchaseOrder]]:
        return await self._list(PurchaseOrder, f"/purchase-orders/supplier/{segment(supplier_id)}")

    async def get_orders_by_status(self, status: str) -> ApiResponse[list[PurchaseOrder]]:
        return await self._list(PurchaseOrder, f"/purchase-orders/status/{segment(status)}")

    async def create_purchase_order(self, data: Payload) -> ApiResponse[PurchaseOrder]:
        return await self._create(PurchaseOrder, "/purchase-orders", data)

    async def update_purchase_order(self, order_id: str, data: Payload) -> ApiResponse[PurchaseOrder]:
        return await self._update(PurchaseOrder, f"/purchase-orders/{segment(order_id)}", data)

    async def approve_order(self, order_id: str, approved_by: str) -> ApiResponse[PurchaseOrder]:
        return await self._action(
            PurchaseOrder,
            "PUT",
            f"/purchase-orders/{segment(order_id)}/approve",
            {"approvedBy": approved_by},
        )

    async def mark_as_ordered(self, order_id: str) -> ApiResponse[PurchaseOrder]:
        return await self._action(PurchaseOrder, "PUT", f"/purchase-orders/{segment(order_id)}/order")

    async def receive_order(
        self, order_id: str, received_items: Sequence[ReceivedItem]
    ) -> ApiResponse[PurchaseOrder]:
        items = [item.model_dump(by_alias=True) for item in received_items]
        return await self._action(
            PurchaseOrder,
            "PUT",
            f"/purchase-orders/{segment(order_id)}/receive",
            {"receivedItems": items},
        )

    async def cancel_order(self, order_id: str, reason: str | None = None) -> ApiResponse[PurchaseOrder]:
        body = {"reason": reason} if reason is not None else {}
        return await self._action(
            PurchaseOrder, "PUT", f"/purchase-orders/{segment(order_id)}/cancel", body
        )

    async def delete_purchase_order(self, order_id: str) -> ApiResponse[Any]:
        return await self._delete(f"/purchase-orders/{segment(order_id)}")
