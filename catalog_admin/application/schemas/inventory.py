"""Wire models for warehouses and inventory items."""

from typing import Any, Literal

from .common import Address, CatalogRecord, WireModel


class WarehouseContact(WireModel):
    phone: str | None = None
    email: str | None = None
    manager: str | None = None


class Warehouse(CatalogRecord):
    name: str = ""
    code: str = ""
    description: str | None = None
    address: Address | None = None
    contact: WarehouseContact | None = None
    capacity: int | None = None
    is_primary: bool = False
    is_active: bool = True
    status: str | None = None
    utilization: float | None = None
    operating_hours: Any = None


class InventoryItem(CatalogRecord):
    product_id: str = ""
    variant_id: str | None = None
    warehouse_id: str = ""
    current_stock: int = 0
    reserved_stock: int = 0
    available_stock: int = 0
    reorder_point: int = 0
    reorder_quantity: int = 0
    max_stock_level: int | None = None
    cost_price: float | None = None
    status: str = "in_stock"
    last_restocked_at: str | None = None
    last_sold_at: str | None = None
    location: str | None = None
    barcode: str | None = None


class StockUpdate(WireModel):
    """Body of a stock movement against one inventory item."""

    quantity: int
    operation: Literal["add", "subtract"]
    reference_id: str | None = None
    reference_type: str | None = None
    notes: str | None = None
    user_id: str | None = None
