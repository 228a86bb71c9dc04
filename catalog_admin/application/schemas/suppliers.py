"""Wire models for suppliers and purchase orders."""

from .common import Address, CatalogRecord, WireModel

PURCHASE_ORDER_STATUSES = (
    "draft",
    "pending",
    "approved",
    "ordered",
    "partially_received",
    "received",
    "cancelled",
)


class Supplier(CatalogRecord):
    name: str = ""
    code: str = ""
    contact_person: str | None = None
    email: str | None = None
    phone: str | None = None
    website: str | None = None
    address: Address | None = None
    payment_terms: str | None = None
    credit_limit: float | None = None
    currency: str = "INR"
    tax_id: str | None = None
    notes: str | None = None
    is_active: bool = True
    rating: float | None = None
    lead_time: int | None = None
    minimum_order_amount: float | None = None


class PurchaseOrderItem(WireModel):
    product_id: str = ""
    variant_id: str | None = None
    quantity: int = 0
    quantity_received: int = 0
    unit_cost: float = 0
    total_cost: float = 0
    expected_delivery_date: str | None = None
    notes: str | None = None


class PurchaseOrder(CatalogRecord):
    order_number: str = ""
    supplier_id: str = ""
    status: str = "draft"
    items: list[PurchaseOrderItem] = []
    subtotal: float = 0
    tax_amount: float = 0
    shipping_cost: float = 0
    total_amount: float = 0
    currency: str = "INR"
    expected_delivery_date: str | None = None
    actual_delivery_date: str | None = None
    notes: str | None = None
    created_by: str | None = None
    approved_by: str | None = None
    approved_at: str | None = None
    ordered_at: str | None = None


class ReceivedItem(WireModel):
    """Quantity received against one line of a purchase order."""

    item_index: int
    quantity: int
