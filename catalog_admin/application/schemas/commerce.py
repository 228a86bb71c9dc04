"""Wire models for gift services, gift cards and pricing rules."""

from pydantic import Field

from .common import CatalogRecord, WireModel


class GiftService(CatalogRecord):
    name: str = ""
    description: str | None = None
    type: str = "gift_wrap"
    price: float = 0
    currency: str = "INR"
    is_free: bool = False
    free_threshold: float | None = None
    options: list[str] | None = None
    max_characters: int | None = None
    is_active: bool = True
    sort_order: int = 0
    image_url: str | None = None


class GiftCard(CatalogRecord):
    code: str = ""
    original_amount: float = 0
    current_balance: float = 0
    currency: str = "INR"
    status: str = "active"
    purchased_by: str | None = None
    recipient_email: str | None = None
    recipient_name: str | None = None
    gift_message: str | None = None
    expiry_date: str | None = None
    used_by: str | None = None
    used_at: str | None = None
    used_in_order: str | None = None
    purchase_order_id: str | None = None
    is_digital: bool = True
    delivery_method: str | None = None
    notes: str | None = None


class GiftCardValidation(WireModel):
    valid: bool = False
    balance: float = 0
    message: str | None = None


class PricingRule(CatalogRecord):
    name: str = ""
    description: str | None = None
    type: str = "bulk_discount"
    discount_type: str = "percentage"
    discount_value: float = 0
    min_quantity: int | None = None
    max_quantity: int | None = None
    min_order_amount: float | None = None
    max_order_amount: float | None = None
    product_ids: list[str] | None = None
    category_ids: list[str] | None = None
    brand_ids: list[str] | None = None
    customer_group_ids: list[str] | None = None
    valid_from: str | None = None
    valid_to: str | None = None
    priority: int = 0
    is_active: bool = True
    usage_limit_per_customer: int | None = None
    total_usage_limit: int | None = None
    usage_count: int = 0
    created_by: str | None = None


class DiscountRequest(WireModel):
    product_ids: list[str] = Field(default_factory=list)
    category_ids: list[str] = Field(default_factory=list)
    brand_ids: list[str] = Field(default_factory=list)
    customer_group_ids: list[str] = Field(default_factory=list)
    quantity: int = 0
    order_amount: float = 0


class DiscountResult(WireModel):
    rule: PricingRule
    discount: float
