"""Form for pricing rules."""

from typing import Any

from catalog_admin.application.schemas import PricingRule

from .base import EntityForm, to_number

RULE_TYPES = (
    "bulk_discount",
    "customer_group",
    "seasonal",
    "product_category",
    "brand",
    "quantity_break",
)
DISCOUNT_TYPES = ("percentage", "fixed_amount", "free_shipping")


class PricingRuleForm(EntityForm):
    record_type = PricingRule
    label = "Pricing Rule"

    def defaults(self) -> dict[str, Any]:
        return {
            "name": "",
            "description": "",
            "type": "bulk_discount",
            "discount_type": "percentage",
            "discount_value": 0,
            "min_quantity": None,
            "max_quantity": None,
            "min_order_amount": None,
            "max_order_amount": None,
            "product_ids": [],
            "category_ids": [],
            "brand_ids": [],
            "customer_group_ids": [],
            "valid_from": "",
            "valid_to": "",
            "priority": 0,
            "is_active": True,
            "usage_limit_per_customer": None,
            "total_usage_limit": None,
        }

    def check(self) -> dict[str, str]:
        errors: dict[str, str] = {}
        self._require(errors, "name", "Name is required")

        discount_type = self.data.get("discount_type")
        value = to_number(self.data.get("discount_value"))
        if discount_type != "free_shipping":
            if value is None or value <= 0:
                errors["discount_value"] = "Discount value must be greater than zero"
            elif discount_type == "percentage" and value > 100:
                errors["discount_value"] = "Percentage discount cannot exceed 100"

        min_qty = to_number(self.data.get("min_quantity"))
        max_qty = to_number(self.data.get("max_quantity"))
        if min_qty is not None and max_qty is not None and min_qty > max_qty:
            errors["max_quantity"] = "Maximum quantity must be at least the minimum quantity"
        return errors

    def payload(self) -> dict[str, Any]:
        data = super().payload()
        for field in ("valid_from", "valid_to"):
            if not data.get(field):
                data.pop(field, None)
        return data
