"""Form for school sets, bundles of products sold together for a grade."""

from typing import Any
from uuid import uuid4

from catalog_admin.application.schemas import SchoolSet

from .base import EntityForm, is_blank, to_number


class SchoolSetForm(EntityForm):
    record_type = SchoolSet
    label = "School Set"

    def defaults(self) -> dict[str, Any]:
        return {
            "name": "",
            "slug": "",
            "description": "",
            "grade_level": "",
            "board": "",
            "syllabus_year": "",
            "age_group": "",
            "price": 0,
            "cost_price": 0,
            "sku": "",
            "barcode": "",
            "weight": 0,
            "dimensions": {"length": 0, "width": 0, "height": 0},
            "images": [],
            "specifications": {},
            "is_active": True,
            "is_featured": False,
            "tags": [],
            "meta_title": "",
            "meta_description": "",
            "seo_keywords": [],
            "items": [],
        }

    def add_set_item(
        self,
        product_name: str,
        quantity: int = 1,
        unit_price: float = 0,
        product_id: str = "",
    ) -> bool:
        """Append a line; items without a product id get a temporary one."""
        product_name = product_name.strip()
        if not product_name or quantity <= 0 or unit_price < 0:
            return False
        item = {
            "product_id": product_id or f"temp-{uuid4().hex}",
            "product_name": product_name,
            "quantity": quantity,
            "unit_price": unit_price,
        }
        self.set_field("items", [*(self.data.get("items") or []), item])
        return True

    def remove_set_item(self, index: int) -> None:
        items = list(self.data.get("items") or [])
        if 0 <= index < len(items):
            del items[index]
            self.set_field("items", items)

    def total_price(self) -> float:
        return sum(
            item.get("quantity", 0) * (item.get("unit_price") or 0)
            for item in self.data.get("items") or []
        )

    def check(self) -> dict[str, str]:
        errors: dict[str, str] = {}
        self._require(errors, "name", "Name is required")
        self._require(errors, "grade_level", "Grade level is required")
        price = to_number(self.data.get("price"))
        if price is None or price <= 0:
            errors["price"] = "Valid price is required"
        items = self.data.get("items") or []
        if not items:
            errors["items"] = "At least one item is required"
        for index, item in enumerate(items):
            if is_blank(item.get("product_name")):
                errors[f"item-{index}-product_name"] = "Product name is required"
            if (to_number(item.get("quantity")) or 0) <= 0:
                errors[f"item-{index}-quantity"] = "Quantity must be greater than zero"
            unit_price = to_number(item.get("unit_price"))
            if unit_price is None or unit_price < 0:
                errors[f"item-{index}-unit_price"] = "Unit price cannot be negative"
        return errors
