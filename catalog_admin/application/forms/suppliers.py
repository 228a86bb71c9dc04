"""Forms for suppliers and purchase orders."""

from typing import Any

from catalog_admin.application.schemas import PurchaseOrder, Supplier

from .base import EntityForm, is_blank, is_valid_email, to_number


class SupplierForm(EntityForm):
    record_type = Supplier
    label = "Supplier"

    def defaults(self) -> dict[str, Any]:
        return {
            "name": "",
            "code": "",
            "contact_person": "",
            "email": "",
            "phone": "",
            "website": "",
            "address": {
                "street": "",
                "city": "",
                "state": "",
                "postal_code": "",
                "country": "India",
            },
            "payment_terms": "",
            "credit_limit": 0,
            "currency": "INR",
            "tax_id": "",
            "notes": "",
            "is_active": True,
            "rating": 0,
            "lead_time": 0,
            "minimum_order_amount": 0,
        }

    def check(self) -> dict[str, str]:
        errors: dict[str, str] = {}
        self._require(errors, "name", "Name is required")
        self._require(errors, "code", "Code is required")
        email = self.data.get("email")
        if not is_blank(email) and not is_valid_email(email):
            errors["email"] = "Invalid email format"
        return errors


def _line_quantity(item: dict[str, Any]) -> int:
    return int(to_number(item.get("quantity")) or 0)


def _line_cost(item: dict[str, Any]) -> float:
    return to_number(item.get("unit_cost")) or 0


class PurchaseOrderForm(EntityForm):
    """Purchase order with editable line items.

    Adding a line for a product/variant already on the order accumulates
    its quantity at the existing unit cost. Totals are recomputed on every
    line change and again in ``payload``.
    """

    record_type = PurchaseOrder
    label = "Purchase Order"

    def defaults(self) -> dict[str, Any]:
        return {
            "supplier_id": "",
            "status": "draft",
            "items": [],
            "subtotal": 0,
            "tax_amount": 0,
            "shipping_cost": 0,
            "total_amount": 0,
            "currency": "INR",
            "expected_delivery_date": "",
            "notes": "",
        }

    def add_item(
        self,
        product_id: str,
        quantity: int,
        unit_cost: float,
        variant_id: str | None = None,
    ) -> bool:
        product_id = product_id.strip()
        if not product_id or quantity <= 0 or unit_cost < 0:
            return False
        variant_id = variant_id or None
        items = [dict(item) for item in self.data.get("items") or []]
        for item in items:
            if item.get("product_id") == product_id and (item.get("variant_id") or None) == variant_id:
                item["quantity"] = _line_quantity(item) + quantity
                item["total_cost"] = item["quantity"] * _line_cost(item)
                break
        else:
            items.append(
                {
                    "product_id": product_id,
                    "variant_id": variant_id,
                    "quantity": quantity,
                    "quantity_received": 0,
                    "unit_cost": unit_cost,
                    "total_cost": quantity * unit_cost,
                }
            )
        self.set_field("items", items)
        self.recalculate()
        return True

    def remove_item(self, index: int) -> None:
        items = list(self.data.get("items") or [])
        if 0 <= index < len(items):
            del items[index]
            self.set_field("items", items)
            self.recalculate()

    def recalculate(self) -> None:
        subtotal = sum(
            _line_quantity(item) * _line_cost(item) for item in self.data.get("items") or []
        )
        tax = to_number(self.data.get("tax_amount")) or 0
        shipping = to_number(self.data.get("shipping_cost")) or 0
        self.data["subtotal"] = subtotal
        self.data["total_amount"] = subtotal + tax + shipping

    def check(self) -> dict[str, str]:
        errors: dict[str, str] = {}
        self._require(errors, "supplier_id", "Supplier is required")
        items = self.data.get("items") or []
        if not items:
            errors["items"] = "At least one item is required"
        for index, item in enumerate(items):
            quantity = to_number(item.get("quantity"))
            if quantity is None or quantity <= 0:
                errors[f"item-{index}-quantity"] = "Quantity must be greater than zero"
            unit_cost = to_number(item.get("unit_cost"))
            if unit_cost is None or unit_cost < 0:
                errors[f"item-{index}-unit_cost"] = "Unit cost cannot be negative"
        return errors

    def payload(self) -> dict[str, Any]:
        self.recalculate()
        data = super().payload()
        if is_blank(data.get("expected_delivery_date")):
            data.pop("expected_delivery_date", None)
        return data
