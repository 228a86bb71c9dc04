"""Forms for warehouses and stock adjustments."""

from typing import Any

from catalog_admin.application.schemas import StockUpdate, Warehouse

from .base import EntityForm, is_blank, to_number

STOCK_OPERATIONS = ("add", "subtract")


class WarehouseForm(EntityForm):
    record_type = Warehouse
    label = "Warehouse"

    def defaults(self) -> dict[str, Any]:
        return {
            "name": "",
            "code": "",
            "description": "",
            "address": {
                "street": "",
                "city": "",
                "state": "",
                "postal_code": "",
                "country": "India",
            },
            "contact": {},
            "capacity": 0,
            "is_primary": False,
            "is_active": True,
        }

    def check(self) -> dict[str, str]:
        errors: dict[str, str] = {}
        self._require(errors, "name", "Name is required")
        self._require(errors, "code", "Code is required")
        address = self.data.get("address") or {}
        if is_blank(address.get("street")):
            errors["street"] = "Street address is required"
        if is_blank(address.get("city")):
            errors["city"] = "City is required"
        return errors


class StockAdjustmentForm(EntityForm):
    """Stock movement against an existing inventory item."""

    record_type = StockUpdate
    label = "Stock"
    create_title = "Adjust Stock"

    def defaults(self) -> dict[str, Any]:
        return {
            "quantity": 0,
            "operation": "add",
            "reference_id": "",
            "reference_type": "",
            "notes": "",
        }

    @property
    def title(self) -> str:
        return self.create_title

    def check(self) -> dict[str, str]:
        errors: dict[str, str] = {}
        quantity = to_number(self.data.get("quantity"))
        if quantity is None or quantity <= 0:
            errors["quantity"] = "Quantity must be greater than zero"
        if self.data.get("operation") not in STOCK_OPERATIONS:
            errors["operation"] = "Operation must be add or subtract"
        return errors

    def payload(self) -> dict[str, Any]:
        data = super().payload()
        data["quantity"] = int(to_number(data["quantity"]))
        return {key: value for key, value in data.items() if not is_blank(value)}
