"""Forms for gift services and gift cards."""

from typing import Any

from catalog_admin.application.schemas import GiftCard, GiftService

from .base import EntityForm, is_blank, is_valid_email, to_number

GIFT_SERVICE_TYPES = ("gift_wrap", "gift_message", "gift_box", "gift_card", "personalization")


class GiftServiceForm(EntityForm):
    record_type = GiftService
    label = "Gift Service"

    def defaults(self) -> dict[str, Any]:
        return {
            "name": "",
            "description": "",
            "type": "gift_wrap",
            "price": 0,
            "currency": "INR",
            "is_free": False,
            "free_threshold": None,
            "options": [],
            "max_characters": None,
            "is_active": True,
            "sort_order": 0,
            "image_url": "",
        }

    def check(self) -> dict[str, str]:
        errors: dict[str, str] = {}
        self._require(errors, "name", "Name is required")
        price = to_number(self.data.get("price"))
        if price is None or price < 0:
            errors["price"] = "Price cannot be negative"
        return errors


class GiftCardForm(EntityForm):
    """Gift card; a new card starts with its full amount as balance."""

    record_type = GiftCard
    label = "Gift Card"

    def defaults(self) -> dict[str, Any]:
        return {
            "code": "",
            "original_amount": 0,
            "current_balance": None,
            "currency": "INR",
            "status": "active",
            "purchased_by": "",
            "recipient_email": "",
            "recipient_name": "",
            "gift_message": "",
            "expiry_date": "",
            "is_digital": True,
            "delivery_method": "",
            "notes": "",
        }

    def check(self) -> dict[str, str]:
        errors: dict[str, str] = {}
        self._require(errors, "code", "Code is required")
        amount = to_number(self.data.get("original_amount"))
        if amount is None or amount <= 0:
            errors["original_amount"] = "Amount must be greater than zero"
        email = self.data.get("recipient_email")
        if not is_blank(email) and not is_valid_email(email):
            errors["recipient_email"] = "Invalid email format"
        return errors

    def payload(self) -> dict[str, Any]:
        data = super().payload()
        if not self.is_edit:
            data["current_balance"] = data["original_amount"]
        if is_blank(data.get("expiry_date")):
            data.pop("expiry_date", None)
        return data
