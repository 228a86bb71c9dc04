"""Service module for gift services and gift cards."""

from typing import Any

from catalog_admin.application.schemas import (
    ApiResponse,
    GiftCard,
    GiftCardValidation,
    GiftService as GiftServiceRecord,
    Page,
    Stats,
)

from .base import CatalogService, Payload, segment


class GiftService(CatalogService):

    # ── Gift services ────────────────────────────────────────────────

    async def get_gift_services(
        self, page: int = 1, limit: int = 20
    ) -> ApiResponse[Page[GiftServiceRecord]]:
        return await self._list_page(GiftServiceRecord, "/gift-services", page, limit)

    async def get_active_services(self) -> ApiResponse[list[GiftServiceRecord]]:
        return await self._list(GiftServiceRecord, "/gift-services/active")

    async def get_available_services(
        self, order_amount: float = 0
    ) -> ApiResponse[list[GiftServiceRecord]]:
        return await self._list(
            GiftServiceRecord, "/gift-services/available", {"orderAmount": order_amount}
        )

    async def get_free_services(self) -> ApiResponse[list[GiftServiceRecord]]:
        return await self._list(GiftServiceRecord, "/gift-services/free")

    async def get_services_by_type(self, service_type: str) -> ApiResponse[list[GiftServiceRecord]]:
        return await self._list(GiftServiceRecord, f"/gift-services/type/{segment(service_type)}")

    async def calculate_service_price(
        self, service_id: str, order_amount: float = 0
    ) -> ApiResponse[float]:
        """Price of a service for an order; free above the service's threshold."""
        return await self._get(
            ApiResponse[float],
            f"/gift-services/{segment(service_id)}/price",
            {"orderAmount": order_amount},
        )

    async def create_gift_service(self, data: Payload) -> ApiResponse[GiftServiceRecord]:
        return await self._create(GiftServiceRecord, "/gift-services", data)

    async def update_gift_service(
        self, service_id: str, data: Payload
    ) -> ApiResponse[GiftServiceRecord]:
        return await self._update(GiftServiceRecord, f"/gift-services/{segment(service_id)}", data)

    async def delete_gift_service(self, service_id: str) -> ApiResponse[Any]:
        return await self._delete(f"/gift-services/{segment(service_id)}")

    # ── Gift cards ───────────────────────────────────────────────────

    async def get_gift_cards(self, page: int = 1, limit: int = 20) -> ApiResponse[Page[GiftCard]]:
        return await self._list_page(GiftCard, "/gift-cards", page, limit)

    async def get_gift_card_stats(self) -> ApiResponse[Stats]:
        return await self._stats("/gift-cards/stats")

    async def get_active_cards(self) -> ApiResponse[list[GiftCard]]:
        return await self._list(GiftCard, "/gift-cards/active")

    async def get_expired_cards(self) -> ApiResponse[list[GiftCard]]:
        return await self._list(GiftCard, "/gift-cards/expired")

    async def get_used_cards(self) -> ApiResponse[list[GiftCard]]:
        return await self._list(GiftCard, "/gift-cards/used")

    async def get_cards_by_status(self, status: str) -> ApiResponse[list[GiftCard]]:
        return await self._list(GiftCard, f"/gift-cards/status/{segment(status)}")

    async def get_cards_by_purchaser(self, customer_id: str) -> ApiResponse[list[GiftCard]]:
        return await self._list(GiftCard, f"/gift-cards/purchased-by/{segment(customer_id)}")

    async def get_cards_by_recipient_email(self, email: str) -> ApiResponse[list[GiftCard]]:
        return await self._list(GiftCard, f"/gift-cards/recipient/{segment(email)}")

    async def get_card_by_code(self, code: str) -> ApiResponse[GiftCard]:
        return await self._one(GiftCard, f"/gift-cards/code/{segment(code)}")

    async def validate_gift_card(self, code: str) -> ApiResponse[GiftCardValidation]:
        return await self._get(
            ApiResponse[GiftCardValidation], f"/gift-cards/code/{segment(code)}/validate"
        )

    async def generate_gift_card_code(self) -> ApiResponse[str]:
        body = await self._client.post("/gift-cards/generate-code")
        return self._parse(ApiResponse[str], body)

    async def create_gift_card(self, data: Payload) -> ApiResponse[GiftCard]:
        return await self._create(GiftCard, "/gift-cards", data)

    async def update_gift_card(self, card_id: str, data: Payload) -> ApiResponse[GiftCard]:
        return await self._update(GiftCard, f"/gift-cards/{segment(card_id)}", data)

    async def use_gift_card(
        self, code: str, used_by: str, order_id: str, amount: float
    ) -> ApiResponse[GiftCard]:
        return await self._action(
            GiftCard,
            "PUT",
            f"/gift-cards/code/{segment(code)}/use",
            {"usedBy": used_by, "orderId": order_id, "amount": amount},
        )

    async def refund_gift_card(self, code: str, amount: float) -> ApiResponse[GiftCard]:
        return await self._action(
            GiftCard, "PUT", f"/gift-cards/code/{segment(code)}/refund", {"amount": amount}
        )

    async def expire_gift_card(self, code: str) -> ApiResponse[GiftCard]:
        return await self._action(GiftCard, "PUT", f"/gift-cards/code/{segment(code)}/expire")

    async def delete_gift_card(self, card_id: str) -> ApiResponse[Any]:
        return await self._delete(f"/gift-cards/{segment(card_id)}")
