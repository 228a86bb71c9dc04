"""Service module for pricing rules."""

from typing import Any

from catalog_admin.application.schemas import (
    ApiResponse,
    DiscountRequest,
    DiscountResult,
    Page,
    PricingRule,
    Stats,
)

from .base import CatalogService, Payload, segment


class PricingService(CatalogService):

    async def get_pricing_rules(self, page: int = 1, limit: int = 20) -> ApiResponse[Page[PricingRule]]:
        return await self._list_page(PricingRule, "/pricing-rules", page, limit)

    async def get_active_rules(self) -> ApiResponse[list[PricingRule]]:
        return await self._list(PricingRule, "/pricing-rules/active")

    async def get_rule_stats(self) -> ApiResponse[Stats]:
        return await self._stats("/pricing-rules/stats")

    async def get_rules_by_type(self, rule_type: str) -> ApiResponse[list[PricingRule]]:
        return await self._list(PricingRule, f"/pricing-rules/type/{segment(rule_type)}")

    async def get_rules_by_product(self, product_id: str) -> ApiResponse[list[PricingRule]]:
        return await self._list(PricingRule, f"/pricing-rules/product/{segment(product_id)}")

    async def get_rules_by_category(self, category_id: str) -> ApiResponse[list[PricingRule]]:
        return await self._list(PricingRule, f"/pricing-rules/category/{segment(category_id)}")

    async def get_rules_by_brand(self, brand_id: str) -> ApiResponse[list[PricingRule]]:
        return await self._list(PricingRule, f"/pricing-rules/brand/{segment(brand_id)}")

    async def get_rules_by_customer_group(self, customer_group_id: str) -> ApiResponse[list[PricingRule]]:
        return await self._list(
            PricingRule, f"/pricing-rules/customer-group/{segment(customer_group_id)}"
        )

    async def get_applicable_rules(
        self,
        product_ids: str | None = None,
        category_ids: str | None = None,
        brand_ids: str | None = None,
        customer_group_ids: str | None = None,
        quantity: int | None = None,
        order_amount: float | None = None,
    ) -> ApiResponse[list[PricingRule]]:
        """Rules matching the given context. Omitted filters are not sent."""
        candidates = {
            "productIds": product_ids,
            "categoryIds": category_ids,
            "brandIds": brand_ids,
            "customerGroupIds": customer_group_ids,
            "quantity": quantity,
            "orderAmount": order_amount,
        }
        params = {key: value for key, value in candidates.items() if value is not None}
        return await self._list(PricingRule, "/pricing-rules/applicable", params)

    async def calculate_discount(self, data: Payload) -> ApiResponse[DiscountResult | None]:
        """Best matching rule and its discount, or ``None`` when no rule applies."""
        if isinstance(data, DiscountRequest):
            request = data
        else:
            request = DiscountRequest.model_validate(dict(data))
        body = await self._client.post(
            "/pricing-rules/calculate-discount",
            json=request.model_dump(by_alias=True, mode="json"),
        )
        return self._parse(ApiResponse[DiscountResult | None], body)

    async def create_pricing_rule(self, data: Payload) -> ApiResponse[PricingRule]:
        return await self._create(PricingRule, "/pricing-rules", data)

    async def update_pricing_rule(self, rule_id: str, data: Payload) -> ApiResponse[PricingRule]:
        return await self._update(PricingRule, f"/pricing-rules/{segment(rule_id)}", data)

    async def validate_rule(self, rule_id: str) -> ApiResponse[bool]:
        return await self._get(ApiResponse[bool], f"/pricing-rules/{segment(rule_id)}/validate")

    async def delete_pricing_rule(self, rule_id: str) -> ApiResponse[Any]:
        return await self._delete(f"/pricing-rules/{segment(rule_id)}")
