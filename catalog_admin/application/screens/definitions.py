"""Registry of the admin list screens.

Each screen binds a record model and a form to the service operations it
offers. Only ``list`` is mandatory; a screen without ``create`` or
``delete`` simply does not offer that action.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from catalog_admin.application.forms import (
    AuthorForm,
    BookSeriesForm,
    BookSpecificationForm,
    EntityForm,
    GiftCardForm,
    GiftServiceForm,
    PricingRuleForm,
    ProductKindForm,
    PublisherForm,
    PurchaseOrderForm,
    SchoolSetForm,
    StockAdjustmentForm,
    SupplierForm,
    UniformForm,
    WarehouseForm,
)
from catalog_admin.application.schemas import (
    ApiResponse,
    Author,
    BookSeries,
    BookSpecification,
    CatalogRecord,
    GiftCard,
    GiftService,
    InventoryItem,
    PricingRule,
    ProductKind,
    Publisher,
    PurchaseOrder,
    SchoolSet,
    Supplier,
    Uniform,
    Warehouse,
)
from catalog_admin.application.services import CatalogServices
from catalog_admin.domain.exceptions import UnknownScreenError

Response = Awaitable[ApiResponse[Any]]
ListOperation = Callable[[CatalogServices, int, int], Response]
SearchOperation = Callable[[CatalogServices, str, int, int], Response]
StatsOperation = Callable[[CatalogServices], Response]
CreateOperation = Callable[[CatalogServices, dict[str, Any]], Response]
UpdateOperation = Callable[[CatalogServices, str, dict[str, Any]], Response]
DeleteOperation = Callable[[CatalogServices, str], Response]

OPTIONAL_OPERATIONS = ("search", "stats", "create", "update", "delete", "stock")


@dataclass(frozen=True)
class ScreenDefinition:
    key: str
    label: str
    plural: str
    record_type: type[CatalogRecord]
    list_page: ListOperation
    form_class: type[EntityForm] | None = None
    search: SearchOperation | None = None
    stats: StatsOperation | None = None
    create: CreateOperation | None = None
    update: UpdateOperation | None = None
    delete: DeleteOperation | None = None
    stock: UpdateOperation | None = None
    stock_form_class: type[EntityForm] | None = None

    @property
    def title(self) -> str:
        return self.plural.title()

    @property
    def capabilities(self) -> list[str]:
        return ["list", *(name for name in OPTIONAL_OPERATIONS if getattr(self, name) is not None)]

    def supports(self, operation: str) -> bool:
        if operation == "list":
            return True
        return operation in OPTIONAL_OPERATIONS and getattr(self, operation) is not None


SCREENS: dict[str, ScreenDefinition] = {
    screen.key: screen
    for screen in (
        ScreenDefinition(
            key="authors",
            label="author",
            plural="authors",
            record_type=Author,
            form_class=AuthorForm,
            list_page=lambda s, page, limit: s.books.get_authors(page, limit),
            search=lambda s, term, page, limit: s.books.search_authors(term),
            stats=lambda s: s.books.get_author_stats(),
            create=lambda s, data: s.books.create_author(data),
            update=lambda s, record_id, data: s.books.update_author(record_id, data),
            delete=lambda s, record_id: s.books.delete_author(record_id),
        ),
        ScreenDefinition(
            key="publishers",
            label="publisher",
            plural="publishers",
            record_type=Publisher,
            form_class=PublisherForm,
            list_page=lambda s, page, limit: s.books.get_publishers(page, limit),
            search=lambda s, term, page, limit: s.books.search_publishers(term),
            stats=lambda s: s.books.get_publisher_stats(),
            create=lambda s, data: s.books.create_publisher(data),
            update=lambda s, record_id, data: s.books.update_publisher(record_id, data),
            delete=lambda s, record_id: s.books.delete_publisher(record_id),
        ),
        ScreenDefinition(
            key="book-series",
            label="book series",
            plural="book series",
            record_type=BookSeries,
            form_class=BookSeriesForm,
            list_page=lambda s, page, limit: s.books.get_book_series(page, limit),
            search=lambda s, term, page, limit: s.books.search_series(term),
            stats=lambda s: s.books.get_series_stats(),
            create=lambda s, data: s.books.create_book_series(data),
            update=lambda s, record_id, data: s.books.update_book_series(record_id, data),
            delete=lambda s, record_id: s.books.delete_book_series(record_id),
        ),
        ScreenDefinition(
            key="suppliers",
            label="supplier",
            plural="suppliers",
            record_type=Supplier,
            form_class=SupplierForm,
            list_page=lambda s, page, limit: s.suppliers.get_suppliers(page, limit),
            search=lambda s, term, page, limit: s.suppliers.search_suppliers(term),
            stats=lambda s: s.suppliers.get_supplier_stats(),
            create=lambda s, data: s.suppliers.create_supplier(data),
            update=lambda s, record_id, data: s.suppliers.update_supplier(record_id, data),
            delete=lambda s, record_id: s.suppliers.delete_supplier(record_id),
        ),
        ScreenDefinition(
            key="purchase-orders",
            label="purchase order",
            plural="purchase orders",
            record_type=PurchaseOrder,
            form_class=PurchaseOrderForm,
            list_page=lambda s, page, limit: s.suppliers.get_purchase_orders(page, limit),
            stats=lambda s: s.suppliers.get_purchase_order_summary(),
            create=lambda s, data: s.suppliers.create_purchase_order(data),
            update=lambda s, record_id, data: s.suppliers.update_purchase_order(record_id, data),
            delete=lambda s, record_id: s.suppliers.delete_purchase_order(record_id),
        ),
        ScreenDefinition(
            key="warehouses",
            label="warehouse",
            plural="warehouses",
            record_type=Warehouse,
            form_class=WarehouseForm,
            list_page=lambda s, page, limit: s.inventory.get_warehouses(page, limit),
            create=lambda s, data: s.inventory.create_warehouse(data),
            update=lambda s, record_id, data: s.inventory.update_warehouse(record_id, data),
            delete=lambda s, record_id: s.inventory.delete_warehouse(record_id),
        ),
        ScreenDefinition(
            key="inventory",
            label="inventory item",
            plural="inventory",
            record_type=InventoryItem,
            list_page=lambda s, page, limit: s.inventory.get_inventory(page, limit),
            stats=lambda s: s.inventory.get_inventory_summary(),
            stock=lambda s, record_id, data: s.inventory.update_stock(record_id, data),
            stock_form_class=StockAdjustmentForm,
        ),
        ScreenDefinition(
            key="book-specifications",
            label="specification",
            plural="specifications",
            record_type=BookSpecification,
            form_class=BookSpecificationForm,
            list_page=lambda s, page, limit: s.book_specifications.get_book_specifications(page, limit),
            search=lambda s, term, page, limit: s.book_specifications.search_book_specifications(
                term, page, limit
            ),
            create=lambda s, data: s.book_specifications.create_book_specification(data),
            update=lambda s, record_id, data: s.book_specifications.update_book_specification(
                record_id, data
            ),
            delete=lambda s, record_id: s.book_specifications.delete_book_specification(record_id),
        ),
        ScreenDefinition(
            key="school-sets",
            label="school set",
            plural="school sets",
            record_type=SchoolSet,
            form_class=SchoolSetForm,
            list_page=lambda s, page, limit: s.school_sets.get_school_sets(page, limit),
            search=lambda s, term, page, limit: s.school_sets.search_school_sets(term, page, limit),
            create=lambda s, data: s.school_sets.create_school_set(data),
            update=lambda s, record_id, data: s.school_sets.update_school_set(record_id, data),
            delete=lambda s, record_id: s.school_sets.delete_school_set(record_id),
        ),
        ScreenDefinition(
            key="uniforms",
            label="uniform",
            plural="uniforms",
            record_type=Uniform,
            form_class=UniformForm,
            list_page=lambda s, page, limit: s.uniforms.get_uniforms(page, limit),
            search=lambda s, term, page, limit: s.uniforms.search_uniforms(term, page, limit),
            create=lambda s, data: s.uniforms.create_uniform(data),
            update=lambda s, record_id, data: s.uniforms.update_uniform(record_id, data),
            delete=lambda s, record_id: s.uniforms.delete_uniform(record_id),
        ),
        ScreenDefinition(
            key="gift-services",
            label="gift service",
            plural="gift services",
            record_type=GiftService,
            form_class=GiftServiceForm,
            list_page=lambda s, page, limit: s.gifts.get_gift_services(page, limit),
            create=lambda s, data: s.gifts.create_gift_service(data),
            update=lambda s, record_id, data: s.gifts.update_gift_service(record_id, data),
            delete=lambda s, record_id: s.gifts.delete_gift_service(record_id),
        ),
        ScreenDefinition(
            key="gift-cards",
            label="gift card",
            plural="gift cards",
            record_type=GiftCard,
            form_class=GiftCardForm,
            list_page=lambda s, page, limit: s.gifts.get_gift_cards(page, limit),
            stats=lambda s: s.gifts.get_gift_card_stats(),
            create=lambda s, data: s.gifts.create_gift_card(data),
            update=lambda s, record_id, data: s.gifts.update_gift_card(record_id, data),
            delete=lambda s, record_id: s.gifts.delete_gift_card(record_id),
        ),
        ScreenDefinition(
            key="pricing-rules",
            label="pricing rule",
            plural="pricing rules",
            record_type=PricingRule,
            form_class=PricingRuleForm,
            list_page=lambda s, page, limit: s.pricing.get_pricing_rules(page, limit),
            stats=lambda s: s.pricing.get_rule_stats(),
            create=lambda s, data: s.pricing.create_pricing_rule(data),
            update=lambda s, record_id, data: s.pricing.update_pricing_rule(record_id, data),
            delete=lambda s, record_id: s.pricing.delete_pricing_rule(record_id),
        ),
        ScreenDefinition(
            key="product-kinds",
            label="product kind",
            plural="product kinds",
            record_type=ProductKind,
            form_class=ProductKindForm,
            list_page=lambda s, page, limit: s.product_kinds.get_kinds(page, limit),
            create=lambda s, data: s.product_kinds.create_kind(data),
            update=lambda s, record_id, data: s.product_kinds.update_kind(record_id, data),
            delete=lambda s, record_id: s.product_kinds.delete_kind(record_id),
        ),
    )
}


def get_screen(key: str) -> ScreenDefinition:
    """Look up a screen by key, raising UnknownScreenError when missing."""
    try:
        return SCREENS[key]
    except KeyError:
        raise UnknownScreenError(key) from None
