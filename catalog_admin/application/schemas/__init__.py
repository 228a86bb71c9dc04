from .common import (
    Address,
    ApiResponse,
    CatalogRecord,
    Dimensions,
    Page,
    Stats,
    WireModel,
)
from .books import Author, BookSeries, Publisher, SeriesEntry, SocialMedia
from .suppliers import (
    PURCHASE_ORDER_STATUSES,
    PurchaseOrder,
    PurchaseOrderItem,
    ReceivedItem,
    Supplier,
)
from .inventory import InventoryItem, StockUpdate, Warehouse, WarehouseContact
from .products import (
    BookSpecification,
    MerchandiseRecord,
    ProductKind,
    ProductKindEnvelope,
    ProductKindField,
    SchoolSet,
    SetItem,
    Uniform,
)
from .screens import (
    FormResponse,
    ListStateResponse,
    MutationResponse,
    ScreenSummary,
    StatsResponse,
)
from .commerce import (
    DiscountRequest,
    DiscountResult,
    GiftCard,
    GiftCardValidation,
    GiftService,
    PricingRule,
)

__all__ = [
    "Address",
    "ApiResponse",
    "CatalogRecord",
    "Dimensions",
    "Page",
    "Stats",
    "WireModel",
    "Author",
    "BookSeries",
    "Publisher",
    "SeriesEntry",
    "SocialMedia",
    "PURCHASE_ORDER_STATUSES",
    "PurchaseOrder",
    "PurchaseOrderItem",
    "ReceivedItem",
    "Supplier",
    "InventoryItem",
    "StockUpdate",
    "Warehouse",
    "WarehouseContact",
    "BookSpecification",
    "MerchandiseRecord",
    "ProductKind",
    "ProductKindEnvelope",
    "ProductKindField",
    "SchoolSet",
    "SetItem",
    "Uniform",
    "DiscountRequest",
    "DiscountResult",
    "GiftCard",
    "GiftCardValidation",
    "GiftService",
    "PricingRule",
    "FormResponse",
    "ListStateResponse",
    "MutationResponse",
    "ScreenSummary",
    "StatsResponse",
]
