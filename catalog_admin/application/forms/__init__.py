from .base import EntityForm, SubmitCallback, slugify
from .book_specification import BookSpecificationForm
from .books import AuthorForm, BookSeriesForm, PublisherForm
from .gifts import GiftCardForm, GiftServiceForm
from .inventory import StockAdjustmentForm, WarehouseForm
from .pricing import PricingRuleForm
from .product_kinds import ProductKindForm
from .school_sets import SchoolSetForm
from .suppliers import PurchaseOrderForm, SupplierForm
from .uniforms import UniformForm

__all__ = [
    "EntityForm",
    "SubmitCallback",
    "slugify",
    "AuthorForm",
    "BookSeriesForm",
    "BookSpecificationForm",
    "GiftCardForm",
    "GiftServiceForm",
    "PricingRuleForm",
    "ProductKindForm",
    "PublisherForm",
    "PurchaseOrderForm",
    "SchoolSetForm",
    "StockAdjustmentForm",
    "SupplierForm",
    "UniformForm",
    "WarehouseForm",
]
