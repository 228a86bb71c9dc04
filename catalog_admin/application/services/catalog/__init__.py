from dataclasses import dataclass

from catalog_admin.application.interfaces import CatalogHttpClient

from .base import CatalogService, serialize
from .book_service import BookService
from .book_specification_service import BookSpecificationService
from .gift_service import GiftService
from .inventory_service import InventoryService
from .pricing_service import PricingService
from .product_kind_service import ProductKindService
from .school_set_service import SchoolSetService
from .supplier_service import SupplierService
from .uniform_service import UniformService


@dataclass(frozen=True)
class CatalogServices:
    """All service modules bound to one HTTP client."""

    books: BookService
    suppliers: SupplierService
    inventory: InventoryService
    book_specifications: BookSpecificationService
    school_sets: SchoolSetService
    uniforms: UniformService
    gifts: GiftService
    pricing: PricingService
    product_kinds: ProductKindService

    @classmethod
    def from_client(cls, client: CatalogHttpClient) -> "CatalogServices":
        return cls(
            books=BookService(client),
            suppliers=SupplierService(client),
            inventory=InventoryService(client),
            book_specifications=BookSpecificationService(client),
            school_sets=SchoolSetService(client),
            uniforms=UniformService(client),
            gifts=GiftService(client),
            pricing=PricingService(client),
            product_kinds=ProductKindService(client),
        )


__all__ = [
    "BookService",
    "BookSpecificationService",
    "CatalogService",
    "CatalogServices",
    "GiftService",
    "InventoryService",
    "PricingService",
    "ProductKindService",
    "SchoolSetService",
    "SupplierService",
    "UniformService",
    "serialize",
]
