from .catalog import (
    BookService,
    BookSpecificationService,
    CatalogServices,
    GiftService,
    InventoryService,
    PricingService,
    ProductKindService,
    SchoolSetService,
    SupplierService,
    UniformService,
)

__all__ = [
    "BookService",
    "BookSpecificationService",
    "CatalogServices",
    "GiftService",
    "InventoryService",
    "PricingService",
    "ProductKindService",
    "SchoolSetService",
    "SupplierService",
    "UniformService",
]
