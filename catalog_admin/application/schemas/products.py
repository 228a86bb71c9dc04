"""Wire models for product-side entities: book specifications, school sets,
uniforms and product kinds."""

from typing import Any

from pydantic import Field

from .common import CatalogRecord, Dimensions, WireModel


class BookSpecification(CatalogRecord):
    product_id: str = ""
    isbn: str | None = None
    isbn13: str | None = None
    isbn10: str | None = None
    format: str = "paperback"
    language: str = "english"
    page_count: int | None = None
    dimensions: Dimensions | None = None
    weight: float | None = None
    publication_date: str | None = None
    edition: str | None = None
    volume: str | None = None
    series_name: str | None = None
    series_number: int | None = None
    age_group: str | None = None
    grade_level: str | None = None
    subject: str | None = None
    board: str | None = None
    syllabus_year: str | None = None
    authors: list[str] | None = None
    editors: list[str] | None = None
    illustrators: list[str] | None = None
    publisher: str | None = None
    publisher_id: str | None = None
    author_id: str | None = None
    book_series_id: str | None = None
    table_of_contents: str | None = None
    summary: str | None = None
    key_features: list[str] | None = None
    learning_objectives: list[str] | None = None
    prerequisites: str | None = None
    target_audience: str | None = None
    cover_image_url: str | None = None
    sample_pages: list[str] | None = None
    has_digital_version: bool = False
    has_audio_version: bool = False
    digital_formats: dict[str, str] | None = None
    awards: list[str] | None = None
    reviews: dict[str, Any] | None = None
    additional_specs: dict[str, Any] | None = None


class MerchandiseRecord(CatalogRecord):
    """Fields shared by sellable catalog products (school sets, uniforms)."""

    name: str = ""
    slug: str = ""
    description: str | None = None
    grade_level: str | None = None
    price: float = 0
    cost_price: float | None = None
    sku: str | None = None
    barcode: str | None = None
    weight: float | None = None
    dimensions: Dimensions | None = None
    images: list[str] | None = None
    specifications: dict[str, Any] | None = None
    is_active: bool = True
    is_featured: bool = False
    tags: list[str] | None = None
    meta_title: str | None = None
    meta_description: str | None = None
    seo_keywords: list[str] | None = None


class SetItem(WireModel):
    product_id: str = ""
    product_name: str = ""
    quantity: int = 1
    unit_price: float = 0


class SchoolSet(MerchandiseRecord):
    short_description: str | None = None
    type: str | None = None
    status: str | None = None
    school_name: str | None = None
    school_logo_url: str | None = None
    academic_year: str | None = None
    board: str | None = None
    syllabus_year: str | None = None
    age_group: str | None = None
    subject: str | None = None
    season: str | None = None
    gender: str | None = None
    original_price: float | None = None
    discount_percentage: float | None = None
    currency: str | None = None
    stock_quantity: int | None = None
    min_order_quantity: int | None = None
    max_order_quantity: int | None = None
    notes: str | None = None
    key_features: list[str] | None = None
    benefits: list[str] | None = None
    is_bestseller: bool | None = None
    is_new_arrival: bool | None = None
    items: list[SetItem] | None = None
    custom_fields: dict[str, Any] | None = None


class Uniform(MerchandiseRecord):
    school_name: str | None = None
    type: str | None = None
    gender: str | None = None
    sizes: list[str] | None = None
    colors: list[str] | None = None
    materials: list[str] | None = None
    care_instructions: str | None = None
    season: str | None = None


class ProductKindField(WireModel):
    """One dynamic attribute a product of this kind carries."""

    name: str = ""
    label: str = ""
    type: str = "text"
    required: bool = False
    options: list[str] = []
    placeholder: str = ""


class ProductKind(CatalogRecord):
    key: str = ""
    name: str = ""
    description: str | None = None
    is_active: bool = True
    kind_fields: list[ProductKindField] = Field(default_factory=list, alias="fields")


class ProductKindEnvelope(WireModel):
    """Create/update responses nest the record under ``kind``."""

    kind: ProductKind | None = None
