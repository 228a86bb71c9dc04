"""Form for school uniforms."""

from typing import Any

from catalog_admin.application.schemas import Uniform

from .base import EntityForm, to_number

UNIFORM_TYPES = ("school", "sports", "formal", "casual")
GENDER_OPTIONS = ("unisex", "boys", "girls")
SIZE_OPTIONS = ("XS", "S", "M", "L", "XL", "XXL", "XXXL")


class UniformForm(EntityForm):
    record_type = Uniform
    label = "Uniform"

    def defaults(self) -> dict[str, Any]:
        return {
            "name": "",
            "slug": "",
            "description": "",
            "school_name": "",
            "grade_level": "",
            "type": "school",
            "gender": "unisex",
            "sizes": [],
            "colors": [],
            "materials": [],
            "care_instructions": "",
            "season": "",
            "price": 0,
            "cost_price": 0,
            "sku": "",
            "barcode": "",
            "weight": 0,
            "dimensions": {"length": 0, "width": 0, "height": 0},
            "images": [],
            "specifications": {},
            "is_active": True,
            "is_featured": False,
            "tags": [],
            "meta_title": "",
            "meta_description": "",
            "seo_keywords": [],
        }

    def check(self) -> dict[str, str]:
        errors: dict[str, str] = {}
        self._require(errors, "name", "Name is required")
        self._require(errors, "school_name", "School name is required")
        self._require(errors, "type", "Type is required")
        price = to_number(self.data.get("price"))
        if price is None or price <= 0:
            errors["price"] = "Valid price is required"
        return errors
