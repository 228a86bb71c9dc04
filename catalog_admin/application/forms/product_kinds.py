"""Form for product kinds and their dynamic field definitions."""

from typing import Any

from catalog_admin.application.schemas import ProductKind

from .base import EntityForm, is_blank

FIELD_TYPES = ("text", "number", "boolean", "select", "date")


def empty_field() -> dict[str, Any]:
    return {
        "name": "",
        "label": "",
        "type": "text",
        "required": False,
        "options": [],
        "placeholder": "",
    }


class ProductKindForm(EntityForm):
    record_type = ProductKind
    label = "Product Kind"

    def defaults(self) -> dict[str, Any]:
        return {
            "key": "",
            "name": "",
            "description": "",
            "is_active": True,
            "kind_fields": [empty_field()],
        }

    def add_field(self) -> None:
        self.set_field("kind_fields", [*self.data["kind_fields"], empty_field()])

    def remove_field(self, index: int) -> None:
        fields = list(self.data["kind_fields"])
        if 0 <= index < len(fields):
            del fields[index]
            self.set_field("kind_fields", fields)

    def update_field(self, index: int, **patch: Any) -> None:
        fields = list(self.data["kind_fields"])
        fields[index] = {**fields[index], **patch}
        self.set_field("kind_fields", fields)
        for key in patch:
            self.errors.pop(f"field-{index}-{key}", None)

    def check(self) -> dict[str, str]:
        errors: dict[str, str] = {}
        self._require(errors, "key", "Key is required")
        self._require(errors, "name", "Name is required")
        fields = self.data.get("kind_fields") or []
        if not fields:
            errors["kind_fields"] = "At least one field is required"
        for index, field in enumerate(fields):
            if is_blank(field.get("name")):
                errors[f"field-{index}-name"] = "Field name required"
            if is_blank(field.get("label")):
                errors[f"field-{index}-label"] = "Label required"
        return errors
