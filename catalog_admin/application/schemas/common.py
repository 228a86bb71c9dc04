"""Shared pydantic shapes for the catalog REST backend.

Every response uses the ``{success, data, message}`` envelope. List
endpoints nest a page object (``{data: [...], totalPages, page, ...}``)
inside ``data``.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")


class WireModel(BaseModel):
    """Base for all backend shapes: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class CatalogRecord(WireModel):
    """A backend-persisted entity identified by an opaque ``_id``."""

    id: str | None = Field(default=None, alias="_id")
    created_at: str | None = None
    updated_at: str | None = None

    @property
    def display_name(self) -> str:
        """Human label used in confirmation prompts."""
        for attr in ("name", "code", "order_number", "key"):
            value = getattr(self, attr, None)
            if isinstance(value, str) and value.strip():
                return value
        return self.id or ""


class Address(WireModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None


class Dimensions(WireModel):
    length: float = 0
    width: float = 0
    height: float = 0


class ApiResponse(WireModel, Generic[DataT]):
    """The backend's response envelope."""

    success: bool = False
    data: DataT | None = None
    message: str | None = None


class Page(WireModel, Generic[DataT]):
    """One page of a paginated list."""

    data: list[DataT] = Field(default_factory=list)
    total_pages: int = 1
    page: int = 1
    limit: int | None = None
    total: int | None = None


Stats = Any
