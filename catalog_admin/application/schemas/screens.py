"""Pydantic schemas for the screens API."""

from typing import Any

from pydantic import BaseModel, Field


# ── Screen Schemas ───────────────────────────────────────────────────


class ScreenSummary(BaseModel):
    """A registered list screen and the actions it offers."""

    key: str
    title: str
    label: str
    capabilities: list[str]


class ListStateResponse(BaseModel):
    """One page of a list screen plus its loading/error state."""

    screen: str
    items: list[dict[str, Any]] = Field(default_factory=list)
    page: int
    page_size: int
    total_pages: int
    search_term: str = ""
    has_previous: bool = False
    has_next: bool = False
    error: str | None = None
    can_retry: bool = False


class StatsResponse(BaseModel):
    screen: str
    stats: Any = None


# ── Form Schemas ─────────────────────────────────────────────────────


class FormResponse(BaseModel):
    """A seeded create/edit form."""

    screen: str
    mode: str
    title: str
    record_id: str | None = None
    data: dict[str, Any]
    errors: dict[str, str] = Field(default_factory=dict)


class MutationResponse(BaseModel):
    """Result of a create, update, delete or stock change."""

    screen: str
    alerts: list[str] = Field(default_factory=list)
    state: ListStateResponse
