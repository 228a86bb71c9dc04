"""Domain entity: view-scoped state of a paginated list screen."""

from dataclasses import dataclass, field
from typing import Any


def clamp_page(page: int, total_pages: int) -> int:
    """Clamp a requested page number to ``[1, total_pages]``.

    A non-positive ``total_pages`` is treated as a single page.
    """
    return max(1, min(page, max(total_pages, 1)))


@dataclass
class ListScreenState:
    """Transient copy of one page of records plus its loading/error flags."""

    page_size: int = 20
    items: list[Any] = field(default_factory=list)
    page: int = 1
    total_pages: int = 1
    search_term: str = ""
    is_loading: bool = False
    error: str | None = None

    @property
    def can_retry(self) -> bool:
        return self.error is not None

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    def replace_items(self, items: list[Any], total_pages: int | None = None) -> None:
        """Store a freshly fetched page and keep the current page in range.

        When the page is clamped the stored items belong to the requested
        page; the caller refetches.
        """
        self.items = list(items)
        self.total_pages = max(total_pages or 1, 1)
        self.page = clamp_page(self.page, self.total_pages)
        self.error = None
