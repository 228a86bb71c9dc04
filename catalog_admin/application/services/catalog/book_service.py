"""Service module for authors, publishers and book series."""

from typing import Any

from catalog_admin.application.schemas import (
    ApiResponse,
    Author,
    BookSeries,
    Page,
    Publisher,
    Stats,
)

from .base import CatalogService, Payload, segment


class BookService(CatalogService):
    """Thin async wrappers over the ``/authors``, ``/publishers`` and ``/book-series`` routes."""

    # ── Authors ──────────────────────────────────────────────────────

    async def get_authors(self, page: int = 1, limit: int = 20) -> ApiResponse[Page[Author]]:
        return await self._list_page(Author, "/authors", page, limit)

    async def get_author_stats(self) -> ApiResponse[Stats]:
        return await self._stats("/authors/stats")

    async def get_active_authors(self) -> ApiResponse[list[Author]]:
        return await self._list(Author, "/authors/active")

    async def get_top_authors(self, limit: int = 10) -> ApiResponse[list[Author]]:
        return await self._list(Author, "/authors/top", {"limit": limit})

    async def search_authors(self, search_term: str) -> ApiResponse[list[Author]]:
        return await self._list(Author, "/authors/search", {"q": search_term})

    async def get_authors_by_genre(self, genre: str) -> ApiResponse[list[Author]]:
        return await self._list(Author, f"/authors/genre/{segment(genre)}")

    async def get_author_by_slug(self, slug: str) -> ApiResponse[Author]:
        return await self._one(Author, f"/authors/slug/{segment(slug)}")

    async def create_author(self, data: Payload) -> ApiResponse[Author]:
        return await self._create(Author, "/authors", data)

    async def update_author(self, author_id: str, data: Payload) -> ApiResponse[Author]:
        return await self._update(Author, f"/authors/{segment(author_id)}", data)

    async def delete_author(self, author_id: str) -> ApiResponse[Any]:
        return await self._delete(f"/authors/{segment(author_id)}")

    # ── Publishers ───────────────────────────────────────────────────

    async def get_publishers(self, page: int = 1, limit: int = 20) -> ApiResponse[Page[Publisher]]:
        return await self._list_page(Publisher, "/publishers", page, limit)

    async def get_publisher_stats(self) -> ApiResponse[Stats]:
        return await self._stats("/publishers/stats")

    async def get_active_publishers(self) -> ApiResponse[list[Publisher]]:
        return await self._list(Publisher, "/publishers/active")

    async def get_top_publishers(self, limit: int = 10) -> ApiResponse[list[Publisher]]:
        return await self._list(Publisher, "/publishers/top", {"limit": limit})

    async def search_publishers(self, search_term: str) -> ApiResponse[list[Publisher]]:
        return await self._list(Publisher, "/publishers/search", {"q": search_term})

    async def get_publishers_by_specialty(self, specialty: str) -> ApiResponse[list[Publisher]]:
        return await self._list(Publisher, f"/publishers/specialty/{segment(specialty)}")

    async def get_publisher_by_slug(self, slug: str) -> ApiResponse[Publisher]:
        return await self._one(Publisher, f"/publishers/slug/{segment(slug)}")

    async def create_publisher(self, data: Payload) -> ApiResponse[Publisher]:
        return await self._create(Publisher, "/publishers", data)

    async def update_publisher(self, publisher_id: str, data: Payload) -> ApiResponse[Publisher]:
        return await self._update(Publisher, f"/publishers/{segment(publisher_id)}", data)

    async def delete_publisher(self, publisher_id: str) -> ApiResponse[Any]:
        return await self._delete(f"/publishers/{segment(publisher_id)}")

    # ── Book series ──────────────────────────────────────────────────

    async def get_book_series(self, page: int = 1, limit: int = 20) -> ApiResponse[Page[BookSeries]]:
        return await self._list_page(BookSeries, "/book-series", page, limit)

    async def get_series_stats(self) -> ApiResponse[Stats]:
        return await self._stats("/book-series/stats")

    async def get_active_series(self) -> ApiResponse[list[BookSeries]]:
        return await self._list(BookSeries, "/book-series/active")

    async def get_ongoing_series(self) -> ApiResponse[list[BookSeries]]:
        return await self._list(BookSeries, "/book-series/ongoing")

    async def get_top_series(self, limit: int = 10) -> ApiResponse[list[BookSeries]]:
        return await self._list(BookSeries, "/book-series/top", {"limit": limit})

    async def search_series(self, search_term: str) -> ApiResponse[list[BookSeries]]:
        return await self._list(BookSeries, "/book-series/search", {"q": search_term})

    async def get_series_by_author(self, author_id: str) -> ApiResponse[list[BookSeries]]:
        return await self._list(BookSeries, f"/book-series/author/{segment(author_id)}")

    async def get_series_by_publisher(self, publisher_id: str) -> ApiResponse[list[BookSeries]]:
        return await self._list(BookSeries, f"/book-series/publisher/{segment(publisher_id)}")

    async def get_series_by_genre(self, genre: str) -> ApiResponse[list[BookSeries]]:
        return await self._list(BookSeries, f"/book-series/genre/{segment(genre)}")

    async def get_series_by_age_group(self, age_group: str) -> ApiResponse[list[BookSeries]]:
        return await self._list(BookSeries, f"/book-series/age-group/{segment(age_group)}")

    async def get_series_by_slug(self, slug: str) -> ApiResponse[BookSeries]:
        return await self._one(BookSeries, f"/book-series/slug/{segment(slug)}")

    async def create_book_series(self, data: Payload) -> ApiResponse[BookSeries]:
        return await self._create(BookSeries, "/book-series", data)

    async def update_book_series(self, series_id: str, data: Payload) -> ApiResponse[BookSeries]:
        return await self._update(BookSeries, f"/book-series/{segment(series_id)}", data)

    async def add_book_to_series(
        self, series_id: str, book_id: str, order: int, title: str
    ) -> ApiResponse[BookSeries]:
        return await self._action(
            BookSeries,
            "PUT",
            f"/book-series/{segment(series_id)}/add-book",
            {"bookId": book_id, "order": order, "title": title},
        )

    async def remove_book_from_series(self, series_id: str, book_id: str) -> ApiResponse[BookSeries]:
        return await self._action(
            BookSeries,
            "PUT",
            f"/book-series/{segment(series_id)}/remove-book",
            {"bookId": book_id},
        )

    async def delete_book_series(self, series_id: str) -> ApiResponse[Any]:
        return await self._delete(f"/book-series/{segment(series_id)}")
