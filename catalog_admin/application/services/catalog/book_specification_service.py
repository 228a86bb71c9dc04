"""Service module for book specifications."""

from typing import Any

from catalog_admin.application.schemas import ApiResponse, BookSpecification, Page

from .base import CatalogService, Payload, segment


class BookSpecificationService(CatalogService):

    async def get_book_specifications(
        self, page: int = 1, limit: int = 20
    ) -> ApiResponse[Page[BookSpecification]]:
        return await self._list_page(BookSpecification, "/book-specifications", page, limit)

    async def get_book_specification(self, spec_id: str) -> ApiResponse[BookSpecification]:
        return await self._one(BookSpecification, f"/book-specifications/{segment(spec_id)}")

    async def get_by_product_id(self, product_id: str) -> ApiResponse[BookSpecification]:
        return await self._one(
            BookSpecification, f"/book-specifications/product/{segment(product_id)}"
        )

    async def get_by_isbn(self, isbn: str) -> ApiResponse[BookSpecification]:
        return await self._one(BookSpecification, f"/book-specifications/isbn/{segment(isbn)}")

    async def search_book_specifications(
        self, query: str, page: int = 1, limit: int = 20
    ) -> ApiResponse[Page[BookSpecification]]:
        return await self._list_page(
            BookSpecification, "/book-specifications/search", page, limit, q=query
        )

    async def get_by_subject(self, subject: str) -> ApiResponse[list[BookSpecification]]:
        return await self._list(
            BookSpecification, f"/book-specifications/subject/{segment(subject)}"
        )

    async def get_by_grade(self, grade_level: str) -> ApiResponse[list[BookSpecification]]:
        return await self._list(
            BookSpecification, f"/book-specifications/grade/{segment(grade_level)}"
        )

    async def get_by_board(self, board: str) -> ApiResponse[list[BookSpecification]]:
        return await self._list(BookSpecification, f"/book-specifications/board/{segment(board)}")

    async def create_book_specification(self, data: Payload) -> ApiResponse[BookSpecification]:
        return await self._create(BookSpecification, "/book-specifications", data)

    async def update_book_specification(
        self, spec_id: str, data: Payload
    ) -> ApiResponse[BookSpecification]:
        return await self._update(
            BookSpecification, f"/book-specifications/{segment(spec_id)}", data
        )

    async def delete_book_specification(self, spec_id: str) -> ApiResponse[Any]:
        return await self._delete(f"/book-specifications/{segment(spec_id)}")
