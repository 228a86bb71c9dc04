"""Service module for school sets (bundled school supplies)."""

from typing import Any

from catalog_admin.application.schemas import ApiResponse, Page, SchoolSet

from .base import CatalogService, Payload, segment


class SchoolSetService(CatalogService):

    async def get_school_sets(self, page: int = 1, limit: int = 20) -> ApiResponse[Page[SchoolSet]]:
        return await self._list_page(SchoolSet, "/school-sets", page, limit)

    async def get_school_set(self, set_id: str) -> ApiResponse[SchoolSet]:
        return await self._one(SchoolSet, f"/school-sets/{segment(set_id)}")

    async def get_school_set_by_slug(self, slug: str) -> ApiResponse[SchoolSet]:
        return await self._one(SchoolSet, f"/school-sets/slug/{segment(slug)}")

    async def get_school_sets_by_school(self, school_name: str) -> ApiResponse[list[SchoolSet]]:
        return await self._list(SchoolSet, f"/school-sets/school/{segment(school_name)}")

    async def get_school_sets_by_grade(self, grade_level: str) -> ApiResponse[list[SchoolSet]]:
        return await self._list(SchoolSet, f"/school-sets/grade/{segment(grade_level)}")

    async def get_school_sets_by_board(self, board: str) -> ApiResponse[list[SchoolSet]]:
        return await self._list(SchoolSet, f"/school-sets/board/{segment(board)}")

    async def get_school_sets_by_type(self, set_type: str) -> ApiResponse[list[SchoolSet]]:
        return await self._list(SchoolSet, f"/school-sets/type/{segment(set_type)}")

    async def get_school_sets_by_status(self, status: str) -> ApiResponse[list[SchoolSet]]:
        return await self._list(SchoolSet, f"/school-sets/status/{segment(status)}")

    async def get_featured_school_sets(self) -> ApiResponse[list[SchoolSet]]:
        return await self._list(SchoolSet, "/school-sets/featured")

    async def search_school_sets(
        self, search_term: str, page: int = 1, limit: int = 20
    ) -> ApiResponse[Page[SchoolSet]]:
        return await self._list_page(SchoolSet, "/school-sets/search", page, limit, q=search_term)

    async def create_school_set(self, data: Payload) -> ApiResponse[SchoolSet]:
        return await self._create(SchoolSet, "/school-sets", data)

    async def update_school_set(self, set_id: str, data: Payload) -> ApiResponse[SchoolSet]:
        return await self._update(SchoolSet, f"/school-sets/{segment(set_id)}", data)

    async def delete_school_set(self, set_id: str) -> ApiResponse[Any]:
        return await self._delete(f"/school-sets/{segment(set_id)}")
