"""Service module for school uniforms."""

from typing import Any

from catalog_admin.application.schemas import ApiResponse, Page, Uniform

from .base import CatalogService, Payload, segment


class UniformService(CatalogService):

    async def get_uniforms(self, page: int = 1, limit: int = 20) -> ApiResponse[Page[Uniform]]:
        return await self._list_page(Uniform, "/uniforms", page, limit)

    async def get_uniform(self, uniform_id: str) -> ApiResponse[Uniform]:
        return await self._one(Uniform, f"/uniforms/{segment(uniform_id)}")

    async def get_uniform_by_slug(self, slug: str) -> ApiResponse[Uniform]:
        return await self._one(Uniform, f"/uniforms/slug/{segment(slug)}")

    async def get_uniforms_by_school(self, school_name: str) -> ApiResponse[list[Uniform]]:
        return await self._list(Uniform, f"/uniforms/school/{segment(school_name)}")

    async def get_uniforms_by_grade(self, grade_level: str) -> ApiResponse[list[Uniform]]:
        return await self._list(Uniform, f"/uniforms/grade/{segment(grade_level)}")

    async def get_uniforms_by_type(self, uniform_type: str) -> ApiResponse[list[Uniform]]:
        return await self._list(Uniform, f"/uniforms/type/{segment(uniform_type)}")

    async def get_uniforms_by_gender(self, gender: str) -> ApiResponse[list[Uniform]]:
        return await self._list(Uniform, f"/uniforms/gender/{segment(gender)}")

    async def get_active_uniforms(self) -> ApiResponse[list[Uniform]]:
        return await self._list(Uniform, "/uniforms/active")

    async def search_uniforms(
        self, search_term: str, page: int = 1, limit: int = 20
    ) -> ApiResponse[Page[Uniform]]:
        return await self._list_page(Uniform, "/uniforms/search", page, limit, q=search_term)

    async def create_uniform(self, data: Payload) -> ApiResponse[Uniform]:
        return await self._create(Uniform, "/uniforms", data)

    async def update_uniform(self, uniform_id: str, data: Payload) -> ApiResponse[Uniform]:
        return await self._update(Uniform, f"/uniforms/{segment(uniform_id)}", data)

    async def delete_uniform(self, uniform_id: str) -> ApiResponse[Any]:
        return await self._delete(f"/uniforms/{segment(uniform_id)}")
