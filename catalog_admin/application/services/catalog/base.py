"""Shared plumbing for the catalog service modules."""

import logging
from collections.abc import Mapping
from typing import Any, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from catalog_admin.application.interfaces import CatalogHttpClient
from catalog_admin.application.schemas import ApiResponse, CatalogRecord, Page, Stats
from catalog_admin.domain.exceptions import CatalogApiError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)
RecordT = TypeVar("RecordT", bound=CatalogRecord)

Payload = BaseModel | Mapping[str, Any]


def segment(value: object) -> str:
    """Percent-encode a value for use as a single path segment.

    Whole floats are written without a fraction (``4.0`` -> ``4``).
    """
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return quote(str(value), safe="")


def serialize(model: type[BaseModel], data: Payload) -> dict[str, Any]:
    """Dump a write payload with wire (camelCase) keys.

    Mappings may use Python field names or wire aliases. Unset and
    ``None`` values are left out so the backend keeps its own defaults.
    """
    if not isinstance(data, BaseModel):
        data = model.model_validate(dict(data))
    return data.model_dump(by_alias=True, exclude_unset=True, exclude_none=True, mode="json")


class CatalogService:
    """Base for service modules. One async method per backend operation."""

    def __init__(self, client: CatalogHttpClient):
        self._client = client

    @staticmethod
    def _parse(response_type: type[ModelT], body: Any) -> ModelT:
        try:
            return response_type.model_validate(body)
        except ValidationError as exc:
            logger.warning("Unexpected %s body: %s", response_type.__name__, exc)
            raise CatalogApiError(
                status_code=502,
                message=f"Malformed response: {exc.error_count()} validation error(s)",
            ) from exc

    async def _get(
        self, response_type: type[ModelT], path: str, params: Mapping[str, Any] | None = None
    ) -> ModelT:
        body = await self._client.get(path, params=params)
        return self._parse(response_type, body)

    async def _list_page(
        self, record_type: type[RecordT], path: str, page: int, limit: int, **params: Any
    ) -> ApiResponse[Page[RecordT]]:
        query = {**params, "page": page, "limit": limit}
        return await self._get(ApiResponse[Page[record_type]], path, query)

    async def _list(
        self, record_type: type[RecordT], path: str, params: Mapping[str, Any] | None = None
    ) -> ApiResponse[list[RecordT]]:
        return await self._get(ApiResponse[list[record_type]], path, params)

    async def _one(
        self, record_type: type[RecordT], path: str, params: Mapping[str, Any] | None = None
    ) -> ApiResponse[RecordT]:
        return await self._get(ApiResponse[record_type], path, params)

    async def _stats(self, path: str) -> ApiResponse[Stats]:
        return await self._get(ApiResponse[Stats], path)

    async def _create(
        self, record_type: type[RecordT], path: str, data: Payload
    ) -> ApiResponse[RecordT]:
        body = await self._client.post(path, json=serialize(record_type, data))
        return self._parse(ApiResponse[record_type], body)

    async def _update(
        self, record_type: type[RecordT], path: str, data: Payload
    ) -> ApiResponse[RecordT]:
        body = await self._client.put(path, json=serialize(record_type, data))
        return self._parse(ApiResponse[record_type], body)

    async def _action(
        self,
        record_type: type[RecordT],
        method: str,
        path: str,
        json: Any = None,
    ) -> ApiResponse[RecordT]:
        """PUT/POST a state transition that answers with the updated record."""
        send = self._client.put if method == "PUT" else self._client.post
        body = await send(path, json=json)
        return self._parse(ApiResponse[record_type], body)

    async def _delete(self, path: str) -> ApiResponse[Any]:
        body = await self._client.delete(path)
        return self._parse(ApiResponse[Any], body)
