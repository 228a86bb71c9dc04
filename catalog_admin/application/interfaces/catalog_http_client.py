"""Abstract HTTP port for the catalog REST backend."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

QueryParams = Mapping[str, str | int | float | bool]


class CatalogHttpClient(ABC):
    """Port for talking to the catalog backend, implemented in the infrastructure layer.

    Paths are relative to the backend's API root (``/authors``,
    ``/book-series/slug/x``). Every method returns the parsed JSON body
    and raises ``CatalogApiError`` when the backend answers with a
    non-2xx status or cannot be reached.
    """

    @abstractmethod
    async def get(self, path: str, params: QueryParams | None = None) -> Any:
        ...

    @abstractmethod
    async def post(self, path: str, json: Any = None) -> Any:
        ...

    @abstractmethod
    async def put(self, path: str, json: Any = None) -> Any:
        ...

    @abstractmethod
    async def delete(self, path: str) -> Any:
        ...
