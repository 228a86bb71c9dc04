"""Catalog REST backend client implementing the CatalogHttpClient port.

Communicates with the catalog backend using httpx. All responses are
JSON bodies in the ``{success, data, message}`` envelope; this adapter
returns them parsed but otherwise untouched and leaves typing to the
service layer.
"""

import logging
from typing import Any

import httpx

from catalog_admin.application.interfaces import CatalogHttpClient, QueryParams
from catalog_admin.domain.exceptions import CatalogApiError

logger = logging.getLogger(__name__)


class CatalogApiClient(CatalogHttpClient):
    """Infrastructure adapter that connects to the catalog backend.

    An injected ``httpx.AsyncClient`` is reused across calls (the app
    lifespan owns one). Without it every call opens and closes its own
    client.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def get(self, path: str, params: QueryParams | None = None) -> Any:
        return await self._request("GET", path, params=params)

    async def post(self, path: str, json: Any = None) -> Any:
        return await self._request("POST", path, json=json)

    async def put(self, path: str, json: Any = None) -> Any:
        return await self._request("PUT", path, json=json)

    async def delete(self, path: str) -> Any:
        return await self._request("DELETE", path)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: QueryParams | None = None,
        json: Any = None,
    ) -> Any:
        url = self._url(path)
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            logger.debug("%s %s params=%s", method, url, dict(params or {}))
            try:
                response = await client.request(
                    method,
                    url,
                    headers=self._get_headers(),
                    params=dict(params) if params else None,
                    json=json,
                )
            except httpx.HTTPError as exc:
                logger.warning("%s %s failed: %s", method, url, exc)
                raise CatalogApiError(status_code=0, message=str(exc) or type(exc).__name__) from exc

            if not response.is_success:
                self._raise_api_error(response)

            if not response.content:
                return {}
            try:
                return response.json()
            except ValueError as exc:
                raise CatalogApiError(
                    status_code=502,
                    message="Malformed response: body is not JSON",
                ) from exc

        finally:
            if should_close:
                await client.aclose()

    def _raise_api_error(self, response: httpx.Response) -> None:
        """Raise CatalogApiError from a non-2xx httpx Response.

        The backend puts a human-readable reason in an optional
        ``message`` field; anything else falls back to the raw body.
        """
        try:
            data = response.json()
            message = data.get("message") if isinstance(data, dict) else None
        except ValueError:
            message = None
        message = message or response.text or response.reason_phrase

        logger.info(
            "Catalog API %s %s -> %d: %s",
            response.request.method,
            response.request.url.path,
            response.status_code,
            message,
        )
        raise CatalogApiError(status_code=response.status_code, message=message)
