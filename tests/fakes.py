"""In-memory fakes of the application ports, shared by the test modules."""

from typing import Any

from catalog_admin.application.interfaces import CatalogHttpClient, QueryParams, UserPrompt
from catalog_admin.domain.exceptions import CatalogApiError

OK: dict[str, Any] = {"success": True, "data": None}


def page_body(items: list[dict], total_pages: int = 1, page: int = 1) -> dict:
    """A paginated ``ApiResponse`` body as the backend sends it."""
    return {
        "success": True,
        "data": {"data": items, "totalPages": total_pages, "page": page, "total": len(items)},
    }


class FakeCatalogClient(CatalogHttpClient):
    """Answers requests from a ``(method, path)`` table and records every call.

    A table entry may be a body, an exception to raise, or a callable that
    receives the query params / JSON body and returns the body.
    """

    def __init__(self, responses: dict[tuple[str, str], Any] | None = None):
        self.responses: dict[tuple[str, str], Any] = dict(responses or {})
        self.calls: list[tuple[str, str, Any]] = []

    def respond(self, method: str, path: str, body: Any) -> None:
        self.responses[(method, path)] = body

    def fail(self, method: str, path: str, status_code: int = 500, message: str = "boom") -> None:
        self.responses[(method, path)] = CatalogApiError(status_code, message)

    def count(self, method: str, path: str) -> int:
        return sum(1 for m, p, _ in self.calls if m == method and p == path)

    def last(self, method: str, path: str) -> Any:
        matches = [payload for m, p, payload in self.calls if m == method and p == path]
        return matches[-1]

    async def get(self, path: str, params: QueryParams | None = None) -> Any:
        return self._reply("GET", path, dict(params or {}))

    async def post(self, path: str, json: Any = None) -> Any:
        return self._reply("POST", path, json)

    async def put(self, path: str, json: Any = None) -> Any:
        return self._reply("PUT", path, json)

    async def delete(self, path: str) -> Any:
        return self._reply("DELETE", path, None)

    def _reply(self, method: str, path: str, payload: Any) -> Any:
        self.calls.append((method, path, payload))
        result = self.responses.get((method, path), OK)
        if isinstance(result, Exception):
            raise result
        if callable(result):
            return result(payload)
        return result


class FakePrompt(UserPrompt):
    """Answers every confirmation with ``answer`` and records alerts."""

    def __init__(self, answer: bool = True):
        self.answer = answer
        self.questions: list[str] = []
        self.alerts: list[str] = []

    def confirm(self, message: str) -> bool:
        self.questions.append(message)
        return self.answer

    def alert(self, message: str) -> None:
        self.alerts.append(message)
