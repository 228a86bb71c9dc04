"""Application workflow behind one paginated list screen.

Loads pages (or search results), opens create/edit forms, submits them
and deletes records after confirmation. Fetch failures end up in the
screen state where they can be retried; mutation failures are logged and
reported through a blocking alert.
"""

import logging
from typing import Any

from catalog_admin.application.forms import EntityForm
from catalog_admin.application.interfaces import UserPrompt
from catalog_admin.application.schemas import ApiResponse, CatalogRecord, Page
from catalog_admin.application.services import CatalogServices
from catalog_admin.domain.entities import ListScreenState, clamp_page
from catalog_admin.domain.exceptions import CatalogApiError, ScreenOperationError

from .definitions import ScreenDefinition

logger = logging.getLogger(__name__)


def _unpack(data: Any) -> tuple[list[Any], int]:
    """Items and page count from a paged or a plain list response."""
    if isinstance(data, Page):
        return data.data, data.total_pages
    if isinstance(data, list):
        return data, 1
    return [], 1


class EntityListScreen:
    """State and actions of one admin list screen."""

    def __init__(
        self,
        definition: ScreenDefinition,
        services: CatalogServices,
        prompt: UserPrompt,
        page_size: int = 20,
    ):
        self.definition = definition
        self._services = services
        self._prompt = prompt
        self.state = ListScreenState(page_size=page_size)
        self.form: EntityForm | None = None

    # ── Loading ──────────────────────────────────────────────────────

    async def load(self) -> bool:
        """Fetch the current page (or search results) into the state.

        A page past the end is clamped to the last page, which is then
        fetched in its place.
        """
        requested = self.state.page
        if not await self._fetch():
            return False
        if self.state.page != requested:
            logger.debug(
                "Page %d of %s is out of range, fetching page %d",
                requested,
                self.definition.plural,
                self.state.page,
            )
            return await self._fetch()
        return True

    async def _fetch(self) -> bool:
        d = self.definition
        state = self.state
        state.is_loading = True
        try:
            if state.search_term and d.search is not None:
                response = await d.search(
                    self._services, state.search_term, state.page, state.page_size
                )
            else:
                response = await d.list_page(self._services, state.page, state.page_size)
        except CatalogApiError as exc:
            logger.warning("Loading %s failed: %s", d.plural, exc)
            state.error = self._load_error(exc.message if exc.status_code else None)
            return False
        finally:
            state.is_loading = False

        if not response.success:
            logger.warning("Loading %s returned success=false: %s", d.plural, response.message)
            state.error = self._load_error(response.message)
            return False

        items, total_pages = _unpack(response.data)
        state.replace_items(items, total_pages)
        logger.debug(
            "Loaded %d %s (page %d/%d)", len(items), d.plural, state.page, state.total_pages
        )
        return True

    async def retry(self) -> bool:
        return await self.load()

    async def go_to_page(self, page: int) -> bool:
        """Move to ``page`` (clamped); fetches only when the page changes."""
        target = clamp_page(page, self.state.total_pages)
        if target == self.state.page:
            return False
        self.state.page = target
        await self.load()
        return True

    async def next_page(self) -> bool:
        return await self.go_to_page(self.state.page + 1)

    async def previous_page(self) -> bool:
        return await self.go_to_page(self.state.page - 1)

    async def search(self, term: str) -> bool:
        self.state.search_term = term.strip()
        self.state.page = 1
        return await self.load()

    async def load_stats(self) -> Any:
        stats = self._require("stats")
        response = await stats(self._services)
        return response.data

    # ── Forms ────────────────────────────────────────────────────────

    def open_create(self) -> EntityForm:
        self._require("create")
        self.form = self._form_class()()
        return self.form

    def open_edit(self, record: CatalogRecord) -> EntityForm:
        self._require("update")
        self.form = self._form_class()(record)
        return self.form

    def close_form(self) -> None:
        self.form = None

    async def submit_form(self) -> bool:
        """Validate and save the open form, then close it and reload.

        Returns False when validation fails or the backend rejects the
        save; in both cases the form stays open.
        """
        form = self.form
        if form is None:
            raise RuntimeError(f"No form is open on the {self.definition.key} screen")
        d = self.definition

        async def save(payload: dict[str, Any]) -> ApiResponse[Any]:
            if form.is_edit:
                return await self._require("update")(self._services, form.record_id, payload)
            return await self._require("create")(self._services, payload)

        try:
            saved = await form.submit(save)
        except CatalogApiError:
            logger.exception("Error saving %s", d.label)
            self._prompt.alert(f"Failed to save {d.label}")
            return False
        if not saved:
            return False

        logger.info("Saved %s (%s)", d.label, form.mode)
        self.form = None
        await self.load()
        return True

    def open_stock_adjustment(self, record: CatalogRecord) -> EntityForm:
        self._require("stock")
        form_class = self.definition.stock_form_class
        if form_class is None:
            raise ScreenOperationError(self.definition.key, "stock")
        return form_class(record)

    async def adjust_stock(self, form: EntityForm) -> bool:
        """Submit a stock adjustment form for the record it was opened on."""
        stock = self._require("stock")
        d = self.definition
        try:
            saved = await form.submit(
                lambda payload: stock(self._services, form.record_id, payload)
            )
        except CatalogApiError:
            logger.exception("Error updating stock for %s", form.record_id)
            self._prompt.alert("Failed to update stock")
            return False
        if saved:
            logger.info("Adjusted stock of %s %s", d.label, form.record_id)
            await self.load()
        return saved

    # ── Deleting ─────────────────────────────────────────────────────

    async def delete(self, record: CatalogRecord) -> bool:
        """Delete after confirmation; the list is refetched on success."""
        delete = self._require("delete")
        d = self.definition
        if not self._prompt.confirm(f"Are you sure you want to delete {record.display_name}?"):
            return False
        try:
            await delete(self._services, record.id)
        except CatalogApiError:
            logger.exception("Error deleting %s %s", d.label, record.id)
            self._prompt.alert(f"Failed to delete {d.label}")
            return False

        logger.info("Deleted %s %s", d.label, record.id)
        await self.load()
        return True

    # ── Internals ────────────────────────────────────────────────────

    def _require(self, operation: str) -> Any:
        if not self.definition.supports(operation):
            raise ScreenOperationError(self.definition.key, operation)
        return getattr(self.definition, operation)

    def _form_class(self) -> type[EntityForm]:
        if self.definition.form_class is None:
            raise ScreenOperationError(self.definition.key, "form")
        return self.definition.form_class

    def _load_error(self, message: str | None) -> str:
        return message or f"Failed to load {self.definition.plural}"
