"""Screens API controller: list state, forms, saves and deletes per screen.

Every request drives a fresh EntityListScreen. The blocking dialogs of
the screen are answered by RequestPrompt: confirmations come from the
request's ``confirm`` flag and alerts are returned in the response.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from pydantic import ValidationError

from catalog_admin.application.forms import EntityForm
from catalog_admin.application.interfaces import UserPrompt
from catalog_admin.application.schemas import (
    CatalogRecord,
    FormResponse,
    ListStateResponse,
    MutationResponse,
    ScreenSummary,
    StatsResponse,
)
from catalog_admin.application.screens import SCREENS, EntityListScreen, get_screen
from catalog_admin.application.services import CatalogServices
from catalog_admin.config import get_settings
from catalog_admin.domain.exceptions import (
    CatalogApiError,
    FormValidationError,
    ScreenOperationError,
    UnknownScreenError,
)
from catalog_admin.infrastructure.dependencies import get_catalog_services

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/screens", tags=["Screens"])

SCREEN_ERRORS = (
    UnknownScreenError,
    ScreenOperationError,
    FormValidationError,
    CatalogApiError,
    ValidationError,
)


class RequestPrompt(UserPrompt):
    """UserPrompt answered from the current HTTP request."""

    def __init__(self, confirmed: bool = False):
        self.confirmed = confirmed
        self.questions: list[str] = []
        self.alerts: list[str] = []

    def confirm(self, message: str) -> bool:
        self.questions.append(message)
        return self.confirmed

    def alert(self, message: str) -> None:
        self.alerts.append(message)


# ── Helpers ──────────────────────────────────────────────────────────


def _http_error(exc: Exception) -> HTTPException:
    """Map an application exception to its HTTP response."""
    if isinstance(exc, UnknownScreenError):
        return HTTPException(status_code=404, detail=str(exc))
    if isinstance(exc, ScreenOperationError):
        return HTTPException(status_code=405, detail=str(exc))
    if isinstance(exc, FormValidationError):
        return HTTPException(status_code=422, detail={"message": str(exc), "errors": exc.errors})
    if isinstance(exc, ValidationError):
        errors = {".".join(str(part) for part in err["loc"]): err["msg"] for err in exc.errors()}
        return HTTPException(status_code=422, detail={"message": "Invalid record", "errors": errors})
    if isinstance(exc, CatalogApiError):
        return HTTPException(status_code=502, detail=exc.message)
    return HTTPException(status_code=500, detail="Internal error")


def _first(messages: list[str], default: str) -> str:
    return messages[0] if messages else default


def _open_screen(
    screen_key: str,
    services: CatalogServices,
    prompt: UserPrompt,
    page_size: int | None = None,
) -> EntityListScreen:
    definition = get_screen(screen_key)
    return EntityListScreen(
        definition,
        services,
        prompt,
        page_size=page_size or get_settings().default_page_size,
    )


def _record(screen: EntityListScreen, values: dict[str, Any], record_id: str) -> CatalogRecord:
    record = screen.definition.record_type.model_validate(values)
    return record.model_copy(update={"id": record_id})


def _state_response(screen: EntityListScreen) -> ListStateResponse:
    state = screen.state
    return ListStateResponse(
        screen=screen.definition.key,
        items=[
            item.model_dump(by_alias=True, exclude_none=True, mode="json")
            for item in state.items
        ],
        page=state.page,
        page_size=state.page_size,
        total_pages=state.total_pages,
        search_term=state.search_term,
        has_previous=state.has_previous,
        has_next=state.has_next,
        error=state.error,
        can_retry=state.can_retry,
    )


def _form_response(screen: EntityListScreen, form: EntityForm) -> FormResponse:
    return FormResponse(
        screen=screen.definition.key,
        mode=form.mode,
        title=form.title,
        record_id=form.record_id,
        data=form.data,
        errors=form.errors,
    )


def _mutation_result(
    screen: EntityListScreen,
    prompt: RequestPrompt,
    form: EntityForm,
    saved: bool,
) -> MutationResponse:
    """Turn a save outcome into a response, or raise for a failed save."""
    if not saved:
        if form.errors:
            raise FormValidationError(form.errors)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"message": _first(prompt.alerts, "Save failed"), "alerts": prompt.alerts},
        )
    return MutationResponse(
        screen=screen.definition.key,
        alerts=prompt.alerts,
        state=_state_response(screen),
    )


# ── Endpoints ────────────────────────────────────────────────────────


@router.get("", response_model=list[ScreenSummary])
async def list_screens() -> list[ScreenSummary]:
    """List every registered screen with its capabilities."""
    return [
        ScreenSummary(
            key=definition.key,
            title=definition.title,
            label=definition.label,
            capabilities=definition.capabilities,
        )
        for definition in SCREENS.values()
    ]


@router.get("/{screen_key}", response_model=ListStateResponse)
async def get_list_state(
    screen_key: str,
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1, le=200),
    q: str = "",
    services: CatalogServices = Depends(get_catalog_services),
) -> ListStateResponse:
    """Load one page of a screen (search results when ``q`` is given)."""
    try:
        screen = _open_screen(screen_key, services, RequestPrompt(), page_size)
    except SCREEN_ERRORS as exc:
        raise _http_error(exc) from exc

    screen.state.page = page
    screen.state.search_term = q.strip()
    if not await screen.load():
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=_state_response(screen).model_dump(),
        )
    return _state_response(screen)


@router.get("/{screen_key}/stats", response_model=StatsResponse)
async def get_stats(
    screen_key: str,
    services: CatalogServices = Depends(get_catalog_services),
) -> StatsResponse:
    """Fetch the screen's stats or summary payload."""
    try:
        screen = _open_screen(screen_key, services, RequestPrompt())
        stats = await screen.load_stats()
    except SCREEN_ERRORS as exc:
        raise _http_error(exc) from exc
    return StatsResponse(screen=screen_key, stats=stats)


@router.get("/{screen_key}/form", response_model=FormResponse)
async def get_create_form(
    screen_key: str,
    services: CatalogServices = Depends(get_catalog_services),
) -> FormResponse:
    """A create-mode form seeded with defaults."""
    try:
        screen = _open_screen(screen_key, services, RequestPrompt())
        form = screen.open_create()
    except SCREEN_ERRORS as exc:
        raise _http_error(exc) from exc
    return _form_response(screen, form)


@router.post("/{screen_key}/form", response_model=FormResponse)
async def get_edit_form(
    screen_key: str,
    record: dict[str, Any] = Body(...),
    services: CatalogServices = Depends(get_catalog_services),
) -> FormResponse:
    """An edit-mode form seeded from the posted record."""
    try:
        screen = _open_screen(screen_key, services, RequestPrompt())
        parsed = screen.definition.record_type.model_validate(record)
        form = screen.open_edit(parsed)
    except SCREEN_ERRORS as exc:
        raise _http_error(exc) from exc
    return _form_response(screen, form)


@router.post(
    "/{screen_key}",
    response_model=MutationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_record(
    screen_key: str,
    values: dict[str, Any] = Body(...),
    services: CatalogServices = Depends(get_catalog_services),
) -> MutationResponse:
    """Fill a create form with the body and save it."""
    prompt = RequestPrompt()
    try:
        screen = _open_screen(screen_key, services, prompt)
        form = screen.open_create()
        form.apply(values)
        saved = await screen.submit_form()
        return _mutation_result(screen, prompt, form, saved)
    except SCREEN_ERRORS as exc:
        raise _http_error(exc) from exc


@router.put("/{screen_key}/{record_id}", response_model=MutationResponse)
async def update_record(
    screen_key: str,
    record_id: str,
    values: dict[str, Any] = Body(...),
    services: CatalogServices = Depends(get_catalog_services),
) -> MutationResponse:
    """Open an edit form on the body's record and save it."""
    prompt = RequestPrompt()
    try:
        screen = _open_screen(screen_key, services, prompt)
        form = screen.open_edit(_record(screen, values, record_id))
        saved = await screen.submit_form()
        return _mutation_result(screen, prompt, form, saved)
    except SCREEN_ERRORS as exc:
        raise _http_error(exc) from exc


@router.delete("/{screen_key}/{record_id}", response_model=MutationResponse)
async def delete_record(
    screen_key: str,
    record_id: str,
    confirm: bool = False,
    name: str | None = None,
    services: CatalogServices = Depends(get_catalog_services),
) -> MutationResponse:
    """Delete a record; requires ``confirm=true``."""
    prompt = RequestPrompt(confirmed=confirm)
    values = {"name": name} if name else {}
    try:
        screen = _open_screen(screen_key, services, prompt)
        deleted = await screen.delete(_record(screen, values, record_id))
    except SCREEN_ERRORS as exc:
        raise _http_error(exc) from exc

    if not deleted:
        if not confirm:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail={"message": "Deletion not confirmed", "questions": prompt.questions},
            )
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"message": _first(prompt.alerts, "Delete failed"), "alerts": prompt.alerts},
        )
    return MutationResponse(
        screen=screen_key,
        alerts=prompt.alerts,
        state=_state_response(screen),
    )


@router.post("/{screen_key}/{record_id}/stock", response_model=MutationResponse)
async def adjust_stock(
    screen_key: str,
    record_id: str,
    values: dict[str, Any] = Body(...),
    services: CatalogServices = Depends(get_catalog_services),
) -> MutationResponse:
    """Apply a stock adjustment (``quantity``, ``operation``) to a record."""
    prompt = RequestPrompt()
    try:
        screen = _open_screen(screen_key, services, prompt)
        form = screen.open_stock_adjustment(_record(screen, {}, record_id))
        form.apply(values)
        saved = await screen.adjust_stock(form)
        return _mutation_result(screen, prompt, form, saved)
    except SCREEN_ERRORS as exc:
        raise _http_error(exc) from exc
