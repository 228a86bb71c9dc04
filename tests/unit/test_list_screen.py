"""Unit tests for the list screen workflow and its screen registry."""

import pytest

from catalog_admin.application.schemas import Author, InventoryItem
from catalog_admin.application.screens import SCREENS, EntityListScreen, get_screen
from catalog_admin.application.services import CatalogServices
from catalog_admin.domain.entities import ListScreenState, clamp_page
from catalog_admin.domain.exceptions import ScreenOperationError, UnknownScreenError
from tests.fakes import FakeCatalogClient, FakePrompt, page_body


# ── Helpers ──

BOND = {"_id": "a1", "name": "Ruskin Bond"}
NARAYAN = {"_id": "a2", "name": "R. K. Narayan"}


def _screen(
    key: str,
    client: FakeCatalogClient,
    prompt: FakePrompt | None = None,
    page_size: int = 20,
) -> EntityListScreen:
    return EntityListScreen(
        get_screen(key),
        CatalogServices.from_client(client),
        prompt or FakePrompt(),
        page_size=page_size,
    )


def _authors_client(total_pages: int = 1) -> FakeCatalogClient:
    client = FakeCatalogClient()
    client.respond("GET", "/authors", page_body([BOND, NARAYAN], total_pages=total_pages))
    return client


# ── Loading ──


@pytest.mark.asyncio
async def test_load_fills_state():
    client = _authors_client(total_pages=2)
    screen = _screen("authors", client, page_size=2)

    assert await screen.load() is True

    state = screen.state
    assert [item.name for item in state.items] == ["Ruskin Bond", "R. K. Narayan"]
    assert state.total_pages == 2
    assert state.has_next is True
    assert state.has_previous is False
    assert state.error is None
    assert state.is_loading is False
    assert client.last("GET", "/authors") == {"page": 1, "limit": 2}


@pytest.mark.asyncio
async def test_load_failure_uses_backend_message():
    client = FakeCatalogClient()
    client.fail("GET", "/authors", status_code=500, message="Database unavailable")
    screen = _screen("authors", client)

    assert await screen.load() is False

    assert screen.state.error == "Database unavailable"
    assert screen.state.can_retry is True
    assert screen.state.is_loading is False


@pytest.mark.asyncio
async def test_transport_failure_uses_generic_message():
    client = FakeCatalogClient()
    client.fail("GET", "/publishers", status_code=0, message="connection refused")
    screen = _screen("publishers", client)

    await screen.load()

    assert screen.state.error == "Failed to load publishers"


@pytest.mark.asyncio
async def test_unsuccessful_response_is_a_load_error():
    client = FakeCatalogClient()
    client.respond("GET", "/gift-cards", {"success": False, "message": "Not allowed"})
    screen = _screen("gift-cards", client)

    assert await screen.load() is False
    assert screen.state.error == "Not allowed"

    client.respond("GET", "/gift-cards", {"success": False})
    await screen.load()
    assert screen.state.error == "Failed to load gift cards"


@pytest.mark.asyncio
async def test_retry_clears_error():
    client = FakeCatalogClient()
    client.fail("GET", "/authors")
    screen = _screen("authors", client)
    await screen.load()

    client.respond("GET", "/authors", page_body([BOND]))
    assert await screen.retry() is True

    assert screen.state.error is None
    assert len(screen.state.items) == 1


@pytest.mark.asyncio
async def test_failed_load_keeps_previous_items():
    client = _authors_client()
    screen = _screen("authors", client)
    await screen.load()

    client.fail("GET", "/authors")
    await screen.load()

    assert len(screen.state.items) == 2
    assert screen.state.error == "boom"


# ── Pagination ──


@pytest.mark.asyncio
async def test_go_to_page_clamps_and_fetches_on_change():
    client = _authors_client(total_pages=3)
    screen = _screen("authors", client)
    await screen.load()

    assert await screen.go_to_page(7) is True
    assert screen.state.page == 3
    assert client.last("GET", "/authors")["page"] == 3

    assert await screen.go_to_page(3) is False
    assert await screen.next_page() is False
    assert client.count("GET", "/authors") == 2

    assert await screen.previous_page() is True
    assert screen.state.page == 2
    assert client.count("GET", "/authors") == 3


@pytest.mark.asyncio
async def test_previous_page_on_first_page_does_nothing():
    client = _authors_client()
    screen = _screen("authors", client)
    await screen.load()

    assert await screen.previous_page() is False
    assert client.count("GET", "/authors") == 1


# ── Search ──


@pytest.mark.asyncio
async def test_search_uses_search_route_and_resets_page():
    client = _authors_client(total_pages=3)
    client.respond("GET", "/authors/search", {"success": True, "data": [BOND]})
    screen = _screen("authors", client)
    await screen.load()
    await screen.go_to_page(2)

    assert await screen.search("  bond ") is True

    assert client.last("GET", "/authors/search") == {"q": "bond"}
    assert screen.state.search_term == "bond"
    assert screen.state.page == 1
    assert screen.state.total_pages == 1
    assert [item.id for item in screen.state.items] == ["a1"]


@pytest.mark.asyncio
async def test_clearing_search_goes_back_to_list():
    client = _authors_client()
    client.respond("GET", "/authors/search", {"success": True, "data": [BOND]})
    screen = _screen("authors", client)
    await screen.search("bond")

    await screen.search("")

    assert client.count("GET", "/authors/search") == 1
    assert client.count("GET", "/authors") == 1
    assert len(screen.state.items) == 2


@pytest.mark.asyncio
async def test_paged_search_sends_page():
    client = FakeCatalogClient()
    client.respond("GET", "/uniforms/search", page_body([{"_id": "u1", "name": "Blazer"}], 2))
    screen = _screen("uniforms", client, page_size=10)

    await screen.search("blazer")

    assert client.last("GET", "/uniforms/search") == {"q": "blazer", "page": 1, "limit": 10}
    assert screen.state.total_pages == 2


@pytest.mark.asyncio
async def test_screen_without_search_lists_instead():
    client = FakeCatalogClient()
    client.respond("GET", "/warehouses", page_body([{"_id": "w1", "name": "Main"}]))
    screen = _screen("warehouses", client)

    await screen.search("main")

    assert client.count("GET", "/warehouses") == 1
    assert screen.state.items[0].name == "Main"


# ── Stats ──


@pytest.mark.asyncio
async def test_load_stats_returns_payload():
    client = FakeCatalogClient()
    client.respond("GET", "/authors/stats", {"success": True, "data": {"total": 2}})

    assert await _screen("authors", client).load_stats() == {"total": 2}


@pytest.mark.asyncio
async def test_stats_not_offered():
    with pytest.raises(ScreenOperationError):
        await _screen("warehouses", FakeCatalogClient()).load_stats()


# ── Forms ──


@pytest.mark.asyncio
async def test_create_submit_posts_and_reloads():
    client = _authors_client()
    client.respond("POST", "/authors", {"success": True, "data": BOND})
    screen = _screen("authors", client)

    form = screen.open_create()
    form.set_field("name", "Ruskin Bond")
    form.generate_slug()

    assert await screen.submit_form() is True

    body = client.last("POST", "/authors")
    assert body["name"] == "Ruskin Bond"
    assert body["slug"] == "ruskin-bond"
    assert body["isActive"] is True
    assert "socialMedia" not in body
    assert screen.form is None
    assert client.count("GET", "/authors") == 1


@pytest.mark.asyncio
async def test_edit_submit_puts_to_record():
    client = _authors_client()
    client.respond("PUT", "/authors/a1", {"success": True, "data": BOND})
    screen = _screen("authors", client)

    form = screen.open_edit(Author.model_validate(BOND))
    form.set_field("nationality", "Indian")

    assert await screen.submit_form() is True
    assert client.last("PUT", "/authors/a1")["nationality"] == "Indian"


@pytest.mark.asyncio
async def test_invalid_form_makes_no_request():
    client = _authors_client()
    screen = _screen("authors", client)
    screen.open_create()

    assert await screen.submit_form() is False

    assert client.count("POST", "/authors") == 0
    assert screen.form is not None
    assert screen.form.errors == {"name": "Author name is required"}


@pytest.mark.asyncio
async def test_failed_save_alerts_and_keeps_form_open():
    client = _authors_client()
    client.fail("POST", "/authors", status_code=400, message="Slug already exists")
    prompt = FakePrompt()
    screen = _screen("authors", client, prompt)
    screen.open_create().set_field("name", "Ruskin Bond")

    assert await screen.submit_form() is False

    assert prompt.alerts == ["Failed to save author"]
    assert screen.form is not None
    assert client.count("GET", "/authors") == 0


@pytest.mark.asyncio
async def test_submit_without_open_form():
    with pytest.raises(RuntimeError):
        await _screen("authors", FakeCatalogClient()).submit_form()


def test_close_form():
    screen = _screen("authors", FakeCatalogClient())
    screen.open_create()
    screen.close_form()

    assert screen.form is None


def test_inventory_has_no_create_form():
    screen = _screen("inventory", FakeCatalogClient())

    with pytest.raises(ScreenOperationError):
        screen.open_create()
    with pytest.raises(ScreenOperationError):
        screen.open_edit(InventoryItem(id="i1"))


# ── Stock ──


@pytest.mark.asyncio
async def test_adjust_stock_posts_movement_and_reloads():
    client = FakeCatalogClient()
    client.respond("GET", "/inventory", page_body([{"_id": "i1", "currentStock": 5}]))
    client.respond("POST", "/inventory/i1/stock", {"success": True, "data": {"_id": "i1"}})
    screen = _screen("inventory", client)

    form = screen.open_stock_adjustment(InventoryItem(id="i1"))
    form.apply({"quantity": 5, "operation": "add"})

    assert await screen.adjust_stock(form) is True
    assert client.last("POST", "/inventory/i1/stock") == {"quantity": 5, "operation": "add"}
    assert client.count("GET", "/inventory") == 1


@pytest.mark.asyncio
async def test_failed_stock_adjustment_alerts():
    client = FakeCatalogClient()
    client.fail("POST", "/inventory/i1/stock", status_code=400, message="Insufficient stock")
    prompt = FakePrompt()
    screen = _screen("inventory", client, prompt)

    form = screen.open_stock_adjustment(InventoryItem(id="i1"))
    form.apply({"quantity": 50, "operation": "subtract"})

    assert await screen.adjust_stock(form) is False
    assert prompt.alerts == ["Failed to update stock"]


def test_stock_adjustment_only_on_inventory():
    with pytest.raises(ScreenOperationError):
        _screen("authors", FakeCatalogClient()).open_stock_adjustment(Author(id="a1"))


# ── Deleting ──


@pytest.mark.asyncio
async def test_confirmed_delete_calls_once_and_refetches():
    client = _authors_client()
    prompt = FakePrompt(answer=True)
    screen = _screen("authors", client, prompt)

    assert await screen.delete(Author.model_validate(BOND)) is True

    assert prompt.questions == ["Are you sure you want to delete Ruskin Bond?"]
    assert client.count("DELETE", "/authors/a1") == 1
    assert client.count("GET", "/authors") == 1


@pytest.mark.asyncio
async def test_declined_delete_makes_no_request():
    client = _authors_client()
    screen = _screen("authors", client, FakePrompt(answer=False))

    assert await screen.delete(Author.model_validate(BOND)) is False

    assert client.count("DELETE", "/authors/a1") == 0
    assert client.count("GET", "/authors") == 0


@pytest.mark.asyncio
async def test_failed_delete_alerts_without_refetch():
    client = _authors_client()
    client.fail("DELETE", "/authors/a1", status_code=409, message="Author has books")
    prompt = FakePrompt()
    screen = _screen("authors", client, prompt)

    assert await screen.delete(Author.model_validate(BOND)) is False

    assert prompt.alerts == ["Failed to delete author"]
    assert client.count("GET", "/authors") == 0


@pytest.mark.asyncio
async def test_delete_prompt_falls_back_to_code():
    client = FakeCatalogClient()
    prompt = FakePrompt(answer=False)
    screen = _screen("gift-cards", client, prompt)

    await screen.delete(get_screen("gift-cards").record_type(id="g1", code="GC-42"))

    assert prompt.questions == ["Are you sure you want to delete GC-42?"]


# ── Registry ──


def test_registry_lists_every_screen():
    assert sorted(SCREENS) == [
        "authors",
        "book-series",
        "book-specifications",
        "gift-cards",
        "gift-services",
        "inventory",
        "pricing-rules",
        "product-kinds",
        "publishers",
        "purchase-orders",
        "school-sets",
        "suppliers",
        "uniforms",
        "warehouses",
    ]


def test_capabilities():
    assert get_screen("authors").capabilities == [
        "list",
        "search",
        "stats",
        "create",
        "update",
        "delete",
    ]
    assert get_screen("inventory").capabilities == ["list", "stats", "stock"]
    assert get_screen("product-kinds").capabilities == ["list", "create", "update", "delete"]
    assert get_screen("book-series").title == "Book Series"


def test_unknown_screen():
    with pytest.raises(UnknownScreenError):
        get_screen("orders")


# ── ListScreenState ──


@pytest.mark.parametrize(
    "page, total_pages, expected",
    [(0, 3, 1), (2, 3, 2), (9, 3, 3), (4, 0, 1), (-2, -1, 1)],
)
def test_clamp_page(page, total_pages, expected):
    assert clamp_page(page, total_pages) == expected


def test_replace_items_keeps_page_in_range():
    state = ListScreenState(page=5, error="stale")

    state.replace_items(["x"], total_pages=2)

    assert state.page == 2
    assert state.error is None
    assert state.has_next is False
    assert state.has_previous is True

    state.replace_items([], total_pages=0)
    assert state.total_pages == 1
    assert state.page == 1


@pytest.mark.asyncio
async def test_page_past_the_end_fetches_the_last_page():
    client = FakeCatalogClient()
    client.respond(
        "GET",
        "/authors",
        lambda params: page_body([BOND] if params["page"] == 3 else [], total_pages=3),
    )
    screen = _screen("authors", client)
    screen.state.page = 9

    assert await screen.load() is True

    assert [params["page"] for method, path, params in client.calls] == [9, 3]
    assert screen.state.page == 3
    assert [item.id for item in screen.state.items] == ["a1"]
