"""Integration tests for the screens API.

The catalog backend is replaced by an in-memory client through FastAPI's
dependency overrides; everything between the route and the client runs
for real.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from catalog_admin.infrastructure.dependencies import get_catalog_client
from catalog_admin.main import app
from tests.fakes import FakeCatalogClient, page_body

BOND = {"_id": "a1", "name": "Ruskin Bond", "slug": "ruskin-bond"}


# ── Fixtures ──


@pytest.fixture
def catalog():
    fake = FakeCatalogClient()
    app.dependency_overrides[get_catalog_client] = lambda: fake
    yield fake
    app.dependency_overrides.pop(get_catalog_client, None)


async def _call(method: str, url: str, **kwargs):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.request(method, url, **kwargs)


# ── Listing ──


@pytest.mark.asyncio
async def test_list_screens(catalog):
    response = await _call("GET", "/api/v1/screens")

    assert response.status_code == 200
    screens = {screen["key"]: screen for screen in response.json()}
    assert len(screens) == 14
    assert screens["inventory"]["capabilities"] == ["list", "stats", "stock"]
    assert screens["purchase-orders"]["title"] == "Purchase Orders"


@pytest.mark.asyncio
async def test_list_state_returns_wire_items(catalog):
    catalog.respond("GET", "/authors", page_body([BOND], total_pages=3))

    response = await _call("GET", "/api/v1/screens/authors", params={"page": 2})

    assert response.status_code == 200
    data = response.json()
    assert data["screen"] == "authors"
    assert data["page"] == 2
    assert data["total_pages"] == 3
    assert data["has_previous"] is True
    assert data["has_next"] is True
    assert data["items"][0]["_id"] == "a1"
    assert data["items"][0]["isActive"] is True
    assert catalog.last("GET", "/authors") == {"page": 2, "limit": 20}


@pytest.mark.asyncio
async def test_list_state_search(catalog):
    catalog.respond("GET", "/authors/search", {"success": True, "data": [BOND]})

    response = await _call("GET", "/api/v1/screens/authors", params={"q": " bond "})

    assert response.status_code == 200
    assert response.json()["search_term"] == "bond"
    assert catalog.last("GET", "/authors/search") == {"q": "bond"}


@pytest.mark.asyncio
async def test_list_failure_returns_retryable_state(catalog):
    catalog.fail("GET", "/suppliers", status_code=503, message="Backend unavailable")

    response = await _call("GET", "/api/v1/screens/suppliers")

    assert response.status_code == 502
    detail = response.json()["detail"]
    assert detail["error"] == "Backend unavailable"
    assert detail["can_retry"] is True


@pytest.mark.asyncio
async def test_unknown_screen_is_404(catalog):
    response = await _call("GET", "/api/v1/screens/orders")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_stats(catalog):
    catalog.respond("GET", "/purchase-orders/summary", {"success": True, "data": {"pending": 4}})

    response = await _call("GET", "/api/v1/screens/purchase-orders/stats")

    assert response.status_code == 200
    assert response.json() == {"screen": "purchase-orders", "stats": {"pending": 4}}


@pytest.mark.asyncio
async def test_stats_not_offered_is_405(catalog):
    response = await _call("GET", "/api/v1/screens/product-kinds/stats")

    assert response.status_code == 405


# ── Forms ──


@pytest.mark.asyncio
async def test_create_form_defaults(catalog):
    response = await _call("GET", "/api/v1/screens/suppliers/form")

    assert response.status_code == 200
    data = response.json()
    assert data["mode"] == "create"
    assert data["title"] == "Add Supplier"
    assert data["data"]["currency"] == "INR"


@pytest.mark.asyncio
async def test_edit_form_is_seeded_from_record(catalog):
    response = await _call("POST", "/api/v1/screens/authors/form", json=BOND)

    assert response.status_code == 200
    data = response.json()
    assert data["mode"] == "edit"
    assert data["record_id"] == "a1"
    assert data["title"] == "Edit Author"
    assert data["data"]["slug"] == "ruskin-bond"


# ── Mutations ──


@pytest.mark.asyncio
async def test_create_record(catalog):
    catalog.respond("POST", "/authors", {"success": True, "data": BOND})
    catalog.respond("GET", "/authors", page_body([BOND]))

    response = await _call(
        "POST",
        "/api/v1/screens/authors",
        json={"name": "Ruskin Bond", "socialMedia": {"twitter": "@ruskinbond"}},
    )

    assert response.status_code == 201
    body = catalog.last("POST", "/authors")
    assert body["name"] == "Ruskin Bond"
    assert body["socialMedia"]["twitter"] == "@ruskinbond"
    assert response.json()["state"]["items"][0]["_id"] == "a1"


@pytest.mark.asyncio
async def test_create_invalid_record_is_422(catalog):
    response = await _call("POST", "/api/v1/screens/authors", json={"biography": "..."})

    assert response.status_code == 422
    assert response.json()["detail"]["errors"] == {"name": "Author name is required"}
    assert catalog.count("POST", "/authors") == 0


@pytest.mark.asyncio
async def test_create_rejected_by_backend_is_502(catalog):
    catalog.fail("POST", "/suppliers", status_code=400, message="Code already exists")

    response = await _call("POST", "/api/v1/screens/suppliers", json={"name": "Mills", "code": "PM"})

    assert response.status_code == 502
    detail = response.json()["detail"]
    assert detail["message"] == "Failed to save supplier"
    assert detail["alerts"] == ["Failed to save supplier"]


@pytest.mark.asyncio
async def test_create_not_offered_is_405(catalog):
    response = await _call("POST", "/api/v1/screens/inventory", json={"productId": "p1"})

    assert response.status_code == 405


@pytest.mark.asyncio
async def test_update_record(catalog):
    catalog.respond("PUT", "/publishers/p1", {"success": True, "data": {"_id": "p1"}})

    response = await _call(
        "PUT",
        "/api/v1/screens/publishers/p1",
        json={"name": "Rupa", "foundedYear": 1936},
    )

    assert response.status_code == 200
    body = catalog.last("PUT", "/publishers/p1")
    assert body["name"] == "Rupa"
    assert body["foundedYear"] == 1936


@pytest.mark.asyncio
async def test_update_with_malformed_record_is_422(catalog):
    response = await _call("PUT", "/api/v1/screens/authors/a1", json={"name": ["not", "text"]})

    assert response.status_code == 422
    assert response.json()["detail"]["message"] == "Invalid record"


@pytest.mark.asyncio
async def test_delete_requires_confirmation(catalog):
    response = await _call("DELETE", "/api/v1/screens/authors/a1", params={"name": "Ruskin Bond"})

    assert response.status_code == 409
    assert response.json()["detail"]["questions"] == [
        "Are you sure you want to delete Ruskin Bond?"
    ]
    assert catalog.count("DELETE", "/authors/a1") == 0


@pytest.mark.asyncio
async def test_confirmed_delete(catalog):
    catalog.respond("GET", "/authors", page_body([]))

    response = await _call("DELETE", "/api/v1/screens/authors/a1", params={"confirm": "true"})

    assert response.status_code == 200
    assert catalog.count("DELETE", "/authors/a1") == 1
    assert catalog.count("GET", "/authors") == 1
    assert response.json()["state"]["items"] == []


@pytest.mark.asyncio
async def test_failed_delete_is_502(catalog):
    catalog.fail("DELETE", "/warehouses/w1", status_code=409, message="Warehouse has stock")

    response = await _call("DELETE", "/api/v1/screens/warehouses/w1", params={"confirm": "true"})

    assert response.status_code == 502
    assert response.json()["detail"]["alerts"] == ["Failed to delete warehouse"]


@pytest.mark.asyncio
async def test_adjust_stock(catalog):
    catalog.respond("POST", "/inventory/i1/stock", {"success": True, "data": {"_id": "i1"}})
    catalog.respond("GET", "/inventory", page_body([{"_id": "i1", "currentStock": 8}]))

    response = await _call(
        "POST",
        "/api/v1/screens/inventory/i1/stock",
        json={"quantity": 3, "operation": "add"},
    )

    assert response.status_code == 200
    assert catalog.last("POST", "/inventory/i1/stock") == {"quantity": 3, "operation": "add"}
    assert response.json()["state"]["items"][0]["currentStock"] == 8


@pytest.mark.asyncio
async def test_invalid_stock_adjustment_is_422(catalog):
    response = await _call(
        "POST",
        "/api/v1/screens/inventory/i1/stock",
        json={"quantity": 0, "operation": "add"},
    )

    assert response.status_code == 422
    assert "quantity" in response.json()["detail"]["errors"]


@pytest.mark.asyncio
async def test_list_state_past_the_end_shows_last_page(catalog):
    catalog.respond(
        "GET",
        "/authors",
        lambda params: page_body([BOND] if params["page"] == 3 else [], total_pages=3),
    )

    response = await _call("GET", "/api/v1/screens/authors", params={"page": 9})

    assert response.status_code == 200
    data = response.json()
    assert data["page"] == 3
    assert data["items"][0]["_id"] == "a1"


@pytest.mark.asyncio
async def test_create_purchase_order_with_text_quantities(catalog):
    catalog.respond("POST", "/purchase-orders", {"success": True, "data": {"_id": "po1"}})

    response = await _call(
        "POST",
        "/api/v1/screens/purchase-orders",
        json={"supplierId": "s1", "items": [{"productId": "p1", "quantity": "2", "unitCost": 5}]},
    )

    assert response.status_code == 201
    body = catalog.last("POST", "/purchase-orders")
    assert body["subtotal"] == 10
    assert body["items"][0]["quantity"] == 2


@pytest.mark.asyncio
async def test_create_purchase_order_with_missing_cost_is_422(catalog):
    response = await _call(
        "POST",
        "/api/v1/screens/purchase-orders",
        json={"supplierId": "s1", "items": [{"productId": "p1", "quantity": 2, "unitCost": None}]},
    )

    assert response.status_code == 422
    assert response.json()["detail"]["errors"] == {
        "item-0-unit_cost": "Unit cost cannot be negative"
    }
    assert catalog.count("POST", "/purchase-orders") == 0
