# backend/tests/test_api.py
"""
Endpoints HTTP de la API v1 con httpx + ASGITransport.
"""

from datetime import datetime, timezone

from httpx import ASGITransport, AsyncClient

from app.main import app

API = "/api/v1"


async def test_root_and_health(client):
    response = await client.get("/")
    assert response.status_code == 200
    assert "Molant" in response.json()["message"]

    health = await client.get("/health")
    assert health.json() == {"status": "ok", "database": "ok"}


async def test_missing_api_key_is_rejected(gateway):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as anonymous:
        response = await anonymous.get(f"{API}/clients/")
    assert response.status_code == 401


async def test_list_page_with_search(client, seeded):
    response = await client.get(f"{API}/clients/", params={"search": "  acme "})
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 2
    assert body["visible_count"] == 1
    assert body["rows"][0]["name"] == "Acme Ltd"
    assert body["stats"]["total_clients"] == 2
    assert body["empty_state"] == "none"


async def test_item_stock_filter(client, seeded):
    response = await client.get(f"{API}/items/", params={"stock": "out_of_stock"})
    body = response.json()
    assert [row["name"] for row in body["rows"]] == ["Cable"]
    assert body["rows"][0]["stock_status"] == "out_of_stock"
    assert body["rows"][0]["profit_margin"] == 0
    assert body["rows"][0]["vendor_name"] == "Unknown Vendor"
    assert body["filters"] == {"stock": "out_of_stock"}


async def test_unknown_filter_value_is_bad_request(client, seeded):
    response = await client.get(f"{API}/items/", params={"stock": "plenty"})
    assert response.status_code == 400


async def test_create_client_validates_credit_limit(client):
    bad = await client.post(f"{API}/clients/", json={"name": "Neg", "contact": "x", "credit_limit": -5})
    assert bad.status_code == 422

    good = await client.post(f"{API}/clients/", json={"name": "Gamma", "contact": "g@example.com", "credit_limit": 250})
    assert good.status_code == 201
    assert good.json()["credit_limit"] == 250


async def test_read_and_patch_record(client, seeded):
    client_id = seeded["acme"]["id"]
    response = await client.patch(f"{API}/clients/{client_id}", json={"credit_days": 60})
    assert response.status_code == 200
    assert response.json()["credit_days"] == 60

    detail = await client.get(f"{API}/clients/{client_id}")
    assert detail.json()["credit_days"] == 60

    assert (await client.patch(f"{API}/clients/{client_id}", json={})).status_code == 400
    assert (await client.get(f"{API}/clients/missing")).status_code == 404


async def test_delete_needs_confirmation(client, seeded):
    vendor_id = seeded["vendor"]["id"]
    refused = await client.delete(f"{API}/vendors/{vendor_id}")
    assert refused.status_code == 400

    response = await client.delete(f"{API}/vendors/{vendor_id}", params={"confirm": "true"})
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 0
    assert body["empty_state"] == "no_rows"
    assert body["notifications"][-1]["message"] == "Vendor deleted successfully"

    missing = await client.delete(f"{API}/vendors/{vendor_id}", params={"confirm": "true"})
    assert missing.status_code == 404


async def test_order_status_update(client, seeded):
    order_id = seeded["recent_order"]["id"]
    response = await client.patch(f"{API}/orders/{order_id}/status", json={"status": "delivered"})
    assert response.status_code == 200
    row = next(r for r in response.json()["rows"] if r["id"] == order_id)
    assert row["status"] == "delivered"
    assert row["client_name"] == "Acme Ltd"

    invalid = await client.patch(f"{API}/orders/{order_id}/status", json={"status": "shipped"})
    assert invalid.status_code == 422
    missing = await client.patch(f"{API}/orders/missing/status", json={"status": "approved"})
    assert missing.status_code == 404


async def test_create_order_with_lines(client, seeded):
    payload = {
        "client_id": seeded["beta"]["id"],
        "type": "item",
        "details": [{"item_id": seeded["mouse"]["id"], "quantity": 4, "unit_price": 10}],
    }
    response = await client.post(f"{API}/orders/", json=payload)
    assert response.status_code == 201
    body = response.json()
    assert body["total_amount"] == 40
    assert body["details"][0]["subtotal"] == 40

    details = await client.get(f"{API}/orders/{body['id']}/details")
    assert len(details.json()["details"]) == 1


async def test_create_document_gets_number(client, seeded):
    payload = {
        "order_id": seeded["recent_order"]["id"],
        "client_id": seeded["acme"]["id"],
        "type": "delivery_note",
        "due_date": "2025-07-01",
    }
    response = await client.post(f"{API}/documents/", json=payload)
    assert response.status_code == 201
    year = datetime.now(timezone.utc).year
    assert response.json()["document_number"] == f"DN/{year}/0001"

    status_response = await client.patch(
        f"{API}/documents/{response.json()['id']}/status", json={"status": "paid"}
    )
    assert status_response.status_code == 200
    assert status_response.json()["rows"][0]["is_overdue"] is False


async def test_technician_availability_toggle(client):
    created = await client.post(f"{API}/technicians/", json={"name": "Ann", "contact": "ann@example.com"})
    technician_id = created.json()["id"]

    response = await client.patch(f"{API}/technicians/{technician_id}/availability")
    assert response.status_code == 200
    assert response.json()["rows"][0]["is_available"] is False

    missing = await client.patch(f"{API}/technicians/missing/availability")
    assert missing.status_code == 404


async def test_payment_create_and_receipt(client, seeded):
    payload = {"client_id": seeded["acme"]["id"], "order_id": seeded["recent_order"]["id"], "amount_paid": 1000}
    created = await client.post(f"{API}/payments/", json=payload)
    assert created.status_code == 201
    assert created.json()["balance"] == 0

    receipt = await client.post(f"{API}/payments/{created.json()['id']}/receipt")
    assert receipt.json()["notifications"][0]["message"] == "Receipt generated successfully"
    assert (await client.post(f"{API}/payments/missing/receipt")).status_code == 404


async def test_dashboard_endpoint(client, seeded):
    body = (await client.get(f"{API}/dashboard/")).json()
    assert body["stats"]["outstanding_balance"] == 1200
    assert body["recent_orders"][0]["client_name"] == "Acme Ltd"
    assert body["failed_sources"] == []


async def test_reports_endpoints(client, seeded):
    response = await client.get(f"{API}/reports/", params={"period": "year"})
    assert response.status_code == 200
    assert response.json()["inventory"]["out_of_stock_items"] == 1

    assert (await client.get(f"{API}/reports/", params={"period": "decade"})).status_code == 422

    generated = await client.post(f"{API}/reports/generate/inventory")
    assert generated.json()["notifications"][0]["message"] == "inventory report generated successfully"
    assert (await client.post(f"{API}/reports/generate/astrology")).status_code == 404


async def test_navigation(client):
    body = (await client.get(f"{API}/navigation/", params={"path": "/vendors"})).json()
    assert body["entries"][0] == {"name": "Dashboard", "href": "/"}
    assert body["active"] == "Vendors"


async def test_patch_rejects_null_on_required_fields(client, seeded):
    order_id = seeded["recent_order"]["id"]
    response = await client.patch(f"{API}/orders/{order_id}", json={"status": None})
    assert response.status_code == 422

    client_id = seeded["acme"]["id"]
    assert (await client.patch(f"{API}/clients/{client_id}", json={"name": None})).status_code == 422

    cleared = await client.patch(f"{API}/clients/{client_id}", json={"address": None})
    assert cleared.status_code == 200
    assert cleared.json()["address"] is None

    unlinked = await client.patch(f"{API}/items/{seeded['laptop']['id']}", json={"vendor_id": None})
    assert unlinked.status_code == 200
    assert unlinked.json()["vendor_id"] is None


async def test_payments_page_reports_recent_counts(client, seeded):
    stats = (await client.get(f"{API}/payments/")).json()["stats"]
    assert set(stats) >= {"today_payments", "recent_payments"}
    assert stats["total_payments"] == 1
