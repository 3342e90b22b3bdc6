# backend/tests/test_gateway.py
"""
Gateway de datos contra SQLite (aiosqlite).
"""

import pytest

from app.core.exceptions import GatewayError, ReadOnlyResource, RecordNotFound


async def test_select_orders_and_embeds_relations(gateway, seeded):
    items = await gateway.select("items", joins={"vendors": ["name"]}, order_by="name")
    assert [i["name"] for i in items] == ["Cable", "Laptop", "Mouse"]
    assert items[0]["vendors"] is None
    assert items[1]["vendors"] == {"name": "Tech Supplies"}
    assert isinstance(items[1]["buy_price"], float)


async def test_select_descending_with_limit(gateway, seeded):
    orders = await gateway.select("orders", order_by="created_at", descending=True, limit=1)
    assert [o["id"] for o in orders] == [seeded["recent_order"]["id"]]


async def test_select_filters_by_equality_and_lists(gateway, seeded):
    pending = await gateway.select("orders", filters={"status": "pending"})
    assert [o["id"] for o in pending] == [seeded["recent_order"]["id"]]
    both = await gateway.select("orders", filters={"status": ["pending", "completed"]})
    assert len(both) == 2
    assert await gateway.count("items", filters={"vendor_id": None}) == 1


async def test_get_missing_record_raises_not_found(gateway, seeded):
    with pytest.raises(RecordNotFound):
        await gateway.get("clients", "does-not-exist")


async def test_unknown_resource_and_field_raise_gateway_error(gateway):
    with pytest.raises(GatewayError):
        await gateway.select("invoices")
    with pytest.raises(GatewayError):
        await gateway.select("clients", filters={"colour": "red"})
    with pytest.raises(GatewayError):
        await gateway.insert("clients", {"name": "X", "contact": "y", "colour": "red"})


async def test_views_are_read_only(gateway):
    with pytest.raises(ReadOnlyResource):
        await gateway.insert("client_summary", {"name": "X"})
    with pytest.raises(ReadOnlyResource):
        await gateway.delete("inventory_status", "any")


async def test_update_changes_only_given_fields(gateway, seeded):
    updated = await gateway.update("clients", seeded["acme"]["id"], {"credit_days": 45})
    assert updated["credit_days"] == 45
    assert updated["name"] == "Acme Ltd"
    with pytest.raises(RecordNotFound):
        await gateway.update("clients", "missing", {"credit_days": 1})


async def test_delete_cascades_to_orders_and_payments(gateway, seeded):
    await gateway.delete("clients", seeded["acme"]["id"])
    assert await gateway.count("clients") == 1
    assert await gateway.count("orders", filters={"client_id": seeded["acme"]["id"]}) == 0
    assert await gateway.count("payments") == 0


async def test_delete_vendor_unlinks_items(gateway, seeded):
    await gateway.delete("vendors", seeded["vendor"]["id"])
    assert await gateway.count("items") == 3
    assert await gateway.count("items", filters={"vendor_id": None}) == 3


async def test_delete_missing_record_raises_not_found(gateway):
    with pytest.raises(RecordNotFound):
        await gateway.delete("orders", "missing")


async def test_check_constraint_failure_becomes_gateway_error(gateway):
    with pytest.raises(GatewayError):
        await gateway.insert("clients", {"name": "Bad", "contact": "x", "credit_limit": -1})


async def test_client_summary_view(gateway, seeded):
    rows = {r["name"]: r for r in await gateway.select("client_summary")}
    assert rows["Acme Ltd"]["total_revenue"] == 1300
    assert rows["Acme Ltd"]["outstanding_balance"] == 1000
    assert rows["Beta Stores"]["outstanding_balance"] == 200
    assert rows["Beta Stores"]["total_orders"] == 1


async def test_inventory_status_view(gateway, seeded):
    rows = {r["name"]: r for r in await gateway.select("inventory_status")}
    assert rows["Cable"]["stock_status"] == "out_of_stock"
    assert rows["Cable"]["profit_margin"] == 0
    assert rows["Mouse"]["stock_status"] == "low_stock"
    assert rows["Laptop"]["vendor_name"] == "Tech Supplies"


async def test_vendor_performance_view_attributes_order_lines(gateway, seeded):
    await gateway.insert("order_details", {
        "order_id": seeded["recent_order"]["id"], "item_id": seeded["laptop"]["id"],
        "quantity": 2, "unit_price": 650, "subtotal": 1300,
    })
    rows = await gateway.select("vendor_performance")
    assert len(rows) == 1
    assert rows[0]["total_orders"] == 1
    assert rows[0]["total_revenue"] == 1300
    assert rows[0]["total_items"] == 2
