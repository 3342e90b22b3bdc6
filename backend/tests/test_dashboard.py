# backend/tests/test_dashboard.py

from app.core.exceptions import GatewayError
from app.crud.gateway import DataGateway
from app.db.database import make_session_factory
from app.services.dashboard_service import dashboard_service, summarize_clients


def test_summary_totals_treat_null_as_zero():
    rows = [
        {"total_revenue": 100.0, "outstanding_balance": 40.0},
        {"total_revenue": None, "outstanding_balance": None},
        {"total_revenue": 50.0, "outstanding_balance": 50.0},
    ]
    assert summarize_clients(rows) == {"total_revenue": 150.0, "outstanding_balance": 90.0}


async def test_dashboard_totals_come_from_client_summary(gateway, seeded):
    dashboard = await dashboard_service.get_dashboard(gateway)
    summary = await gateway.select("client_summary")

    assert dashboard.stats.outstanding_balance == sum(r["outstanding_balance"] for r in summary)
    assert dashboard.stats.outstanding_balance == 1200
    assert dashboard.stats.total_revenue == 1500
    assert dashboard.stats.total_clients == 2
    assert dashboard.stats.total_items == 3
    assert dashboard.stats.total_orders == 2
    assert dashboard.failed_sources == []
    assert dashboard.notifications == []


async def test_recent_orders_newest_first_with_client_name(gateway, seeded):
    dashboard = await dashboard_service.get_dashboard(gateway)
    assert [o.id for o in dashboard.recent_orders] == [seeded["recent_order"]["id"], seeded["old_order"]["id"]]
    assert dashboard.recent_orders[0].client_name == "Acme Ltd"


async def test_recent_orders_are_limited_to_five(gateway, seeded):
    for _ in range(6):
        await gateway.insert("orders", {"client_id": seeded["beta"]["id"], "type": "item", "total_amount": 1})
    dashboard = await dashboard_service.get_dashboard(gateway)
    assert len(dashboard.recent_orders) == 5


class FlakyGateway(DataGateway):
    """Falla al contar técnicos; el resto funciona."""

    async def count(self, resource, filters=None):
        if resource == "technicians":
            raise GatewayError("Failed to count technicians", resource=resource)
        return await super().count(resource, filters)


async def test_failed_source_is_isolated_and_reported_once(engine, seeded):
    dashboard = await dashboard_service.get_dashboard(FlakyGateway(make_session_factory(engine)))
    assert dashboard.failed_sources == ["technicians"]
    assert dashboard.stats.total_technicians == 0
    assert dashboard.stats.total_clients == 2
    assert len(dashboard.notifications) == 1
    assert dashboard.notifications[0].level.value == "error"
