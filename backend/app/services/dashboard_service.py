# backend/app/services/dashboard_service.py
"""
Servicio del panel principal.

Reúne contadores por entidad, totales de facturación y saldo pendiente a
partir de la vista client_summary, y los últimos pedidos con el nombre
del cliente. Todas las consultas se lanzan en paralelo.
"""

from typing import Any, Dict, List
import logging

from app.core.constants import RECENT_ORDERS_LIMIT, UNKNOWN_CLIENT
from app.crud.gateway import DataGateway
from app.schemas.dashboard_schema import DashboardResponse, DashboardStats, RecentOrder
from app.services.aggregation import gather_sources, report_failures
from app.services.notifications import Notifier

logger = logging.getLogger(__name__)

COUNTED_RESOURCES = ("clients", "vendors", "items", "services", "technicians", "orders")


def summarize_clients(summary_rows: List[Dict[str, Any]]) -> Dict[str, float]:
    """Suma facturación y saldo pendiente de client_summary; los nulos cuentan como 0."""
    return {
        "total_revenue": sum((row.get("total_revenue") or 0) for row in summary_rows),
        "outstanding_balance": sum((row.get("outstanding_balance") or 0) for row in summary_rows),
    }


def to_recent_order(row: Dict[str, Any]) -> RecentOrder:
    client = row.get("clients") or {}
    return RecentOrder(
        id=row["id"],
        client_id=row.get("client_id"),
        client_name=client.get("name") or UNKNOWN_CLIENT,
        type=row.get("type") or "",
        status=row.get("status") or "",
        total_amount=row.get("total_amount") or 0,
        created_at=row["created_at"],
    )


class DashboardService:
    """
    Agregador del panel.

    Si alguna consulta falla, su estadística queda a 0 (o vacía), se
    nombra en failed_sources y se emite una sola notificación de error.
    """

    async def get_dashboard(self, gateway: DataGateway) -> DashboardResponse:
        logger.info("📊 DASHBOARD: Cargando estadísticas")
        notifier = Notifier()

        fetches = {name: gateway.count(name) for name in COUNTED_RESOURCES}
        fetches["client_summary"] = gateway.select(
            "client_summary", columns=["total_revenue", "outstanding_balance"]
        )
        fetches["recent_orders"] = gateway.select(
            "orders",
            joins={"clients": ["name"]},
            order_by="created_at",
            descending=True,
            limit=RECENT_ORDERS_LIMIT,
        )
        defaults = {name: 0 for name in COUNTED_RESOURCES}
        defaults.update(client_summary=[], recent_orders=[])

        results, failed = await gather_sources(fetches, defaults)
        report_failures(notifier, "dashboard", failed)

        stats = DashboardStats(
            **{f"total_{name}": results[name] for name in COUNTED_RESOURCES},
            **summarize_clients(results["client_summary"]),
        )
        recent_orders = [to_recent_order(row) for row in results["recent_orders"]]

        logger.info(
            f"✅ DASHBOARD: {stats.total_orders} pedidos, facturación {stats.total_revenue:.2f}, "
            f"pendiente {stats.outstanding_balance:.2f}"
        )
        return DashboardResponse(
            stats=stats,
            recent_orders=recent_orders,
            failed_sources=failed,
            notifications=notifier.notifications,
        )


dashboard_service = DashboardService()
