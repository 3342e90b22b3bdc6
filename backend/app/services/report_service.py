# backend/app/services/report_service.py
"""
Servicio de informes y analítica por periodo.

Carga todas las filas de las entidades implicadas en paralelo y calcula
las métricas en memoria. Las métricas de inventario no dependen del
periodo; el resto usa la ventana [inicio del periodo, ahora].
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
import logging

from app.crud.gateway import DataGateway
from app.schemas.order_schema import OrderType
from app.schemas.report_schema import (
    ClientMetrics,
    InventoryMetrics,
    OrderMetrics,
    ReportResponse,
    ReportType,
    RevenueMetrics,
)
from app.services.aggregation import gather_sources, report_failures
from app.services.entity_pages import stock_status
from app.services.notifications import Notifier
from app.services.periods import ReportPeriod, period_start, utc_now, within_period

logger = logging.getLogger(__name__)

Rows = List[Dict[str, Any]]

REPORT_SOURCES = ("clients", "vendors", "items", "services", "orders", "payments", "documents")

# ========================================
# CÁLCULO DE MÉTRICAS
# ========================================

def revenue_metrics(orders: Rows, payments: Rows, period: ReportPeriod, now: datetime) -> RevenueMetrics:
    total_revenue = sum((o.get("total_amount") or 0) for o in within_period(orders, "created_at", period, now))
    total_received = sum((p.get("amount_paid") or 0) for p in within_period(payments, "payment_date", period, now))
    return RevenueMetrics(
        total_revenue=total_revenue,
        total_received=total_received,
        outstanding_balance=total_revenue - total_received,
    )


def client_metrics(clients: Rows, orders: Rows, period: ReportPeriod, now: datetime) -> ClientMetrics:
    active = {o.get("client_id") for o in within_period(orders, "created_at", period, now)}
    return ClientMetrics(
        total_clients=len(clients),
        new_clients=len(within_period(clients, "created_at", period, now)),
        active_clients=len(active),
    )


def inventory_metrics(items: Rows) -> InventoryMetrics:
    statuses = [stock_status(i.get("stock_qty") or 0) for i in items]
    return InventoryMetrics(
        total_items=len(items),
        total_value=sum((i.get("stock_qty") or 0) * (i.get("buy_price") or 0) for i in items),
        low_stock_items=statuses.count("low_stock"),
        out_of_stock_items=statuses.count("out_of_stock"),
    )


def order_metrics(orders: Rows, period: ReportPeriod, now: datetime) -> OrderMetrics:
    period_orders = within_period(orders, "created_at", period, now)
    period_total = sum((o.get("total_amount") or 0) for o in period_orders)
    return OrderMetrics(
        total_orders=len(orders),
        period_orders=len(period_orders),
        avg_order_value=period_total / len(period_orders) if period_orders else 0,
        item_orders=sum(1 for o in period_orders if o.get("type") == OrderType.ITEM.value),
        service_orders=sum(1 for o in period_orders if o.get("type") == OrderType.SERVICE.value),
    )


class ReportService:
    """Agregador de informes con el mismo aislamiento por consulta que el panel."""

    async def get_report(
        self,
        gateway: DataGateway,
        period: ReportPeriod = ReportPeriod.MONTH,
        now: Optional[datetime] = None,
    ) -> ReportResponse:
        period = ReportPeriod(period)
        now = now or utc_now()
        logger.info(f"📈 INFORMES: Calculando métricas del periodo '{period.value}'")
        notifier = Notifier()

        results, failed = await gather_sources(
            {name: gateway.select(name) for name in REPORT_SOURCES},
            {name: [] for name in REPORT_SOURCES},
        )
        report_failures(notifier, "report", failed)

        return ReportResponse(
            period=period,
            period_start=period_start(period, now),
            generated_at=now,
            revenue=revenue_metrics(results["orders"], results["payments"], period, now),
            clients=client_metrics(results["clients"], results["orders"], period, now),
            inventory=inventory_metrics(results["items"]),
            orders=order_metrics(results["orders"], period, now),
            failed_sources=failed,
            notifications=notifier.notifications,
        )

    def generate_report(self, report_type: ReportType) -> Notifier:
        """
        Solo acusa recibo: la exportación a fichero no está implementada.
        """
        notifier = Notifier()
        notifier.success(f"{ReportType(report_type).value} report generated successfully")
        return notifier


report_service = ReportService()
