# backend/app/services/entity_pages.py
"""
Configuración de las páginas de listado de cada entidad.

Cada PageConfig fija el orden de carga, las relaciones a mostrar, los
campos de búsqueda, los filtros de categoría y las estadísticas de
cabecera. Las reglas de negocio de presentación (bandas de stock, margen
de beneficio, bandas de coste, documentos vencidos) viven aquí como
funciones puras para poder probarlas sin base de datos.
"""

from datetime import datetime, timedelta
from typing import Any, Dict, List

from app.core.constants import (
    LOW_STOCK_THRESHOLD,
    SERVICE_COST_HIGH,
    SERVICE_COST_LOW,
    UNKNOWN_CLIENT,
    UNKNOWN_ORDER,
    UNKNOWN_VENDOR,
)
from app.schemas.document_schema import DocumentStatus, DocumentType
from app.schemas.order_schema import OrderStatus, OrderType
from app.schemas.vendor_schema import VendorType
from app.services.list_page import CategoryFilter, PageConfig, Row
from app.services.periods import as_aware, start_of_day

# ========================================
# REGLAS DE PRESENTACIÓN
# ========================================

def stock_status(qty: int) -> str:
    """0 -> out_of_stock; 1..10 -> low_stock; > 10 -> in_stock."""
    if qty <= 0:
        return "out_of_stock"
    if qty <= LOW_STOCK_THRESHOLD:
        return "low_stock"
    return "in_stock"


def profit_margin(buy_price: float, sell_price: float) -> float:
    """Margen en porcentaje sobre el precio de compra; 0 si el precio de compra es 0."""
    if not buy_price:
        return 0.0
    return (sell_price - buy_price) / buy_price * 100


def cost_category(cost: float) -> str:
    if cost < SERVICE_COST_LOW:
        return "low"
    if cost < SERVICE_COST_HIGH:
        return "medium"
    return "high"


def is_overdue(document: Row, now: datetime) -> bool:
    """
    Vencido: no está pagado y su fecha de vencimiento (a las 00:00 UTC) ya
    pasó respecto a now. Un documento que vence hoy cuenta como vencido
    en cuanto empieza el día.
    """
    due = as_aware(document.get("due_date"))
    if due is None or document.get("status") == DocumentStatus.PAID.value:
        return False
    return due < as_aware(now)


def _sum(rows: List[Row], field: str) -> float:
    return sum((row.get(field) or 0) for row in rows)


def _count(rows: List[Row], field: str, value: Any) -> int:
    return sum(1 for row in rows if row.get(field) == value)

# ========================================
# CLIENTES
# ========================================

def client_statistics(rows: List[Row], _now: datetime) -> Dict[str, Any]:
    return {
        "total_clients": len(rows),
        "total_credit_limit": _sum(rows, "credit_limit"),
        "avg_credit_days": round(_sum(rows, "credit_days") / len(rows)) if rows else 0,
    }


CLIENTS = PageConfig(
    "clients",
    "client",
    "name",
    search_fields=["name", "contact", "address"],
    statistics=client_statistics,
)

# ========================================
# PROVEEDORES
# ========================================

def vendor_statistics(rows: List[Row], _now: datetime) -> Dict[str, Any]:
    return {
        "total_vendors": len(rows),
        "item_vendors": sum(1 for row in rows if row.get("type") in ("item", "both")),
        "service_vendors": sum(1 for row in rows if row.get("type") in ("service", "both")),
        "both_vendors": _count(rows, "type", "both"),
    }


VENDORS = PageConfig(
    "vendors",
    "vendor",
    "name",
    search_fields=["name", "contact", "type"],
    filters=[CategoryFilter.exact("type", "type", [t.value for t in VendorType])],
    statistics=vendor_statistics,
)

# ========================================
# ARTÍCULOS
# ========================================

def _stock_is(bucket: str):
    return lambda row, _now: stock_status(row.get("stock_qty") or 0) == bucket


def decorate_item(row: Row, _now: datetime) -> Row:
    row["stock_status"] = stock_status(row.get("stock_qty") or 0)
    row["profit_margin"] = round(profit_margin(row.get("buy_price") or 0, row.get("sell_price") or 0), 1)
    return row


def item_statistics(rows: List[Row], _now: datetime) -> Dict[str, Any]:
    return {
        "total_items": len(rows),
        "total_value": sum((row.get("stock_qty") or 0) * (row.get("buy_price") or 0) for row in rows),
        "total_profit": sum(
            (row.get("stock_qty") or 0) * ((row.get("sell_price") or 0) - (row.get("buy_price") or 0))
            for row in rows
        ),
        "low_stock_items": sum(1 for row in rows if stock_status(row.get("stock_qty") or 0) == "low_stock"),
        "out_of_stock_items": sum(1 for row in rows if stock_status(row.get("stock_qty") or 0) == "out_of_stock"),
    }


ITEMS = PageConfig(
    "items",
    "item",
    "name",
    joins={"vendors": ["name"]},
    search_fields=["name", "vendors.name", "warranty"],
    filters=[
        CategoryFilter("stock", {
            "in_stock": _stock_is("in_stock"),
            "low_stock": _stock_is("low_stock"),
            "out_of_stock": _stock_is("out_of_stock"),
        }),
    ],
    statistics=item_statistics,
    display_labels={"vendor_name": ("vendors.name", UNKNOWN_VENDOR)},
    decorate=decorate_item,
)

# ========================================
# SERVICIOS
# ========================================

def _cost_is(band: str):
    return lambda row, _now: cost_category(row.get("cost") or 0) == band


def decorate_service(row: Row, _now: datetime) -> Row:
    row["cost_category"] = cost_category(row.get("cost") or 0)
    return row


def service_statistics(rows: List[Row], _now: datetime) -> Dict[str, Any]:
    total_cost = _sum(rows, "cost")
    return {
        "total_services": len(rows),
        "total_cost": total_cost,
        "avg_cost": total_cost / len(rows) if rows else 0,
        "low_cost_services": sum(1 for row in rows if cost_category(row.get("cost") or 0) == "low"),
        "high_cost_services": sum(1 for row in rows if cost_category(row.get("cost") or 0) == "high"),
    }


SERVICES = PageConfig(
    "services",
    "service",
    "name",
    joins={"vendors": ["name"]},
    search_fields=["name", "vendors.name"],
    filters=[
        CategoryFilter("cost", {"low": _cost_is("low"), "medium": _cost_is("medium"), "high": _cost_is("high")}),
    ],
    statistics=service_statistics,
    display_labels={"vendor_name": ("vendors.name", UNKNOWN_VENDOR)},
    decorate=decorate_service,
)

# ========================================
# TÉCNICOS
# ========================================

def decorate_technician(row: Row, _now: datetime) -> Row:
    row["service_count"] = len(row.get("service_ids") or [])
    return row


def technician_statistics(rows: List[Row], _now: datetime) -> Dict[str, Any]:
    available = sum(1 for row in rows if row.get("is_available"))
    return {
        "total_technicians": len(rows),
        "available_technicians": available,
        "unavailable_technicians": len(rows) - available,
        "avg_services_per_technician": (
            sum(len(row.get("service_ids") or []) for row in rows) / len(rows) if rows else 0
        ),
    }


TECHNICIANS = PageConfig(
    "technicians",
    "technician",
    "name",
    search_fields=["name", "contact"],
    filters=[
        CategoryFilter("availability", {
            "available": lambda row, _now: bool(row.get("is_available")),
            "unavailable": lambda row, _now: not row.get("is_available"),
        }),
    ],
    statistics=technician_statistics,
    decorate=decorate_technician,
)

# ========================================
# PEDIDOS
# ========================================

def order_statistics(rows: List[Row], _now: datetime) -> Dict[str, Any]:
    return {
        "total_orders": len(rows),
        "total_revenue": _sum(rows, "total_amount"),
        "pending_orders": _count(rows, "status", OrderStatus.PENDING.value),
        "completed_orders": _count(rows, "status", OrderStatus.COMPLETED.value),
        "item_orders": _count(rows, "type", OrderType.ITEM.value),
        "service_orders": _count(rows, "type", OrderType.SERVICE.value),
    }


ORDERS = PageConfig(
    "orders",
    "order",
    "created_at",
    descending=True,
    joins={"clients": ["name"]},
    search_fields=["clients.name", "id"],
    filters=[
        CategoryFilter.exact("status", "status", [s.value for s in OrderStatus]),
        CategoryFilter.exact("type", "type", [t.value for t in OrderType]),
    ],
    statistics=order_statistics,
    display_labels={"client_name": ("clients.name", UNKNOWN_CLIENT)},
)

# ========================================
# DOCUMENTOS
# ========================================

def decorate_document(row: Row, now: datetime) -> Row:
    row["is_overdue"] = is_overdue(row, now)
    return row


def document_statistics(rows: List[Row], now: datetime) -> Dict[str, Any]:
    return {
        "total_documents": len(rows),
        "pending_documents": _count(rows, "status", DocumentStatus.PENDING.value),
        "approved_documents": _count(rows, "status", DocumentStatus.APPROVED.value),
        "paid_documents": _count(rows, "status", DocumentStatus.PAID.value),
        "overdue_documents": sum(1 for row in rows if is_overdue(row, now)),
    }


DOCUMENTS = PageConfig(
    "documents",
    "document",
    "created_at",
    descending=True,
    joins={"clients": ["name"], "orders": ["type", "total_amount"]},
    search_fields=["document_number", "clients.name", "type"],
    filters=[
        CategoryFilter.exact("status", "status", [s.value for s in DocumentStatus]),
        CategoryFilter.exact("type", "type", [t.value for t in DocumentType]),
    ],
    statistics=document_statistics,
    display_labels={
        "client_name": ("clients.name", UNKNOWN_CLIENT),
        "order_type": ("orders.type", UNKNOWN_ORDER),
    },
    decorate=decorate_document,
)

# ========================================
# PAGOS
# ========================================

def _paid_since(days: int):
    """Pagos desde el inicio de hoy menos `days` días."""
    def predicate(row: Row, now: datetime) -> bool:
        cutoff = start_of_day(as_aware(now)) - timedelta(days=days)
        paid_at = as_aware(row.get("payment_date"))
        return paid_at is not None and paid_at >= cutoff
    return predicate


def payment_statistics(rows: List[Row], now: datetime) -> Dict[str, Any]:
    """Pagos de hoy (misma fecha que now) y recientes (últimos 7 x 24 h)."""
    now = as_aware(now)
    paid_at = [as_aware(row.get("payment_date")) for row in rows]
    week_ago = now - timedelta(days=7)
    return {
        "total_payments": len(rows),
        "total_amount_paid": _sum(rows, "amount_paid"),
        "total_outstanding": _sum(rows, "balance"),
        "today_payments": sum(1 for moment in paid_at if moment is not None and moment.date() == now.date()),
        "recent_payments": sum(1 for moment in paid_at if moment is not None and moment >= week_ago),
    }


PAYMENTS = PageConfig(
    "payments",
    "payment",
    "payment_date",
    descending=True,
    joins={"clients": ["name"], "orders": ["type", "total_amount"]},
    search_fields=["clients.name", "id"],
    filters=[
        CategoryFilter("date", {"today": _paid_since(0), "week": _paid_since(7), "month": _paid_since(30)}),
    ],
    statistics=payment_statistics,
    display_labels={
        "client_name": ("clients.name", UNKNOWN_CLIENT),
        "order_type": ("orders.type", UNKNOWN_ORDER),
    },
)

PAGES = {
    page.resource: page
    for page in (CLIENTS, VENDORS, ITEMS, SERVICES, TECHNICIANS, ORDERS, DOCUMENTS, PAYMENTS)
}
