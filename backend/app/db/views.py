# backend/app/db/views.py
"""
Vistas agregadas de solo lectura.

Cada vista es una consulta SQLAlchemy (subquery con nombre) que el gateway
expone como un recurso más: `client_summary`, `vendor_performance` e
`inventory_status`. El motor de base de datos hace la agregación; la
aplicación solo suma o filtra las filas ya calculadas.
"""

from sqlalchemy import select, func, case, literal

from app.core.constants import LOW_STOCK_THRESHOLD
from app.db.models.client_model import Client
from app.db.models.vendor_model import Vendor
from app.db.models.catalog_model import Item, Service
from app.db.models.order_model import Order, OrderDetail
from app.db.models.payment_model import Payment

# ========================================
# CLIENT SUMMARY
# ========================================

_order_totals = (
    select(
        Order.client_id.label("client_id"),
        func.count(Order.id).label("total_orders"),
        func.sum(Order.total_amount).label("total_revenue"),
        func.max(Order.created_at).label("last_order_date"),
    )
    .group_by(Order.client_id)
    .subquery("order_totals")
)

_payment_totals = (
    select(
        Payment.client_id.label("client_id"),
        func.sum(Payment.amount_paid).label("total_paid"),
    )
    .group_by(Payment.client_id)
    .subquery("payment_totals")
)

_revenue = func.coalesce(_order_totals.c.total_revenue, 0)

client_summary = (
    select(
        Client.id.label("id"),
        Client.name.label("name"),
        Client.contact.label("contact"),
        Client.credit_limit.label("credit_limit"),
        Client.credit_days.label("credit_days"),
        func.coalesce(_order_totals.c.total_orders, 0).label("total_orders"),
        _revenue.label("total_revenue"),
        (_revenue - func.coalesce(_payment_totals.c.total_paid, 0)).label("outstanding_balance"),
        _order_totals.c.last_order_date.label("last_order_date"),
    )
    .select_from(Client)
    .outerjoin(_order_totals, _order_totals.c.client_id == Client.id)
    .outerjoin(_payment_totals, _payment_totals.c.client_id == Client.id)
    .subquery("client_summary")
)

# ========================================
# VENDOR PERFORMANCE
# ========================================

# Cada línea de pedido se atribuye al proveedor de su artículo o servicio
_vendor_lines = (
    select(
        OrderDetail.order_id.label("order_id"),
        OrderDetail.subtotal.label("subtotal"),
        func.coalesce(Item.vendor_id, Service.vendor_id).label("vendor_id"),
    )
    .select_from(OrderDetail)
    .outerjoin(Item, OrderDetail.item_id == Item.id)
    .outerjoin(Service, OrderDetail.service_id == Service.id)
    .subquery("vendor_lines")
)

_vendor_sales = (
    select(
        _vendor_lines.c.vendor_id.label("vendor_id"),
        func.count(func.distinct(_vendor_lines.c.order_id)).label("total_orders"),
        func.sum(_vendor_lines.c.subtotal).label("total_revenue"),
    )
    .where(_vendor_lines.c.vendor_id.is_not(None))
    .group_by(_vendor_lines.c.vendor_id)
    .subquery("vendor_sales")
)

_item_counts = (
    select(Item.vendor_id.label("vendor_id"), func.count(Item.id).label("total_items"))
    .group_by(Item.vendor_id)
    .subquery("item_counts")
)

_service_counts = (
    select(Service.vendor_id.label("vendor_id"), func.count(Service.id).label("total_services"))
    .group_by(Service.vendor_id)
    .subquery("service_counts")
)

_vendor_orders = func.coalesce(_vendor_sales.c.total_orders, 0)

vendor_performance = (
    select(
        Vendor.id.label("id"),
        Vendor.name.label("name"),
        Vendor.type.label("type"),
        _vendor_orders.label("total_orders"),
        func.coalesce(_vendor_sales.c.total_revenue, 0).label("total_revenue"),
        case(
            (_vendor_orders > 0, _vendor_sales.c.total_revenue / _vendor_sales.c.total_orders),
            else_=None,
        ).label("avg_order_value"),
        func.coalesce(_item_counts.c.total_items, 0).label("total_items"),
        func.coalesce(_service_counts.c.total_services, 0).label("total_services"),
    )
    .select_from(Vendor)
    .outerjoin(_vendor_sales, _vendor_sales.c.vendor_id == Vendor.id)
    .outerjoin(_item_counts, _item_counts.c.vendor_id == Vendor.id)
    .outerjoin(_service_counts, _service_counts.c.vendor_id == Vendor.id)
    .subquery("vendor_performance")
)

# ========================================
# INVENTORY STATUS
# ========================================

inventory_status = (
    select(
        Item.id.label("id"),
        Item.name.label("name"),
        Vendor.name.label("vendor_name"),
        Item.stock_qty.label("stock_qty"),
        Item.buy_price.label("buy_price"),
        Item.sell_price.label("sell_price"),
        case(
            (Item.buy_price == 0, literal(0)),
            else_=(Item.sell_price - Item.buy_price) * 100.0 / Item.buy_price,
        ).label("profit_margin"),
        case(
            (Item.stock_qty == 0, literal("out_of_stock")),
            (Item.stock_qty <= LOW_STOCK_THRESHOLD, literal("low_stock")),
            else_=literal("in_stock"),
        ).label("stock_status"),
    )
    .select_from(Item)
    .outerjoin(Vendor, Item.vendor_id == Vendor.id)
    .subquery("inventory_status")
)

VIEWS = {
    "client_summary": client_summary,
    "vendor_performance": vendor_performance,
    "inventory_status": inventory_status,
}
