# backend/app/crud/order_crud.py
"""
Este archivo contiene las operaciones de creación de pedidos.

Un pedido puede crearse con sus líneas: cada línea calcula su subtotal
(cantidad x precio unitario) y el total del pedido es la suma de subtotales.
Las inserciones son llamadas independientes al gateway, sin transacción común.
"""

from typing import Any, Dict, List

from app.crud.gateway import DataGateway
from app.schemas.order_schema import OrderCreate, OrderDetailCreate


def calculate_subtotal(quantity: int, unit_price: float) -> float:
    return round(quantity * unit_price, 2)


def calculate_order_total(details: List[OrderDetailCreate]) -> float:
    return round(sum(calculate_subtotal(d.quantity, d.unit_price) for d in details), 2)


async def create_order(db: DataGateway, order: OrderCreate) -> Dict[str, Any]:
    """
    Crea un nuevo pedido y, si las trae, sus líneas.
    """
    total_amount = calculate_order_total(order.details) if order.details else order.total_amount

    db_order = await db.insert("orders", {
        "client_id": order.client_id,
        "type": order.type.value,
        "total_amount": total_amount,
        "status": order.status.value,
    })

    details = []
    for item_data in order.details:
        details.append(await db.insert("order_details", {
            "order_id": db_order["id"],
            "item_id": item_data.item_id,
            "service_id": item_data.service_id,
            "quantity": item_data.quantity,
            "unit_price": item_data.unit_price,
            "subtotal": calculate_subtotal(item_data.quantity, item_data.unit_price),
        }))

    db_order["details"] = details
    return db_order


async def get_order_with_details(db: DataGateway, order_id: str) -> Dict[str, Any]:
    """Obtiene un pedido con sus líneas (RecordNotFound si no existe)."""
    db_order = await db.get("orders", order_id)
    db_order["details"] = await db.select("order_details", filters={"order_id": order_id}, order_by="created_at")
    return db_order
