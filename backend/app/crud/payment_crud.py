# backend/app/crud/payment_crud.py
"""
Operaciones de creación para el recurso payments.
"""

from typing import Any, Dict

from app.crud.gateway import DataGateway
from app.schemas.payment_schema import PaymentCreate


async def get_paid_amount(db: DataGateway, order_id: str) -> float:
    """Suma de los pagos ya registrados para un pedido."""
    rows = await db.select("payments", columns=["amount_paid"], filters={"order_id": order_id})
    return sum(row["amount_paid"] or 0 for row in rows)


async def create_payment(db: DataGateway, payment: PaymentCreate) -> Dict[str, Any]:
    """
    Registra un pago. El saldo es el total del pedido menos todos los pagos,
    incluido este; no se recalcula si luego cambian pedido o pagos.
    """
    order = await db.get("orders", payment.order_id)
    already_paid = await get_paid_amount(db, payment.order_id)
    balance = round((order["total_amount"] or 0) - already_paid - payment.amount_paid, 2)

    payload = {
        "client_id": payment.client_id,
        "order_id": payment.order_id,
        "amount_paid": payment.amount_paid,
        "balance": balance,
    }
    if payment.payment_date is not None:
        payload["payment_date"] = payment.payment_date
    return await db.insert("payments", payload)
