# backend/app/api/v1/endpoints/payments.py
"""
Endpoints REST para pagos de clientes.

El saldo de cada pago se calcula al crearlo a partir del total del pedido
y de los pagos anteriores.
"""

from fastapi import Depends
import logging

from app.api import deps
from app.api.v1.endpoints.pages import build_page_router, http_error_for
from app.core.exceptions import GatewayError
from app.crud import payment_crud
from app.crud.gateway import DataGateway
from app.schemas import payment_schema
from app.schemas.page_schema import ActionResponse
from app.services.page_service import page_service

logger = logging.getLogger(__name__)

router = build_page_router(
    "payments",
    payment_schema.PaymentCreate,
    payment_schema.PaymentUpdate,
    payment_schema.PaymentResponse,
    creator=payment_crud.create_payment,
)


@router.post("/{payment_id}/receipt", response_model=ActionResponse)
async def generate_payment_receipt(
    payment_id: str,
    gateway: DataGateway = Depends(deps.get_gateway),
) -> ActionResponse:
    """Solo confirma la petición; no se genera ningún fichero."""
    logger.info(f"🧾 PAGO: Recibo solicitado para '{payment_id}'")
    try:
        notifier = await page_service.generate_receipt(gateway, payment_id)
    except GatewayError as e:
        raise http_error_for(e)
    return ActionResponse(ok=True, notifications=notifier.notifications)
