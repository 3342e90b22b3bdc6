# backend/app/api/v1/endpoints/orders.py
"""
Endpoints REST para pedidos.

La creación acepta líneas de pedido; en ese caso el total se calcula
como la suma de subtotales. El estado puede cambiarse a cualquier valor
válido, sin imponer un orden de transiciones.
"""

from fastapi import Depends
import logging

from app.api import deps
from app.api.v1.endpoints.pages import build_page_router, http_error_for, page_result
from app.core.exceptions import GatewayError
from app.crud import order_crud
from app.crud.gateway import DataGateway
from app.schemas import order_schema
from app.schemas.page_schema import ListPageResponse
from app.services.page_service import page_service

logger = logging.getLogger(__name__)

router = build_page_router(
    "orders",
    order_schema.OrderCreate,
    order_schema.OrderUpdate,
    order_schema.OrderWithDetails,
    creator=order_crud.create_order,
)


@router.get("/{order_id}/details", response_model=order_schema.OrderWithDetails)
async def read_order_with_details(
    order_id: str,
    gateway: DataGateway = Depends(deps.get_gateway),
):
    """Pedido con todas sus líneas."""
    try:
        return await order_crud.get_order_with_details(gateway, order_id)
    except GatewayError as e:
        raise http_error_for(e)


@router.patch("/{order_id}/status", response_model=ListPageResponse)
async def update_order_status(
    order_id: str,
    status_in: order_schema.OrderStatusUpdate,
    gateway: DataGateway = Depends(deps.get_gateway),
) -> ListPageResponse:
    logger.info(f"🔄 PEDIDO: Estado de '{order_id}' -> '{status_in.status.value}'")
    ok, controller = await page_service.set_status(gateway, "orders", order_id, status_in.status)
    return page_result(ok, controller)
