# backend/app/api/v1/endpoints/technicians.py
"""
Endpoints REST para técnicos, incluido el cambio de disponibilidad.
"""

from fastapi import Depends
import logging

from app.api import deps
from app.api.v1.endpoints.pages import build_page_router, http_error_for, page_result
from app.core.exceptions import GatewayError
from app.crud.gateway import DataGateway
from app.schemas import technician_schema
from app.schemas.page_schema import ListPageResponse
from app.services.page_service import page_service

logger = logging.getLogger(__name__)

router = build_page_router(
    "technicians",
    technician_schema.TechnicianCreate,
    technician_schema.TechnicianUpdate,
    technician_schema.TechnicianResponse,
)


@router.patch("/{technician_id}/availability", response_model=ListPageResponse)
async def toggle_technician_availability(
    technician_id: str,
    gateway: DataGateway = Depends(deps.get_gateway),
) -> ListPageResponse:
    """Invierte la disponibilidad del técnico y devuelve la página recargada."""
    logger.info(f"🔄 TÉCNICO: Cambiando disponibilidad de '{technician_id}'")
    try:
        ok, controller = await page_service.toggle_availability(gateway, technician_id)
    except GatewayError as e:
        raise http_error_for(e)
    return page_result(ok, controller)
