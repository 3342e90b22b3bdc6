# backend/app/api/v1/endpoints/dashboard.py
"""
Endpoint del panel principal.
"""

from fastapi import APIRouter, Depends

from app.api import deps
from app.crud.gateway import DataGateway
from app.schemas.dashboard_schema import DashboardResponse
from app.services.dashboard_service import dashboard_service

router = APIRouter(dependencies=[Depends(deps.verify_api_key)])


@router.get("/", response_model=DashboardResponse)
async def read_dashboard(gateway: DataGateway = Depends(deps.get_gateway)) -> DashboardResponse:
    """
    Contadores por entidad, facturación y saldo pendiente (desde
    client_summary) y los últimos pedidos. Si una consulta falla, el resto
    se devuelve igualmente y la fuente aparece en failed_sources.
    """
    return await dashboard_service.get_dashboard(gateway)
