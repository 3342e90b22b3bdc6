# backend/app/api/v1/endpoints/reports.py
"""
Endpoints de informes por periodo.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status
import logging

from app.api import deps
from app.crud.gateway import DataGateway
from app.schemas.page_schema import ActionResponse
from app.schemas.report_schema import ReportResponse, ReportType
from app.services.periods import ReportPeriod
from app.services.report_service import report_service

logger = logging.getLogger(__name__)
router = APIRouter(dependencies=[Depends(deps.verify_api_key)])


@router.get("/", response_model=ReportResponse)
async def read_report(
    period: ReportPeriod = Query(ReportPeriod.MONTH, description="week, month, quarter o year"),
    gateway: DataGateway = Depends(deps.get_gateway),
) -> ReportResponse:
    return await report_service.get_report(gateway, period)


@router.post("/generate/{report_type}", response_model=ActionResponse)
async def generate_report(report_type: str) -> ActionResponse:
    """Acusa recibo de la petición de informe; el tipo debe ser uno de los conocidos."""
    try:
        known_type = ReportType(report_type)
    except ValueError:
        logger.warning(f"⚠️ INFORMES: Tipo de informe desconocido '{report_type}'")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown report type '{report_type}'")
    notifier = report_service.generate_report(known_type)
    return ActionResponse(ok=True, notifications=notifier.notifications)
