# backend/app/api/v1/endpoints/documents.py
"""
Endpoints REST para documentos comerciales (proformas, albaranes, recibos...).
"""

from fastapi import Depends
import logging

from app.api import deps
from app.api.v1.endpoints.pages import build_page_router, page_result
from app.crud import document_crud
from app.crud.gateway import DataGateway
from app.schemas import document_schema
from app.schemas.page_schema import ListPageResponse
from app.services.page_service import page_service

logger = logging.getLogger(__name__)

router = build_page_router(
    "documents",
    document_schema.DocumentCreate,
    document_schema.DocumentUpdate,
    document_schema.DocumentResponse,
    creator=document_crud.create_document,
)


@router.patch("/{document_id}/status", response_model=ListPageResponse)
async def update_document_status(
    document_id: str,
    status_in: document_schema.DocumentStatusUpdate,
    gateway: DataGateway = Depends(deps.get_gateway),
) -> ListPageResponse:
    logger.info(f"🔄 DOCUMENTO: Estado de '{document_id}' -> '{status_in.status.value}'")
    ok, controller = await page_service.set_status(gateway, "documents", document_id, status_in.status)
    return page_result(ok, controller)
