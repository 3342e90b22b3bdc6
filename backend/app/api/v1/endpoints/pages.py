# backend/app/api/v1/endpoints/pages.py
"""
Fábrica de routers REST para las páginas de listado.

Todas las entidades comparten los mismos cinco endpoints (listar con
búsqueda y filtros, obtener, crear, actualizar y borrar con confirmación).
Cada módulo de entidad llama a build_page_router con sus esquemas y, si
lo necesita, con una función de creación propia.
"""

from typing import Any, Awaitable, Callable, Dict, Optional, Type
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from pydantic import BaseModel

from app.api import deps
from app.core.exceptions import GatewayError, RecordNotFound
from app.crud.gateway import DataGateway
from app.schemas.page_schema import ListPageResponse
from app.services.list_page import ListPageController
from app.services.page_service import page_service, to_payload

logger = logging.getLogger(__name__)

Creator = Callable[[DataGateway, Any], Awaitable[Dict[str, Any]]]

# Parámetros de consulta que no son filtros de categoría
RESERVED_PARAMS = {"search"}


def http_error_for(error: GatewayError) -> HTTPException:
    """404 si el registro no existe, 502 para cualquier otra falla del almacén."""
    if isinstance(error, RecordNotFound):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=error.message)
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=error.message)


def page_result(ok: bool, controller: ListPageController) -> ListPageResponse:
    """Respuesta de una acción: error HTTP si la mutación falló, estado recargado si no."""
    if not ok and controller.last_error is not None:
        raise http_error_for(controller.last_error)
    return controller.snapshot()


def build_page_router(
    resource: str,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    response_schema: Type[BaseModel],
    creator: Optional[Creator] = None,
) -> APIRouter:
    router = APIRouter(dependencies=[Depends(deps.verify_api_key)])
    label = page_service.get_config(resource).label

    @router.get("/", response_model=ListPageResponse)
    async def read_page(
        request: Request,
        search: Optional[str] = Query(None, description="Búsqueda de texto libre"),
        gateway: DataGateway = Depends(deps.get_gateway),
    ) -> ListPageResponse:
        """
        Lista la entidad con búsqueda de texto y filtros de categoría
        (cualquier otro parámetro de consulta, p. ej. ?status=pending).
        Si la carga falla, la respuesta llega vacía con una notificación de error.
        """
        filters = {k: v for k, v in request.query_params.items() if k not in RESERVED_PARAMS}
        try:
            controller = await page_service.open_page(gateway, resource, search=search, filters=filters)
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        return controller.snapshot()

    @router.get("/{record_id}")
    async def read_record(
        record_id: str,
        gateway: DataGateway = Depends(deps.get_gateway),
    ) -> Dict[str, Any]:
        """Un registro con relaciones y campos derivados."""
        try:
            return await page_service.get_row(gateway, resource, record_id)
        except GatewayError as e:
            raise http_error_for(e)

    @router.post("/", response_model=response_schema, status_code=status.HTTP_201_CREATED)
    async def create_record(
        record_in: create_schema,
        gateway: DataGateway = Depends(deps.get_gateway),
    ):
        logger.info(f"🆕 {resource.upper()}: Creando {label}")
        try:
            if creator is not None:
                return await creator(gateway, record_in)
            return await gateway.insert(resource, to_payload(record_in))
        except GatewayError as e:
            raise http_error_for(e)

    @router.patch("/{record_id}", response_model=response_schema)
    async def update_record(
        record_id: str,
        record_in: update_schema,
        gateway: DataGateway = Depends(deps.get_gateway),
    ):
        payload = to_payload(record_in, exclude_unset=True)
        if not payload:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No fields to update")
        try:
            return await gateway.update(resource, record_id, payload)
        except GatewayError as e:
            raise http_error_for(e)

    @router.delete("/{record_id}", response_model=ListPageResponse)
    async def delete_record(
        record_id: str,
        confirm: bool = Query(False, description="Debe ser true para borrar"),
        gateway: DataGateway = Depends(deps.get_gateway),
    ) -> ListPageResponse:
        """Borrado irreversible; sin confirm=true no se toca nada."""
        if not confirm:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Deleting a {label} requires confirm=true",
            )
        ok, controller = await page_service.delete(gateway, resource, record_id, confirmed=True)
        return page_result(ok, controller)

    return router
