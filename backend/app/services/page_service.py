# backend/app/services/page_service.py
"""
Servicio que orquesta las páginas de listado para los endpoints.

Traduce parámetros de petición (búsqueda y filtros) a un
ListPageController ya cargado, y expone las acciones de cada página:
borrado con confirmación, cambio de estado, disponibilidad de técnicos
y generación de recibos. Los fallos del gateway se devuelven dentro del
controlador (last_error + notificación) para que el endpoint decida el
código HTTP.
"""

from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Tuple
import enum
import logging

from pydantic import BaseModel

from app.core.exceptions import RecordNotFound
from app.crud.gateway import DataGateway
from app.services.entity_pages import PAGES
from app.services.list_page import ListPageController, PageConfig
from app.services.notifications import Notifier

logger = logging.getLogger(__name__)


def to_payload(model: BaseModel, exclude_unset: bool = False) -> Dict[str, Any]:
    """Convierte un esquema en un diccionario para el gateway (enums como texto)."""
    payload = model.model_dump(exclude_unset=exclude_unset)
    return {key: value.value if isinstance(value, enum.Enum) else value for key, value in payload.items()}


class PageService:
    """
    Servicio de páginas de listado.

    Cada método abre un controlador ya cargado para la entidad y, en las
    acciones, devuelve también si la mutación tuvo éxito.
    """

    def get_config(self, resource: str) -> PageConfig:
        if resource not in PAGES:
            raise KeyError(resource)
        return PAGES[resource]

    async def open_page(
        self,
        gateway: DataGateway,
        resource: str,
        search: Optional[str] = None,
        filters: Optional[Mapping[str, str]] = None,
        now: Optional[datetime] = None,
    ) -> ListPageController:
        """
        Carga la página y aplica búsqueda y filtros.

        Lanza ValueError si un filtro o su valor no existen para la entidad;
        esto se valida antes de consultar el almacén.
        """
        controller = ListPageController(gateway, self.get_config(resource), now=now)
        for name, value in (filters or {}).items():
            controller.set_filter(name, value)
        controller.set_search(search)
        await controller.load()
        return controller

    async def get_row(self, gateway: DataGateway, resource: str, record_id: str) -> Dict[str, Any]:
        """Una fila con las mismas relaciones y campos derivados que el listado."""
        controller = ListPageController(gateway, self.get_config(resource))
        row = await gateway.get(resource, record_id, joins=controller.config.joins)
        return controller.present(row)

    # ========================================
    # ACCIONES
    # ========================================

    async def delete(self, gateway: DataGateway, resource: str, record_id: str, confirmed: bool) -> Tuple[bool, ListPageController]:
        controller = await self.open_page(gateway, resource)
        ok = await controller.delete(record_id, confirmed=confirmed)
        return ok, controller

    async def set_status(self, gateway: DataGateway, resource: str, record_id: str, status: enum.Enum) -> Tuple[bool, ListPageController]:
        """Cambio de estado de pedidos o documentos; cualquier estado válido es aceptado."""
        controller = await self.open_page(gateway, resource)
        label = controller.config.label
        ok = await controller.update_field(
            record_id,
            "status",
            status.value,
            success_message=f"{label.capitalize()} status updated successfully",
            failure_message=f"Failed to update {label} status",
        )
        return ok, controller

    async def toggle_availability(self, gateway: DataGateway, record_id: str) -> Tuple[bool, ListPageController]:
        """Invierte is_available del técnico según el valor cargado."""
        controller = await self.open_page(gateway, "technicians")
        if controller.last_error is not None:
            raise controller.last_error
        current = controller.find(record_id)
        if current is None:
            raise RecordNotFound("technicians", record_id)
        ok = await controller.update_field(
            record_id,
            "is_available",
            not current.get("is_available"),
            success_message="Technician availability updated successfully",
            failure_message="Failed to update technician availability",
        )
        return ok, controller

    async def generate_receipt(self, gateway: DataGateway, payment_id: str) -> Notifier:
        """Acuse de recibo sin generar fichero; el pago debe existir."""
        await gateway.get("payments", payment_id)
        notifier = Notifier()
        notifier.success("Receipt generated successfully")
        return notifier


page_service = PageService()
